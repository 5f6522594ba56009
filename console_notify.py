#!/usr/bin/env python3
"""
Console Notify - info/warning notifications with an accessibility mode

Usage:
  python console_notify.py "Extracting archive"              # [INFO] Extracting archive
  python console_notify.py --inaccessible "Processed a.txt"  # hidden with -A
  python console_notify.py --warning "Could not read config"
  python console_notify.py -A "Extracting archive"           # no [INFO] tag
  ACCESSIBLE=1 python console_notify.py ...                  # same as -A
"""

import os
import sys

sys.path.insert(0, os.path.join(os.path.dirname(__file__), "src"))
from notify_cli import main


if __name__ == "__main__":
    sys.exit(main())
