# SPDX-License-Identifier: LGPL-3.0-or-later
# Copyright (C) 2025-2026 Kris Kirby, KE4AHR

"""Allow running as: python -m pyax25_netstat"""

import sys

from .cli import main

if __name__ == "__main__":
    sys.exit(main())
