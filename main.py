"""Application entry point."""
from __future__ import annotations

import sys

from oncall_bot.main import main

if __name__ == "__main__":
    sys.exit(main())
