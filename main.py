"""Entry point — open a place file in Roblox Studio."""

from __future__ import annotations

import sys

from roblox_install.launcher import main

if __name__ == "__main__":
    sys.exit(main())
