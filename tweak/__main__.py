"""Allow running tweak as ``python -m tweak``."""

import sys

from tweak.entrypoints.cli import main

sys.exit(main())
