"""Allow ``python -m initgo``."""

import sys

from initgo.cli import main

sys.exit(main())
