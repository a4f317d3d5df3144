"""Allow running the CLI with ``python -m mqctl``."""

import sys

from .cli import main

sys.exit(main())
