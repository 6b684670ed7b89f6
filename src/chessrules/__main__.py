"""Allow ``python -m chessrules``."""

import sys

from chessrules.cli import main

sys.exit(main())
