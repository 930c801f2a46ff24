"""Allow ``python -m chessmodel``."""

import sys

from chessmodel.app import main

sys.exit(main())
