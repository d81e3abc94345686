"""Allow ``python -m chessgrid``."""

import sys

from chessgrid.app import main

sys.exit(main())
