"""Allow ``python -m miniredis``."""

import sys

from miniredis.main import run

sys.exit(run())
