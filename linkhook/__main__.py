"""Allow ``python -m linkhook``."""

import sys

from linkhook.cli import main

sys.exit(main())
