"""Allow ``python -m clockface``."""

import sys

from clockface.cli import main

sys.exit(main())
