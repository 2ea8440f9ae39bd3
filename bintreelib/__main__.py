"""Allow ``python -m bintreelib``."""

import sys

from .cli import main

sys.exit(main())
