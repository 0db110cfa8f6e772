"""Allow ``python -m xmlclasscheck``."""

import sys

from .cli import main

sys.exit(main())
