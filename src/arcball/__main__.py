"""Allow `python -m arcball`."""

import sys

from .cli import main

sys.exit(main())
