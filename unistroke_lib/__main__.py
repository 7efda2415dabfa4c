"""Allow ``python -m unistroke_lib``."""

import sys

from .cli import main

sys.exit(main())
