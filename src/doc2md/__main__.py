"""Allow ``python -m doc2md``."""

import sys

from doc2md.cli import main

sys.exit(main())
