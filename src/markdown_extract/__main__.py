"""Allow ``python -m markdown_extract``."""

import sys

from markdown_extract.cli import main

sys.exit(main())
