"""Allow ``python -m spr_extractor``."""
import sys

from .cli import main

sys.exit(main())
