"""Allow ``python -m svg_icon_sprite``."""

import sys

from svg_icon_sprite.main import main

if __name__ == "__main__":
    sys.exit(main())
