"""Allow ``python -m garden_world``."""

from .cli import main

if __name__ == "__main__":
    main()
