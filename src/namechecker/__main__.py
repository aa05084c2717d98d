"""Allow `python -m namechecker`."""

from . import main

if __name__ == "__main__":
    main()
