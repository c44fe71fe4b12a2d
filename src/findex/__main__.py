"""Entry point for ``python -m findex``."""

from .cli.main import main

if __name__ == "__main__":
    main()
