"""Module entrypoint for ``python -m panefm``."""

from .cli import main


if __name__ == "__main__":
    main()
