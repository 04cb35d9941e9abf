"""Main entry point for arscript CLI when run as a module."""

from arscript.cli.main import main

if __name__ == "__main__":  # pragma: no cover
    main()
