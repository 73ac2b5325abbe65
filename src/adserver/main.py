"""Main entry point for the adserver application."""

from .interface.cli import main

if __name__ == "__main__":
    main()
