"""Entry point for ``python -m quickopen``."""

from quickopen.cli import app

if __name__ == "__main__":
    app()
