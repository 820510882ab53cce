"""Allow ``python -m hyprgborder``."""

from hyprgborder.cli import cli

if __name__ == "__main__":
    cli()
