"""Allow ``python -m audio_browser``."""

from .cli.main import cli

if __name__ == "__main__":
    cli()
