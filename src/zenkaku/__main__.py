"""Allow ``python -m zenkaku``."""

from zenkaku.cli import cli

if __name__ == "__main__":
    cli()
