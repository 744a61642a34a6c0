"""Allow ``python -m resolution``."""

from resolution.cli import cli

if __name__ == "__main__":
    cli(prog_name="resolution")
