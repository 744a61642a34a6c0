"""resolution — manage New Year's resolutions from the command line."""

__version__ = "0.1.0"
