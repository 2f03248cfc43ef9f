"""Compare localization resource trees across languages."""

__version__ = "1.0.0"
