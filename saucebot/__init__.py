"""saucebot - find the sauce of an image."""

__version__ = "0.1.0"
