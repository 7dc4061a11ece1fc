"""Utility functions for saucebot."""
