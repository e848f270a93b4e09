"""Version information for litellm-status."""

__version__ = "0.3.0"
