"""Fantasy Soccer - player scoring and team validation API."""

__version__ = "0.1.0"
