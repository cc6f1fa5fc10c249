"""Admin API for a blog kept as static HTML files."""

__version__ = "0.1.0"
