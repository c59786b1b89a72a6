"""Single-page SEO metadata analyzer."""

__version__ = "0.1.0"
