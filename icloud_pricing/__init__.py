"""iCloud+ regional pricing: collection pipeline and launcher query tool."""

__version__ = "0.1.0"
