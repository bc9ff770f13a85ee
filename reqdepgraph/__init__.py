"""Build plain-text requirement dependency reports from Markdown documents."""

__version__ = "0.1.0"