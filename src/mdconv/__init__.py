"""mdconv: Markdown front matter extraction and HTML conversion CLI."""

__version__ = "0.3.0"
