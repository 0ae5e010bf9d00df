"""quotecheck: verify quotations in article drafts against their sources."""

__version__ = "1.0.0"
