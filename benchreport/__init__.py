"""Load a report configuration and append Markdown tables comparing benchmark medians."""

__version__ = "0.1.0"
__all__ = ["config", "report"]