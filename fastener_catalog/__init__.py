"""JIS fastener catalog generation and shipping cost computation."""

__version__ = "0.1.0"
