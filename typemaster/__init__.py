"""Terminal typing-speed test."""

__version__ = "0.1.0"
