"""statefile: JSON config and state files for command-line tools."""

__version__ = "0.1.0"
