"""AI news reader — fetch, tag and browse artificial-intelligence headlines."""

__version__ = "0.1.0"
