"""Unix-style command-line utilities, text helpers and design pattern demos."""

__version__ = "0.1.0"