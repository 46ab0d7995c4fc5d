"""Small web services, concurrency exercises and space shooter rules."""

__version__ = "0.1.0"