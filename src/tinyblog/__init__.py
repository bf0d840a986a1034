"""Tinyblog: a minimal multi-user blogging API."""

__version__ = "0.1.0"
