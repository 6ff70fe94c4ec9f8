"""Fetch a web page and extract its links, link text, nested images and emails."""

__version__ = "0.1.0"
