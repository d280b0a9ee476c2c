"""Newsfeed - NewsAPI proxy server with rate-limit cache fallback."""

__version__ = "1.0.0"
