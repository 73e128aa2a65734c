"""Command-line interface for gust."""
