"""OSS Issue Opener: CI failure and pending release tracking for repositories."""

__version__ = "0.1.0"
