"""Semantic version bumping, tag parsing, release configuration and file transforms for git projects."""

__version__ = "0.1.0"