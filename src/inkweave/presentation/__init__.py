"""Presentation layers built on the story services."""
