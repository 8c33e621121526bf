"""A small vertical arcade shooter with scenes, enemy waves and pooled bullets."""

__version__ = "0.1.0"