"""Dragon Typing: a typing game where each word must be typed before its timer runs out."""

__version__ = "1.0.0"