"""A side-scrolling space shooter with weapons, pickups, high scores and an icon tool."""

__version__ = "1.0.0"