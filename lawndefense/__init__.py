"""A lane-based tower defence game with plants, zombies and lawn mowers."""

__version__ = "0.1.0"