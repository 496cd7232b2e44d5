"""PlacementLog - moderated placement experience posts and placement statistics."""

__version__ = "1.0.0"
