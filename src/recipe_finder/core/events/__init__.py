"""Application lifecycle events."""

from recipe_finder.core.events.lifespan import lifespan


__all__ = ["lifespan"]
