"""Application lifecycle events."""

from recipeshare.core.events.lifespan import lifespan


__all__ = ["lifespan"]
