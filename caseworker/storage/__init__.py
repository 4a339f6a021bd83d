from .database import TaskStore

__all__ = ["TaskStore"]
