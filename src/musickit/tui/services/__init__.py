"""TUI services."""

from .board_view import BoardViewService

__all__ = ["BoardViewService"]
