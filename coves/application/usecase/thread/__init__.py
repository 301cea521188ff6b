"""Thread use cases."""

from .focus_thread import FocusThreadRequest, FocusThreadResponse, FocusThreadUseCase
from .get_thread import GetThreadRequest, GetThreadResponse, GetThreadUseCase
from .schemas import CommentItem, RenderRow, plan_rows

__all__ = [
    "CommentItem",
    "FocusThreadRequest",
    "FocusThreadResponse",
    "FocusThreadUseCase",
    "GetThreadRequest",
    "GetThreadResponse",
    "GetThreadUseCase",
    "RenderRow",
    "plan_rows",
]
