from .stopwatch_UI import StopwatchUI
from .todo_UI import TodoUI
from .stopwatch import StopwatchController, StopwatchState
from .todo_store import TodoStore
from .persistent import Persistent
from .shared import Task, formatTime

__all__ = [
    "StopwatchUI", "TodoUI", "StopwatchController", "StopwatchState",
    "TodoStore", "Persistent", "Task", "formatTime",
]
