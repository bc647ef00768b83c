from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field
from textual.widget import Widget

class DeskWidgetsError(Exception):
    pass

class EmptyTaskText(DeskWidgetsError, ValueError):
    def __init__(self) -> None:
        super().__init__('Please enter a task!')

class StorageCorrupted(DeskWidgetsError):
    pass

class TimeFields(BaseModel):
    hours: str
    minutes: str
    seconds: str

    model_config = ConfigDict(
        frozen=True,
    )

    def render(self) -> str:
        return f'{self.hours}:{self.minutes}:{self.seconds}'

def formatTime(total_seconds: int) -> TimeFields:
    '''
    Hours are not wrapped at 24 (or 100); they just grow wider.
    '''
    if total_seconds < 0:
        raise ValueError(f'{total_seconds = } is negative')
    hours = total_seconds // 3600
    minutes = (total_seconds % 3600) // 60
    seconds = total_seconds % 60
    return TimeFields(
        hours=f'{hours:02d}',
        minutes=f'{minutes:02d}',
        seconds=f'{seconds:02d}',
    )

class Task(BaseModel):
    id: int
    text: str = Field(min_length=1)
    completed: bool = False

    model_config = ConfigDict(
        frozen=True,
    )

    def toggled(self) -> Task:
        return self.model_copy(update=dict(completed=not self.completed))

def titled(
    w: Widget, /, title: str, skip_bottom: bool = True,
    style = ('round', '#999'), padding = (0, 1),
):
    w.styles.border = style
    if skip_bottom:
        w.styles.border_bottom = None
    w.border_title = title
    w.styles.padding = padding
    return w
