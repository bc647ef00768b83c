from textual import on
from textual.app import ComposeResult
from textual.containers import Horizontal
from textual.message import Message
from textual.widgets import Button, Checkbox, Static

from .shared import Task

class TaskRow(Horizontal):
    class Toggled(Message):
        def __init__(self, task_id: int) -> None:
            super().__init__()
            self.task_id = task_id

    class Deleted(Message):
        def __init__(self, task_id: int) -> None:
            super().__init__()
            self.task_id = task_id

    def __init__(self, task: Task, *args, **kw) -> None:
        super().__init__(*args, **kw)

        self.task_id = task.id
        self.checkbox = Checkbox(value=task.completed, classes='task-check')
        self.textLabel = Static(task.text, classes='task-text')
        self.deleteButton = Button(
            'Delete', classes='delete-btn', variant='error', compact=True,
        )
        self.add_class('todo-item')
        if task.completed:
            self.add_class('completed')

    def compose(self) -> ComposeResult:
        yield self.checkbox
        yield self.textLabel
        yield self.deleteButton

    @on(Checkbox.Changed, '.task-check')
    def onCheck(self, event: Checkbox.Changed) -> None:
        event.stop()
        self.post_message(self.Toggled(self.task_id))

    @on(Button.Pressed, '.delete-btn')
    def onDelete(self, event: Button.Pressed) -> None:
        event.stop()
        self.post_message(self.Deleted(self.task_id))
