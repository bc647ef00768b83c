import logging

from textual import on
from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.containers import Horizontal, VerticalScroll
from textual.widgets import Button, Footer, Header, Input, Static

from .shared import EmptyTaskText, titled
from .todo_store import TodoStore
from .task_row import TaskRow
from .alert import AlertScreen

log = logging.getLogger(__name__)

class TodoUI(App):
    CSS_PATH = "todo.tcss"
    BINDINGS = [
        Binding("ctrl+n", "focus_input", "New task."),
    ]

    def __init__(self, store: TodoStore) -> None:
        super().__init__()

        self.store = store

        self.title = "To-Do List"

    def compose(self) -> ComposeResult:
        yield Header(show_clock=False)
        with Horizontal(id="new-task"):
            yield Input(placeholder="Add a new task...", id="todo-input")
            yield Button("Add", id="add-btn", variant="primary")
        with titled(VerticalScroll(id="todo-list"), 'Tasks', skip_bottom=False):
            yield Static("Nothing to do.", classes="empty-hint")
        yield Footer(compact=True)

    async def on_mount(self) -> None:
        self.store.load()
        await self.renderTasks()
        self.action_focus_input()

    def action_focus_input(self) -> None:
        self.query_one('#todo-input', Input).focus()

    @on(Button.Pressed, '#add-btn')
    @on(Input.Submitted, '#todo-input')
    async def addTodo(self) -> None:
        todoInput = self.query_one('#todo-input', Input)
        try:
            self.store.add(todoInput.value)
        except EmptyTaskText as e:
            self.push_screen(AlertScreen(str(e)))
            return
        await self.renderTasks()
        todoInput.value = ''

    @on(TaskRow.Toggled)
    async def toggleTodo(self, event: TaskRow.Toggled) -> None:
        self.store.toggle(event.task_id)
        await self.renderTasks()

    @on(TaskRow.Deleted)
    async def deleteTodo(self, event: TaskRow.Deleted) -> None:
        self.store.delete(event.task_id)
        await self.renderTasks()

    async def renderTasks(self) -> None:
        todoList = self.query_one('#todo-list', VerticalScroll)
        await todoList.remove_children()
        tasks = self.store.tasks
        if tasks:
            await todoList.mount_all(TaskRow(task) for task in tasks)
        else:
            await todoList.mount(Static("Nothing to do.", classes="empty-hint"))
        done = sum(1 for task in tasks if task.completed)
        todoList.border_subtitle = f'{done} / {len(tasks)} done'
        log.debug('Rendered %d tasks.', len(tasks))
