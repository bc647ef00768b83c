from textual import on
from textual.app import ComposeResult
from textual.binding import Binding
from textual.containers import Grid
from textual.screen import ModalScreen
from textual.widgets import Button, Static

class AlertScreen(ModalScreen[None]):
    '''
    Blocks the app until dismissed, like a browser `alert()`.
    '''
    BINDINGS = [
        Binding("escape", "dismiss_alert", "OK."),
    ]

    def __init__(self, message: str) -> None:
        super().__init__()

        self.message = message

    def compose(self) -> ComposeResult:
        with Grid(id="alert-dialog"):
            yield Static(self.message, id="alert-message")
            yield Button("OK", id="alert-ok-btn", variant="primary")

    def on_mount(self) -> None:
        self.query_one('#alert-ok-btn', Button).focus()

    @on(Button.Pressed, '#alert-ok-btn')
    def action_dismiss_alert(self) -> None:
        self.dismiss(None)
