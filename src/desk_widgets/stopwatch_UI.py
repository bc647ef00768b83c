from textual import on
from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.containers import Horizontal
from textual.timer import Timer
from textual.widgets import Button, Footer, Header, Static

from .shared import titled
from .stopwatch import StopwatchController, StopwatchState

class StopwatchUI(App):
    CSS_PATH = "stopwatch.tcss"
    BINDINGS = [
        Binding("space", "start_pause", "Start/Pause."),
        Binding("r", "reset", "Reset."),
        Binding("q", "quit", "Quit."),
    ]

    def __init__(self, tick_seconds: float = 1.0) -> None:
        super().__init__()

        self.tick_seconds = tick_seconds
        self.controller = StopwatchController(
            schedule=self.scheduleTicks,
            onChange=self.myUpdate,
        )

        self.title = "Stopwatch"

    def scheduleTicks(self, callback) -> Timer:
        return self.set_interval(self.tick_seconds, callback)

    def compose(self) -> ComposeResult:
        yield Header(show_clock=False)
        with titled(Horizontal(id="display"), 'Elapsed', skip_bottom=False):
            yield Static("00", id="hours",   classes="time-field")
            yield Static(":",                classes="time-colon")
            yield Static("00", id="minutes", classes="time-field")
            yield Static(":",                classes="time-colon")
            yield Static("00", id="seconds", classes="time-field")
        with Horizontal(id="controls"):
            yield Button("Start", id="start-pause-btn", variant="success")
            yield Button("Reset", id="reset-btn", variant="error")
        yield Footer(compact=True)

    def on_mount(self) -> None:
        self.myUpdate(self.controller.state)

    @on(Button.Pressed, '#start-pause-btn')
    def action_start_pause(self) -> None:
        self.controller.toggleRunning()

    @on(Button.Pressed, '#reset-btn')
    def action_reset(self) -> None:
        self.controller.reset()

    def myUpdate(self, state: StopwatchState) -> None:
        time = state.display()
        self.query_one('#hours',   Static).update(time.hours)
        self.query_one('#minutes', Static).update(time.minutes)
        self.query_one('#seconds', Static).update(time.seconds)
        self.query_one('#start-pause-btn', Button).label = state.label
        self.sub_title = time.render()

    def exit(self, result=None, return_code=0, message=None) -> None:
        self.controller.cancel()
        return super().exit(result, return_code, message)
