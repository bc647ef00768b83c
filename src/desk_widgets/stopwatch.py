from __future__ import annotations

import logging
import typing as tp

from pydantic import BaseModel, ConfigDict, Field

from .shared import TimeFields, formatTime

log = logging.getLogger(__name__)

class Handle(tp.Protocol):
    def stop(self) -> tp.Any: ...

class StopwatchState(BaseModel):
    elapsed_seconds: int = Field(default=0, ge=0)
    is_running: bool = False

    model_config = ConfigDict(
        frozen=True,
    )

    @classmethod
    def Initial(cls) -> StopwatchState:
        return cls(elapsed_seconds=0, is_running=False)

    def started(self) -> StopwatchState:
        return StopwatchState(
            elapsed_seconds=self.elapsed_seconds, is_running=True,
        )

    def paused(self) -> StopwatchState:
        return StopwatchState(
            elapsed_seconds=self.elapsed_seconds, is_running=False,
        )

    def ticked(self) -> StopwatchState:
        return StopwatchState(
            elapsed_seconds=self.elapsed_seconds + 1,
            is_running=self.is_running,
        )

    @property
    def label(self) -> str:
        return 'Pause' if self.is_running else 'Start'

    def display(self) -> TimeFields:
        return formatTime(self.elapsed_seconds)

class StopwatchController:
    def __init__(
        self,
        schedule: tp.Callable[[tp.Callable[[], None]], Handle],
        onChange: tp.Callable[[StopwatchState], None] = lambda _: None,
    ) -> None:
        '''
        `schedule(callback)` must call `callback` once per tick until the
        returned handle is stopped.
        '''
        self.schedule = schedule
        self.onChange = onChange

        self.state = StopwatchState.Initial()
        self.handle: Handle | None = None

    def toggleRunning(self) -> None:
        if self.state.is_running:
            self.cancel()
            self.state = self.state.paused()
            log.debug('Paused at %d s.', self.state.elapsed_seconds)
        else:
            self.handle = self.schedule(self.tick)
            self.state = self.state.started()
            log.debug('Started at %d s.', self.state.elapsed_seconds)
        self.onChange(self.state)

    def tick(self) -> None:
        self.state = self.state.ticked()
        self.onChange(self.state)

    def reset(self) -> None:
        self.cancel()
        self.state = StopwatchState.Initial()
        self.onChange(self.state)

    def cancel(self) -> None:
        if self.handle is not None:
            self.handle.stop()
            self.handle = None
