from __future__ import annotations

import json
import time
import logging
import typing as tp

from pydantic import TypeAdapter, ValidationError

from .shared import Task, EmptyTaskText
from .persistent import Persistent

log = logging.getLogger(__name__)

TODOS_KEY = 'todos'

TaskCollection = tuple[Task, ...]
_COLLECTION = TypeAdapter(list[Task])

class TodoStore:
    def __init__(
        self,
        persistent: Persistent,
        key: str = TODOS_KEY,
        clock: tp.Callable[[], float] = time.time,
    ) -> None:
        '''
        `clock` returns seconds since the epoch. Ids are derived from it
        in milliseconds, bumped as needed so they strictly increase.
        '''
        self.persistent = persistent
        self.key = key
        self.clock = clock

        self.__tasks: TaskCollection = ()
        self.last_id = 0

    @property
    def tasks(self) -> TaskCollection:
        return self.__tasks

    def get(self, id_: int) -> Task | None:
        for task in self.__tasks:
            if task.id == id_:
                return task
        return None

    def load(self) -> TaskCollection:
        '''
        Records repeating an earlier id are dropped, so ids stay unique
        and `toggle` / `delete` touch at most one task.
        '''
        blob = self.persistent.getItem(self.key)
        tasks: list[Task] = []
        if blob is not None:
            try:
                loaded = _COLLECTION.validate_json(blob)
            except ValidationError as e:
                log.warning(
                    'Discarding malformed %r blob (%d errors), starting empty.',
                    self.key, e.error_count(),
                )
                loaded = []
            seen: set[int] = set()
            for task in loaded:
                if task.id in seen:
                    log.warning('Dropping duplicate task id %d.', task.id)
                    continue
                seen.add(task.id)
                tasks.append(task)
        self.__tasks = tuple(tasks)
        self.last_id = max((t.id for t in tasks), default=0)
        log.debug('Loaded %d tasks.', len(tasks))
        return self.__tasks

    def persist(self) -> None:
        self.persistent.setItem(self.key, json.dumps(
            [t.model_dump() for t in self.__tasks],
        ))

    def nextId(self) -> int:
        id_ = max(int(self.clock() * 1000), self.last_id + 1)
        self.last_id = id_
        return id_

    def add(self, raw_text: str) -> Task:
        text = raw_text.strip()
        if not text:
            raise EmptyTaskText()
        task = Task(id=self.nextId(), text=text, completed=False)
        self.__tasks = (*self.__tasks, task)
        self.persist()
        log.debug('Added %r.', task)
        return task

    def toggle(self, id_: int) -> TaskCollection:
        if self.get(id_) is None:
            log.debug('toggle: no task %d', id_)
        self.__tasks = tuple(
            t.toggled() if t.id == id_ else t for t in self.__tasks
        )
        self.persist()
        return self.__tasks

    def delete(self, id_: int) -> TaskCollection:
        if self.get(id_) is None:
            log.debug('delete: no task %d', id_)
        self.__tasks = tuple(t for t in self.__tasks if t.id != id_)
        self.persist()
        return self.__tasks
