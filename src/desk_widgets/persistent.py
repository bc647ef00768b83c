'''
A `localStorage`-shaped key-value store backed by one JSON file.
Keys and values are both strings; every write rewrites the whole file.
'''

from __future__ import annotations

import os
import json
import logging

from .shared import StorageCorrupted

log = logging.getLogger(__name__)

class Persistent:
    def __init__(self, /, path: str | os.PathLike[str]) -> None:
        self.path = os.fspath(path)
        self.__data: dict[str, str] = {}
        try:
            with open(self.path, 'r', encoding='utf-8') as f:
                raw = json.load(f)
        except FileNotFoundError:
            log.debug('No storage at %s yet.', self.path)
            return
        except json.JSONDecodeError as e:
            raise StorageCorrupted(f'{self.path} is not valid JSON') from e
        if not isinstance(raw, dict) or not all(
            isinstance(k, str) and isinstance(v, str)
            for k, v in raw.items()
        ):
            raise StorageCorrupted(
                f'{self.path} must hold a JSON object of strings',
            )
        self.__data.update(raw)

    def getItem(self, key: str) -> str | None:
        return self.__data.get(key)

    def setItem(self, key: str, value: str) -> None:
        self.__data[key] = value
        self.flush()

    def removeItem(self, key: str) -> None:
        if self.__data.pop(key, None) is not None:
            self.flush()

    def clear(self) -> None:
        self.__data.clear()
        self.flush()

    def keys(self) -> list[str]:
        return list(self.__data)

    def flush(self) -> None:
        parent = os.path.dirname(self.path)
        if parent:
            os.makedirs(parent, exist_ok=True)
        with open(self.path, 'w', encoding='utf-8') as f:
            json.dump(self.__data, f, indent=2)
