from __future__ import annotations

import os
import logging
from pathlib import Path

import dotenv
from pydantic import BaseModel, ConfigDict, Field, field_validator
from textual.logging import TextualHandler

DEFAULT_STORAGE = Path.home() / '.desk_widgets' / 'local_storage.json'

class Config(BaseModel):
    storage_path: Path = DEFAULT_STORAGE
    tick_seconds: float = Field(default=1.0, gt=0.0)
    log_level: str = 'WARNING'
    log_file: Path | None = None

    model_config = ConfigDict(
        frozen=True,
    )

    @field_validator('log_level', mode='before')
    @classmethod
    def validate_log_level(cls, v: object) -> str:
        level = str(v).strip().upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f'Unknown log level: {v}')
        return level

    @classmethod
    def load(cls, **overrides: object) -> Config:
        '''
        Environment (and `.env`) first, blank values count as unset,
        then non-None `overrides` on top.
        '''
        dotenv.load_dotenv(dotenv.find_dotenv(usecwd=True))
        fromEnv = dict(
            storage_path=os.getenv('DESK_WIDGETS_STORAGE'),
            tick_seconds=os.getenv('DESK_WIDGETS_TICK_SECONDS'),
            log_level=os.getenv('DESK_WIDGETS_LOG_LEVEL'),
            log_file=os.getenv('DESK_WIDGETS_LOG_FILE'),
        )
        merged = {k: v for k, v in fromEnv.items() if v and v.strip()}
        merged.update({k: v for k, v in overrides.items() if v is not None})
        return cls.model_validate(merged)

def setupLogging(config: Config) -> None:
    handler: logging.Handler
    if config.log_file is not None:
        config.log_file.parent.mkdir(parents=True, exist_ok=True)
        handler = logging.FileHandler(config.log_file, encoding='utf-8')
    else:
        handler = TextualHandler()
    logging.basicConfig(
        level=config.log_level,
        format='%(asctime)s %(levelname)s %(name)s: %(message)s',
        handlers=[handler],
        force=True,
    )
