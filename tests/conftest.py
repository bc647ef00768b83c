import pytest

from desk_widgets.persistent import Persistent
from desk_widgets.todo_store import TodoStore

@pytest.fixture
def storage_path(tmp_path):
    return tmp_path / 'local_storage.json'

@pytest.fixture
def store(storage_path):
    s = TodoStore(Persistent(storage_path))
    s.load()
    return s
