import pytest
from pydantic import ValidationError

from desk_widgets.shared import Task, formatTime

@pytest.mark.parametrize('total', [0, 1, 59, 60, 61, 3599, 3600, 3661, 86399, 86400, 359999, 360000, 987654])
def test_format_time_decomposes(total):
    t = formatTime(total)
    hours, minutes, seconds = int(t.hours), int(t.minutes), int(t.seconds)
    assert 3600 * hours + 60 * minutes + seconds == total
    assert 0 <= minutes < 60
    assert 0 <= seconds < 60
    assert len(t.minutes) == 2
    assert len(t.seconds) == 2
    assert len(t.hours) >= 2

def test_format_time_pads():
    assert formatTime(0).render() == '00:00:00'
    assert formatTime(3661).render() == '01:01:01'

def test_format_time_hours_do_not_wrap():
    assert formatTime(100 * 3600).render() == '100:00:00'
    assert formatTime(24 * 3600 + 5).hours == '24'

def test_format_time_rejects_negative():
    with pytest.raises(ValueError):
        formatTime(-1)

def test_task_toggled_is_a_copy():
    task = Task(id=1, text='A')
    flipped = task.toggled()
    assert flipped == Task(id=1, text='A', completed=True)
    assert task.completed is False
    assert flipped.toggled() == task

def test_task_text_must_not_be_empty():
    with pytest.raises(ValidationError):
        Task(id=1, text='')
