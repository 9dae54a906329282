"""Shared fixtures for splitrun tests."""

from datetime import UTC, datetime

import pytest

from splitrun import events
from splitrun.models import GameCategoryInfo, Run, ShortDescriptor, Split
from splitrun.session import Session

FIXED_DATE = datetime(2021, 6, 1, 12, 0, 0, tzinfo=UTC)


class RecordingObserver:
    """Observer that remembers every event it sees."""

    def __init__(self):
        self.events: list[events.Event] = []

    def observe(self, event):
        self.events.append(event)

    def split_events(self, short=None):
        return [
            e.event
            for e in self.events
            if isinstance(e, events.Split) and (short is None or e.short == short)
        ]

    def of_type(self, cls):
        return [e for e in self.events if isinstance(e, cls)]

    def clear(self):
        self.events.clear()


@pytest.fixture
def short_descriptor():
    return ShortDescriptor(game="scd11", category="btg-sonic")


@pytest.fixture
def metadata(short_descriptor):
    return GameCategoryInfo(
        game_name="Sonic CD",
        category_name="Sonic - Beat the Game",
        short=short_descriptor,
    )


@pytest.fixture
def run():
    return Run([Split.new("pp1", "Palmtree Panic 1"), Split.new("pp2", "Palmtree Panic 2")])


@pytest.fixture
def recorder():
    return RecordingObserver()


@pytest.fixture
def session(metadata, run, recorder):
    s = Session(metadata, run, clock=lambda: FIXED_DATE)
    s.observers.attach(recorder)
    return s
