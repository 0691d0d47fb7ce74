import random

import pytest

from typemaster.session import Session
from typemaster.timer import CountdownTimer


@pytest.fixture()
def timer():
    t = CountdownTimer(duration=60, interval=60.0)
    yield t
    t.cancel()


@pytest.fixture()
def session(timer):
    s = Session(["hello", "world", "alpha"], sample_size=6, timer=timer, rng=random.Random(7))
    yield s
    s.cancel_round()


@pytest.fixture()
def short_timer():
    # one tick, long enough for a test to type before it runs out
    t = CountdownTimer(duration=1, interval=0.2)
    yield t
    t.cancel()
