import pytest

from bounce_core.data_models import Bounds
from bounce_core.motion import MotionEngine, MotionSettings
from bounce_core.scheduler import ManualScheduler
from fakes import FakeMixer, FakeSndarray, RecordingToneGenerator


@pytest.fixture
def bounds():
    return Bounds(min_x=30.0, max_x=390.0, min_y=80.0, max_y=730.0)


@pytest.fixture
def clock():
    """Settable millisecond clock."""
    class Clock:
        now = 0.0

        def __call__(self):
            return self.now

    return Clock()


@pytest.fixture
def still_settings():
    """Motion settings with the random kick switched off."""
    return MotionSettings(jitter_probability=0.0)


@pytest.fixture
def engine(bounds, still_settings, clock):
    return MotionEngine(bounds, settings=still_settings, clock=clock)


@pytest.fixture
def scheduler():
    return ManualScheduler()


@pytest.fixture
def tones():
    return RecordingToneGenerator()


@pytest.fixture
def fake_mixer():
    return FakeMixer()


@pytest.fixture
def fake_sndarray():
    return FakeSndarray()
