"""In-memory stand-ins for pygame.mixer, pygame.sndarray and a tone player."""
from bounce_core.sound import ToneGenerator


class FakeSound:
    def __init__(self, source=None):
        self.source = source
        self.plays = 0

    def play(self):
        self.plays += 1


class FakeMixer:
    """Stands in for pygame.mixer; records init calls and created sounds."""

    def __init__(self, fail_init=False, preset=None):
        self.fail_init = fail_init
        self._init = preset
        self.init_calls = 0
        self.loaded = []

    def get_init(self):
        return self._init

    def init(self, frequency=44100, size=-16, channels=2, buffer=512):
        self.init_calls += 1
        if self.fail_init:
            raise RuntimeError("no audio device")
        self._init = (frequency, size, channels)

    def Sound(self, path):
        sound = FakeSound(path)
        self.loaded.append(sound)
        return sound


class FakeSndarray:
    """Stands in for pygame.sndarray; keeps every buffer it was given."""

    def __init__(self, fail=False):
        self.fail = fail
        self.arrays = []
        self.sounds = []

    def make_sound(self, array):
        if self.fail:
            raise RuntimeError("bad buffer")
        self.arrays.append(array)
        sound = FakeSound(array)
        self.sounds.append(sound)
        return sound


class RecordingToneGenerator(ToneGenerator):
    name = "recording"

    def __init__(self, available=True):
        super().__init__()
        self.available = available
        self.bounces = 0
        self.ambients = 0

    def _open(self):
        if not self.available:
            raise RuntimeError("no audio device")

    def _bounce(self):
        self.bounces += 1

    def _ambient(self):
        self.ambients += 1
