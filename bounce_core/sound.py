#!/usr/bin/env python3
"""
Tone players for Calm Bounce.

Two interchangeable players share one small interface:
- SynthToneGenerator: renders a fresh buffer for every call and plays it through
  pygame.mixer. Nothing is pooled; collisions are rare enough that this is fine.
- ClipToneGenerator: plays pre-rendered clips, either a sound file given by the
  caller or tones rendered once at initialization.

Both degrade quietly. initialize() reports failure instead of raising, every
play call before a successful initialize() is a no-op, and a failure while
building or playing a tone is logged and skipped so the next tick is unaffected.

The mixer and sndarray modules are injectable so the players can be exercised
without an audio device.
"""
import logging
import os
from typing import Optional

os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")
import pygame

from .constants import MIXER_BUFFER, MIXER_CHANNELS, SAMPLE_RATE
from .tones import ambient_tone, bounce_tone, to_pcm16

logger = logging.getLogger(__name__)


class ToneGenerator:
    """
    Base tone player.

    Subclasses implement _open() to acquire the output and _bounce()/_ambient()
    to play one tone. The base class handles idempotent initialization, the
    not-initialized no-op and error isolation.
    """

    name = "tone"

    def __init__(self):
        self._initialized = False

    @property
    def initialized(self) -> bool:
        return self._initialized

    def initialize(self) -> bool:
        """Acquire the audio output. Safe to call repeatedly; returns success."""
        if self._initialized:
            return True
        try:
            self._open()
        except Exception:
            logger.warning("Audio output not available for %s player", self.name, exc_info=True)
            return False
        self._initialized = True
        logger.info("%s player ready", self.name)
        return True

    def play_bounce_tone(self) -> None:
        self._play("bounce", self._bounce)

    def play_ambient_tone(self) -> None:
        self._play("ambient", self._ambient)

    def _play(self, label, fn) -> None:
        if not self._initialized:
            return
        try:
            fn()
        except Exception:
            logger.warning("Error playing %s tone", label, exc_info=True)

    def _open(self) -> None:
        raise NotImplementedError

    def _bounce(self) -> None:
        raise NotImplementedError

    def _ambient(self) -> None:
        raise NotImplementedError


class _MixerPlayer(ToneGenerator):
    """Shared pygame.mixer setup for both players."""

    def __init__(self, mixer=None, sndarray=None, sample_rate: int = SAMPLE_RATE):
        super().__init__()
        self.mixer = mixer if mixer is not None else pygame.mixer
        self.sndarray = sndarray if sndarray is not None else pygame.sndarray
        self.sample_rate = sample_rate
        self.channels = MIXER_CHANNELS

    def _open(self) -> None:
        if not self.mixer.get_init():
            self.mixer.init(frequency=self.sample_rate, size=-16, channels=MIXER_CHANNELS, buffer=MIXER_BUFFER)
        # The mixer may already have been opened elsewhere with other settings
        init = self.mixer.get_init()
        if not init:
            raise pygame.error("mixer did not initialize")
        self.sample_rate, _size, self.channels = init

    def _make_sound(self, wave):
        return self.sndarray.make_sound(to_pcm16(wave, self.channels))


class SynthToneGenerator(_MixerPlayer):
    name = "synth"

    def _bounce(self) -> None:
        self._make_sound(bounce_tone(self.sample_rate)).play()

    def _ambient(self) -> None:
        self._make_sound(ambient_tone(self.sample_rate)).play()


class ClipToneGenerator(_MixerPlayer):
    name = "clip"

    def __init__(self, clip_path: Optional[str] = None, mixer=None, sndarray=None,
                 sample_rate: int = SAMPLE_RATE):
        super().__init__(mixer=mixer, sndarray=sndarray, sample_rate=sample_rate)
        self.clip_path = clip_path
        self._bounce_clip = None
        self._ambient_clip = None

    def _open(self) -> None:
        super()._open()
        if self.clip_path:
            self._bounce_clip = self.mixer.Sound(self.clip_path)
            logger.info("Loaded bounce clip %s", self.clip_path)
        else:
            self._bounce_clip = self._make_sound(bounce_tone(self.sample_rate))
        self._ambient_clip = self._make_sound(ambient_tone(self.sample_rate))

    def _bounce(self) -> None:
        self._bounce_clip.play()

    def _ambient(self) -> None:
        self._ambient_clip.play()


def make_tone_generator(clip_path: Optional[str] = None) -> ToneGenerator:
    """Synthesized tones by default; clip playback when a sound file is given."""
    if clip_path:
        return ClipToneGenerator(clip_path)
    return SynthToneGenerator()
