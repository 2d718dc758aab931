#!/usr/bin/env python3
"""
Procedural tone synthesis.

Pure numpy: every function returns sample buffers and touches no audio device,
so the shapes can be checked without a sound card. Playback lives in sound.py.

Envelopes follow the automation-curve model: a value is set at a time, then
ramped exponentially to a target by a later time. Exponential ramps cannot start
from zero, so a ramp that starts at 0 begins from ENVELOPE_FLOOR and its first
sample is set back to 0.
"""
import numpy as np

from .constants import (
    AMBIENT_DURATION_S,
    AMBIENT_GAIN,
    AMBIENT_HZ,
    BOUNCE_ATTACK_S,
    BOUNCE_DURATION_S,
    BOUNCE_END_HZ,
    BOUNCE_PEAK_GAIN,
    BOUNCE_RELEASE_GAIN,
    BOUNCE_START_HZ,
    BOUNCE_SWEEP_S,
    ENVELOPE_FLOOR,
    SAMPLE_RATE,
)


def n_samples(seconds: float, sample_rate: int = SAMPLE_RATE) -> int:
    return int(round(seconds * sample_rate))


def exponential_ramp(start: float, end: float, count: int) -> np.ndarray:
    """Geometric interpolation from start to end over count samples (end inclusive)."""
    if count <= 0:
        return np.zeros(0, dtype=np.float64)
    zero_start = start == 0.0
    a = ENVELOPE_FLOOR if zero_start else start
    b = ENVELOPE_FLOOR if end == 0.0 else end
    ramp = np.geomspace(a, b, count)
    if zero_start:
        ramp[0] = 0.0
    return ramp


def hold_after(ramp: np.ndarray, total: int) -> np.ndarray:
    """Pad a curve to total samples by holding its last value."""
    if len(ramp) >= total:
        return ramp[:total]
    last = ramp[-1] if len(ramp) else 0.0
    return np.concatenate([ramp, np.full(total - len(ramp), last)])


def sine(frequencies: np.ndarray, sample_rate: int = SAMPLE_RATE) -> np.ndarray:
    """
    Sine oscillator driven by a per-sample frequency curve.

    The phase is the running sum of the instantaneous frequency, so a sweep
    stays continuous instead of clicking the way sin(2*pi*f(t)*t) would.
    """
    phase = 2 * np.pi * np.cumsum(frequencies) / sample_rate
    # Start at phase 0
    phase -= phase[0] if len(phase) else 0.0
    return np.sin(phase)


def bounce_frequency(sample_rate: int = SAMPLE_RATE) -> np.ndarray:
    total = n_samples(BOUNCE_DURATION_S, sample_rate)
    sweep = exponential_ramp(BOUNCE_START_HZ, BOUNCE_END_HZ, n_samples(BOUNCE_SWEEP_S, sample_rate))
    return hold_after(sweep, total)


def bounce_envelope(sample_rate: int = SAMPLE_RATE) -> np.ndarray:
    total = n_samples(BOUNCE_DURATION_S, sample_rate)
    attack_n = n_samples(BOUNCE_ATTACK_S, sample_rate)
    attack = exponential_ramp(0.0, BOUNCE_PEAK_GAIN, attack_n)
    # The release picks up where the attack ends, so skip its duplicated first sample
    release = exponential_ramp(BOUNCE_PEAK_GAIN, BOUNCE_RELEASE_GAIN, total - attack_n + 1)[1:]
    return np.concatenate([attack, release])


def bounce_tone(sample_rate: int = SAMPLE_RATE) -> np.ndarray:
    """220 Hz rising to 440 Hz over 0.1 s under a 0.01 s attack and 0.19 s release."""
    return sine(bounce_frequency(sample_rate), sample_rate) * bounce_envelope(sample_rate)


def ambient_tone(sample_rate: int = SAMPLE_RATE) -> np.ndarray:
    """Low 110 Hz drone at constant gain for five seconds."""
    total = n_samples(AMBIENT_DURATION_S, sample_rate)
    return sine(np.full(total, AMBIENT_HZ), sample_rate) * AMBIENT_GAIN


def to_pcm16(wave: np.ndarray, channels: int = 1) -> np.ndarray:
    """
    Convert a float wave in [-1, 1] to signed 16-bit samples.

    Mono returns a 1-D array; more channels duplicate the wave into columns,
    which is the layout pygame.sndarray.make_sound expects.
    """
    pcm = (np.clip(wave, -1.0, 1.0) * 32767).astype(np.int16)
    if channels <= 1:
        return pcm
    return np.ascontiguousarray(np.column_stack([pcm] * channels))
