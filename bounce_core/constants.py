#!/usr/bin/env python3
"""
Shared constants for Calm Bounce (pixels, pixels-per-tick and milliseconds unless stated otherwise).

Keeping constants in one place helps ensure values are consistent across the
codebase and makes tuning easier.
"""

# Ball
BALL_SIZE = 60  # px; diameter
BALL_RADIUS = BALL_SIZE / 2
INITIAL_VELOCITY = (2.0, 2.5)  # px per tick; slow on purpose

# Motion controls
DAMPING = 0.95  # speed kept on each wall bounce
JITTER_PROBABILITY = 0.01  # per tick
JITTER_AMOUNT = 0.1  # full width of the uniform nudge, centered on 0

# Layout insets reserved for UI chrome (status bar above, control panel below)
TOP_INSET = 50  # px
BOTTOM_INSET = 100  # px

# Trail
TRAIL_CAPACITY = 9
TRAIL_LIFETIME_MS = 1000.0
TRAIL_MAX_OPACITY = 0.3
TRAIL_MIN_SCALE = 0.1
TRAIL_SCALE_RANGE = 0.5

# Frame cadence
TARGET_FPS = 60

# Rendering (viewport, portrait like a phone screen)
VIEW_WIDTH = 420
VIEW_HEIGHT = 860
BACKGROUND_COLOR = (15, 15, 35)
BACKDROP_COLOR = (26, 26, 46)
BALL_COLOR = (77, 208, 225)
BALL_INNER_COLOR = (128, 222, 234)
HUD_COLOR = (179, 157, 219)

# Audio
SAMPLE_RATE = 44100  # Hz
MIXER_CHANNELS = 2
MIXER_BUFFER = 512
ENVELOPE_FLOOR = 1e-4  # exponential ramps cannot start at 0

BOUNCE_START_HZ = 220.0  # A3
BOUNCE_END_HZ = 440.0
BOUNCE_SWEEP_S = 0.1
BOUNCE_PEAK_GAIN = 0.1
BOUNCE_ATTACK_S = 0.01
BOUNCE_RELEASE_GAIN = 0.001
BOUNCE_DURATION_S = 0.2

AMBIENT_HZ = 110.0  # A2
AMBIENT_GAIN = 0.02
AMBIENT_DURATION_S = 5.0
