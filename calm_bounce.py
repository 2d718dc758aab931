#!/usr/bin/env python3
"""
Calm Bounce application entry point and UI/renderer coordination.

What this module does
- Opens a Pygame viewport with a slowly bouncing ball and its fading trail, and a
  Dear PyGui control panel with the Start/Pause and Sound On/Off toggles.
- Wires an AnimationController (motion engine, tone player, tick chain) to both.

Threading model
- Everything runs on the main thread. PygameFrameScheduler drives the frames: each
  frame runs the scheduled tick (if playing), handles viewport input, draws the
  viewport, runs queued Dear PyGui callbacks and renders one Dear PyGui frame.
- Dear PyGui is set to manual callback management, so button and key callbacks run
  from render_frame() on this thread instead of on its worker thread. The
  controller still takes its lock around toggles and ticks.

Units and conventions
- Pixels and pixels per tick. Colors are RGB tuples in 0..255.

Running
1) Install: `pip install -e .`
2) Run: `calm-bounce` (or `python calm_bounce.py`), optionally `--clip bounce.wav`.

Keys (viewport window)
- Space: Start/Pause, M: Sound On/Off, Esc: quit.
"""

import argparse
import logging
import os
import sys
from typing import List, Optional

# GUI and Rendering libs
os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")
import pygame
from pygame import gfxdraw
import dearpygui.dearpygui as dpg

from bounce_core.constants import (
    BACKDROP_COLOR,
    BACKGROUND_COLOR,
    BALL_COLOR,
    BALL_INNER_COLOR,
    BALL_RADIUS,
    BALL_SIZE,
    HUD_COLOR,
    TARGET_FPS,
    VIEW_HEIGHT,
    VIEW_WIDTH,
)
from bounce_core.controller import AnimationController
from bounce_core.data_models import Bounds
from bounce_core.motion import MotionEngine
from bounce_core.scheduler import PygameFrameScheduler
from bounce_core.sound import make_tone_generator

logger = logging.getLogger("calm_bounce")

INSTRUCTION_PLAYING = "Watch the bouncing ball to help calm your nerves"
INSTRUCTION_PAUSED = "Tap Start to begin the calming animation"

# ============================================================
# Pygame Renderer
# ============================================================

class PygameRenderer:
    """
    Pygame viewport: draws the backdrop, the trail, the ball and a one-line HUD.
    Handles the keyboard shortcuts for the two toggles.
    """
    def __init__(self, controller: AnimationController, surface):
        self.controller = controller
        self.surface = surface
        self.running = True

    def handle_events(self):
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                self.running = False
            elif event.type == pygame.KEYDOWN:
                if event.key == pygame.K_ESCAPE:
                    self.running = False
                elif event.key == pygame.K_SPACE:
                    self.controller.toggle_playing()
                elif event.key == pygame.K_m:
                    self.controller.toggle_sound()

    def draw(self):
        surf = self.surface
        surf.fill(BACKGROUND_COLOR)
        self.draw_backdrop(surf)
        self.draw_trail(surf)
        self.draw_ball(surf)

        c = self.controller
        state = "Playing" if c.playing else "Paused"
        sound = "Sound On" if c.sound_enabled else "Sound Off"
        draw_text(surf, f"[{state}]  {sound}  Bounces: {c.bounce_count}", 10, 10, HUD_COLOR)
        draw_text(surf, "Space: Start/Pause | M: Sound", 10, surf.get_height() - 26, HUD_COLOR)

        pygame.display.flip()

    def draw_backdrop(self, surf):
        b = self.controller.engine.bounds
        # Bounds are for the ball center; grow by the radius to get the play area
        rect = pygame.Rect(
            int(b.min_x - BALL_RADIUS), int(b.min_y - BALL_RADIUS),
            int(b.max_x - b.min_x + BALL_SIZE), int(b.max_y - b.min_y + BALL_SIZE),
        )
        pygame.draw.rect(surf, BACKDROP_COLOR, rect, border_radius=12)

    def draw_trail(self, surf):
        engine = self.controller.engine
        trail = engine.trail
        # Paused frames do not step, so expire old points here too
        trail.prune(engine.clock())
        base_r = BALL_SIZE / 4
        for point, (opacity, scale) in zip(trail.points(), trail.fade_weights()):
            center = (int(point.x), int(point.y))
            r = max(1, int(base_r * scale))
            try:
                gfxdraw.filled_circle(surf, center[0], center[1], r, (*BALL_COLOR, int(255 * opacity)))
            except Exception:
                logger.debug("Trail point skipped at %s", center, exc_info=True)

    def draw_ball(self, surf):
        s = self.controller.engine.state
        x, y = int(s.x), int(s.y)
        r = int(BALL_RADIUS)
        try:
            # Soft glow rings, fading outwards
            for i, grow in enumerate((14, 9, 5)):
                gfxdraw.filled_circle(surf, x, y, r + grow, (*BALL_COLOR, 20 + 15 * i))
            gfxdraw.filled_circle(surf, x, y, r, BALL_COLOR)
            gfxdraw.aacircle(surf, x, y, r, BALL_COLOR)
            gfxdraw.filled_circle(surf, x, y, int(r * 0.6), BALL_INNER_COLOR)
        except Exception:
            logger.debug("Ball draw skipped at %s", (x, y), exc_info=True)

_cached_font = None

def draw_text(surface, text, x, y, color):
    global _cached_font
    if not pygame.font.get_init():
        pygame.font.init()
    if _cached_font is None:
        try:
            _cached_font = pygame.font.SysFont("consolas", 16)
        except Exception:
            _cached_font = pygame.font.Font(None, 16)
    img = _cached_font.render(text, True, color)
    surface.blit(img, (x, y))

# ============================================================
# Dear PyGui UI
# ============================================================

class UI:
    """
    Dear PyGui control panel: Start/Pause and Sound On/Off buttons plus the instruction line.
    Rendered one frame at a time from the shared frame loop.
    """
    def __init__(self, controller: AnimationController):
        self.controller = controller
        self.play_button_id = None
        self.sound_button_id = None
        self.instruction_id = None
        self.status_msg_id = None
        self._build_ui()

    def _build_ui(self):
        dpg.create_context()
        dpg.configure_app(manual_callback_management=True)
        dpg.create_viewport(title="Calm Bounce - Controls", width=380, height=220)

        with dpg.window(label="Controls", width=360, height=200, pos=(10, 10), tag="main_window"):
            with dpg.group(horizontal=True):
                self.play_button_id = dpg.add_button(label="Start", width=120, callback=self._toggle_play)
                self.sound_button_id = dpg.add_button(label="Sound Off", width=120, callback=self._toggle_sound)
            dpg.add_separator()
            self.instruction_id = dpg.add_text(INSTRUCTION_PAUSED, wrap=340, color=HUD_COLOR)
            self.status_msg_id = dpg.add_text("", color=(180, 220, 180))

        with dpg.handler_registry():
            dpg.add_key_press_handler(dpg.mvKey_Spacebar, callback=self._toggle_play)

        dpg.setup_dearpygui()
        dpg.show_viewport()
        dpg.set_primary_window("main_window", True)
        self.sync()

    def _set_status(self, msg: str, color=(180, 220, 180)):
        dpg.set_value(self.status_msg_id, msg)
        dpg.configure_item(self.status_msg_id, color=color)

    def _toggle_play(self):
        playing = self.controller.toggle_playing()
        self._set_status("Animation playing." if playing else "Animation paused.")
        self.sync()

    def _toggle_sound(self):
        wanted = not self.controller.sound_enabled
        enabled = self.controller.toggle_sound()
        if wanted and not enabled:
            self._set_status("Audio output unavailable; staying silent.", color=(255, 120, 120))
        else:
            self._set_status(f"Sound {'ON' if enabled else 'OFF'}.")
        self.sync()

    def sync(self):
        """Reflect controller state in button labels and the instruction text."""
        c = self.controller
        dpg.configure_item(self.play_button_id, label="Pause" if c.playing else "Start")
        dpg.configure_item(self.sound_button_id, label="Sound On" if c.sound_enabled else "Sound Off")
        dpg.set_value(self.instruction_id, INSTRUCTION_PLAYING if c.playing else INSTRUCTION_PAUSED)

    def render_frame(self) -> bool:
        """Render one panel frame; False once the panel window has been closed."""
        if not dpg.is_dearpygui_running():
            return False
        dpg.run_callbacks(dpg.get_callback_queue())
        self.sync()
        dpg.render_dearpygui_frame()
        return True

    def close(self):
        dpg.destroy_context()

# ============================================================
# Application Entry
# ============================================================

def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(prog="calm-bounce", description="A calming bouncing ball.")
    parser.add_argument("--clip", metavar="PATH", default=None,
                        help="play this sound file on bounces instead of the synthesized tone")
    parser.add_argument("--log-level", default="INFO",
                        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
                        help="logging verbosity (default: %(default)s)")
    return parser.parse_args(argv)


def build_controller(width: int, height: int, scheduler, clip_path: Optional[str] = None) -> AnimationController:
    bounds = Bounds.from_viewport(width, height, BALL_RADIUS)
    engine = MotionEngine(bounds)
    tones = make_tone_generator(clip_path)
    return AnimationController(engine, tones, scheduler)


def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)
    logging.basicConfig(level=getattr(logging, args.log_level),
                        format="%(asctime)s %(levelname)s %(message)s")

    pygame.init()
    pygame.display.set_caption("Calm Bounce")
    surface = pygame.display.set_mode((VIEW_WIDTH, VIEW_HEIGHT))
    # Viewport size is read once; resizing is not handled
    width, height = surface.get_size()

    scheduler = PygameFrameScheduler(TARGET_FPS)
    try:
        controller = build_controller(width, height, scheduler, args.clip)
    except ValueError as e:
        logger.error("Viewport %dx%d is too small: %s", width, height, e)
        pygame.quit()
        return 1
    controller.load_sound()

    renderer = PygameRenderer(controller, surface)
    ui = UI(controller)

    def on_frame() -> bool:
        renderer.handle_events()
        renderer.draw()
        return ui.render_frame() and renderer.running

    try:
        scheduler.run(on_frame)
    finally:
        controller.pause()
        ui.close()
        pygame.quit()
    return 0

if __name__ == "__main__":
    sys.exit(main())
