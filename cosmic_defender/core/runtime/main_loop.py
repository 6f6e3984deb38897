"""
main_loop.py
------------
Loop driver: frame timing, event pumping, simulation step and rendering.

Responsibilities:
- Initialize pygame and the window
- Wait for each frame with pygame.time.Clock (explicit while loop)
- Compute a clamped delta time from frame timestamps
- Route input events, session commands and window resizes
- Call World.update(dt), then draw the post-update state
"""

import time

import pygame

from cosmic_defender.core.debug.debug_logger import DebugLogger
from cosmic_defender.core.runtime.game_settings import Display
from cosmic_defender.core.runtime.game_state import GameState
from cosmic_defender.systems.collision.collision_hitbox import clamp


def compute_dt(now: float, last: float, max_dt: float) -> float:
    """
    Seconds elapsed between two frame timestamps, clamped to [0, max_dt].
    """
    return clamp(now - last, 0.0, max_dt)


class MainLoop:
    """
    Core runtime controller for the game's frame loop.

    step() runs exactly one frame for a given timestamp and needs no window,
    so the loop can also be driven headless.
    """

    # ===========================================================
    # Initialization
    # ===========================================================

    def __init__(self, world, input_manager=None, draw_manager=None, hud=None,
                 fps: int = Display.FPS, resizable: bool = True):
        """
        Args:
            world: The World to simulate
            input_manager: pygame InputManager writing into world.input
            draw_manager: DrawManager render adapter
            hud: HUDManager drawn on top of the scene
            fps: Target frame rate for the clock
            resizable: Open a resizable window
        """
        self.world = world
        self.input_manager = input_manager
        self.draw_manager = draw_manager
        self.hud = hud
        self.fps = fps
        self.resizable = resizable

        self.screen = None
        self.clock = None
        self.running = False
        self.last_time = None
        self.frames = 0
        self._last_perf_warn_time = 0.0

        DebugLogger.init_entry("MainLoop")

    def _init_pygame(self):
        """Initialize pygame subsystems and window."""
        pygame.init()
        flags = pygame.RESIZABLE if self.resizable else 0
        self.screen = pygame.display.set_mode((int(self.world.width), int(self.world.height)), flags)
        pygame.display.set_caption(Display.CAPTION)
        self.clock = pygame.time.Clock()

        DebugLogger.init_entry("Pygame")
        DebugLogger.init_sub(f"Window {self.world.width}x{self.world.height} @ {self.fps} FPS")

    # ===========================================================
    # Main Loop
    # ===========================================================

    def run(self):
        """Open the window and run frames until a quit command arrives."""
        self._init_pygame()
        DebugLogger.section("Game Loop")

        self.running = True
        self.last_time = self._now()
        while self.running:
            self.clock.tick(self.fps)
            self._handle_events()
            if not self.running:
                break
            self.step(self._now())

        pygame.quit()
        DebugLogger.system("Pygame terminated")

    def step(self, now: float) -> float:
        """
        Run one frame at timestamp ``now`` (seconds).

        Returns:
            float: The clamped delta time fed to the World.
        """
        if self.last_time is None:
            self.last_time = now

        raw_dt = now - self.last_time
        dt = compute_dt(now, self.last_time, self.world.config.max_frame_time)
        self.last_time = now

        if raw_dt > self.world.config.max_frame_time:
            self._warn_slow_frame(raw_dt)

        self.world.update(dt)
        self._draw()
        self.frames += 1
        return dt

    @staticmethod
    def _now() -> float:
        return pygame.time.get_ticks() / 1000.0

    # ===========================================================
    # Event Handling
    # ===========================================================

    def _handle_events(self):
        for event in pygame.event.get():
            self.handle_event(event)

    def handle_event(self, event):
        """
        Route one pygame event.

        Window resizes go to the World, everything else to the input manager.
        A primary press or the start key begins a session whenever none is running.
        """
        if event.type == pygame.VIDEORESIZE:
            self.world.resize(event.w, event.h)
            return

        command = None
        if self.input_manager is not None:
            command = self.input_manager.handle_event(event, self.world.width)
        elif event.type == pygame.QUIT:
            command = "quit"

        if command == "quit":
            self.running = False
            DebugLogger.action("Quit signal received")
            return

        if command == "start" and self.world.state != GameState.PLAYING:
            self.world.start()
            # Restart the frame clock so the first tick is not a stale gap
            self.last_time = self._now()

    # ===========================================================
    # Rendering
    # ===========================================================

    def _draw(self):
        if self.screen is None:
            return
        if self.draw_manager is not None:
            self.draw_manager.render(self.screen, self.world)
        if self.hud is not None:
            self.hud.draw(self.screen)
        pygame.display.flip()

    def _warn_slow_frame(self, raw_dt: float):
        """Log clamped frames (throttled to 1/second)."""
        now = time.perf_counter()
        if now - self._last_perf_warn_time > 1.0:
            self._last_perf_warn_time = now
            DebugLogger.warn(
                f"Frame took {raw_dt * 1000:.1f}ms, clamped to "
                f"{self.world.config.max_frame_time * 1000:.0f}ms",
                category="timing"
            )
