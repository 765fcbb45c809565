#!/usr/bin/env python3
"""
Frame driver: runs "step, then render" once per display refresh on a background thread.

What this module does
- SimulationController owns the current scene value, the step function and the random
  source. Each tick replaces the scene wholesale under a lock; readers get the immutable
  snapshot, never a half-updated one.
- FrameDriver is the thread that ticks the controller, hands the new scene to the render
  callback and paces itself with a pygame Clock.
- start_driver returns a FrameHandle; stop_driver takes that handle back, asks the loop to
  stop and joins the thread. A tick already in progress finishes first.

Render callback contract
- called with the freshly stepped scene, on the driver thread.
- returning False (e.g. the window was closed) stops the loop. Any other value keeps it going.
- passing render=None runs the simulation without drawing.
"""
import logging
import threading
from typing import Any, Callable, Optional

import pygame

from .constants import DEFAULT_FPS
from .sampling import RandomSource

logger = logging.getLogger("sparks")

StepFn = Callable[[Any, RandomSource], Any]
RenderFn = Callable[[Any], Optional[bool]]


class SimulationController:
    """
    Shared state between the driver thread and anyone reading the scene.
    Includes thread-safe operations guarded by a lock.
    """
    def __init__(self, scene: Any, step: StepFn, rng: RandomSource, stats_every: int = 0,
                 describe: Optional[Callable[[Any], Any]] = None):
        self.lock = threading.RLock()
        self.scene = scene
        self.rng = rng
        self._step = step
        self._describe = describe
        self.stats_every = max(0, int(stats_every))

    def advance(self) -> Any:
        """Compute the next frame and publish it."""
        with self.lock:
            self.scene = self._step(self.scene, self.rng)
            scene = self.scene
        frame = getattr(scene, "frame", 0)
        if self.stats_every and self._describe is not None and frame % self.stats_every == 0:
            logger.debug(f"Frame={frame}, {self._describe(scene)}")
        return scene

    def snapshot(self) -> Any:
        with self.lock:
            return self.scene


class FrameDriver(threading.Thread):
    """
    Ticks a SimulationController at a fixed rate until stopped.
    """
    def __init__(self, sim: SimulationController, render: Optional[RenderFn] = None,
                 fps: int = DEFAULT_FPS, max_frames: Optional[int] = None, clock=None):
        super().__init__(daemon=True, name="sparks-frame-driver")
        self.sim = sim
        self.render = render
        self.fps = fps
        self.max_frames = max_frames
        self.clock = clock if clock is not None else pygame.time.Clock()
        self.stop_event = threading.Event()
        self.frames = 0
        self.error: Optional[BaseException] = None

    def run(self):
        logger.info(f"Frame driver started at {self.fps} FPS"
                    + (f", stopping after {self.max_frames} frames" if self.max_frames else ""))
        try:
            while not self.stop_event.is_set():
                scene = self.sim.advance()
                self.frames += 1

                if self.render is not None and self.render(scene) is False:
                    logger.info("Render target closed; stopping frame driver")
                    break

                if self.max_frames is not None and self.frames >= self.max_frames:
                    break

                self.clock.tick(self.fps)
        except Exception as exc:
            logger.exception("Frame driver crashed")
            self.error = exc
        finally:
            self.stop_event.set()
            logger.info(f"Frame driver stopped after {self.frames} frames")


class FrameHandle:
    """Owned handle to a running frame driver. Pass it to stop_driver to shut the loop down."""

    def __init__(self, driver: FrameDriver):
        self._driver = driver

    @property
    def active(self) -> bool:
        return self._driver.is_alive() and not self._driver.stop_event.is_set()

    @property
    def frames(self) -> int:
        return self._driver.frames

    @property
    def error(self) -> Optional[BaseException]:
        return self._driver.error

    def wait(self, timeout: Optional[float] = None) -> bool:
        """Block until the driver finishes on its own. Returns True if it has stopped."""
        self._driver.join(timeout)
        return not self._driver.is_alive()


def start_driver(sim: SimulationController, render: Optional[RenderFn] = None,
                 fps: int = DEFAULT_FPS, max_frames: Optional[int] = None, clock=None) -> FrameHandle:
    driver = FrameDriver(sim, render=render, fps=fps, max_frames=max_frames, clock=clock)
    driver.start()
    return FrameHandle(driver)


def stop_driver(handle: FrameHandle, timeout: float = 2.0) -> None:
    """Stop scheduling further ticks and wait for the current one to finish."""
    driver = handle._driver
    driver.stop_event.set()
    if driver is not threading.current_thread():
        driver.join(timeout=timeout)
