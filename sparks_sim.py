#!/usr/bin/env python3
"""
Sparks application entry point: window and frame driver coordination.

What this module does
- Loads the run configuration (config.json plus command line overrides) and sets up logging.
- Builds the chosen variant's scene from the master random generator.
- Starts the frame driver thread, which steps the scene and hands each frame to a
  PygameWindow for drawing. The main thread only waits and handles Ctrl+C.

Threading model
- The frame driver thread owns everything pygame touches: it opens the window on the first
  frame, pumps events, draws and flips. The main thread closes pygame after the driver stops.

Running
1) Install dependencies: `pip install -e .`
2) Run this module: `python sparks_sim.py --variant fireworks`
   (or `--headless --frames 300` to step and draw off-screen without a window)
"""

import argparse
import logging
import sys
from typing import List, Optional

import pygame

from sparks.config import DEFAULT_CONFIG_PATH, ConfigError, SimConfig, load_config
from sparks.constants import CANVAS_HEIGHT, CANVAS_WIDTH
from sparks.driver import FrameHandle, SimulationController, start_driver, stop_driver
from sparks.logger_setup import setup_logging
from sparks.renderer import reset_font_cache
from sparks.sampling import make_rng
from sparks.variants import Variant, get_variant, variant_names

logger = logging.getLogger("sparks")


class PygameWindow:
    """
    Render target for the frame driver: a fixed-size window, or an off-screen surface
    when headless. Called on the driver thread once per frame.
    """
    def __init__(self, variant: Variant, show_hud: bool = False, headless: bool = False):
        self.variant = variant
        self.show_hud = show_hud
        self.headless = headless
        self.surface: Optional[pygame.Surface] = None
        self.unavailable = False

    def _open(self) -> None:
        if self.headless:
            self.surface = pygame.Surface((CANVAS_WIDTH, CANVAS_HEIGHT))
            return
        pygame.init()
        pygame.display.set_caption(f"Sparks - {self.variant.name}")
        self.surface = pygame.display.set_mode((CANVAS_WIDTH, CANVAS_HEIGHT))

    def present(self, scene) -> Optional[bool]:
        if self.surface is None and not self.unavailable:
            try:
                self._open()
            except pygame.error as exc:
                # keep simulating without a surface
                logger.error(f"No render surface available ({exc}); frames will not be drawn")
                self.unavailable = True
        if self.surface is None:
            return None

        if not self.headless:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    return False
                if event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE:
                    return False

        self.variant.render(self.surface, scene, show_hud=self.show_hud)

        if not self.headless:
            pygame.display.flip()
        return None

    def close(self) -> None:
        self.surface = None
        reset_font_cache()
        pygame.quit()


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="sparks-sim",
        description="Canvas particle animations: a drifting dot, lasers and fireworks.",
    )
    parser.add_argument("--config", default=DEFAULT_CONFIG_PATH,
                        help="path to the JSON run configuration (default: %(default)s)")
    parser.add_argument("--variant", choices=variant_names(), help="animation to run")
    parser.add_argument("--seed", type=int, help="master random seed")
    parser.add_argument("--frames", type=int, help="stop after this many frames")
    parser.add_argument("--fps", type=int, help="target frames per second")
    parser.add_argument("--hud", action="store_true", default=None, help="draw a frame/entity counter")
    parser.add_argument("--headless", action="store_true",
                        help="draw to an off-screen surface instead of opening a window")
    return parser


def shutdown(handle: FrameHandle, window: PygameWindow, timeout: float = 2.0) -> bool:
    """Stop the driver, then close pygame only if the driver thread has really exited."""
    stop_driver(handle, timeout=timeout)
    if not handle.wait(timeout=0):
        # the driver may still be drawing; quitting pygame under it would crash
        logger.warning("Frame driver did not stop in time; leaving pygame open")
        return False
    window.close()
    return True


def run(cfg: SimConfig, headless: bool = False) -> int:
    variant = get_variant(cfg.variant)
    rng = make_rng(cfg.master_seed)
    logger.info(f"Master RNG initialized with seed: {cfg.master_seed}")

    sim = SimulationController(
        scene=variant.create(rng),
        step=variant.step,
        rng=rng,
        stats_every=cfg.stats_every,
        describe=variant.describe,
    )
    window = PygameWindow(variant, show_hud=cfg.show_hud, headless=headless)

    logger.info(f"Starting variant '{variant.name}': {variant.description}")
    handle = start_driver(sim, render=window.present, fps=cfg.fps, max_frames=cfg.max_frames)
    try:
        while not handle.wait(timeout=0.25):
            pass
    except KeyboardInterrupt:
        logger.info("Interrupted; shutting down")
    finally:
        shutdown(handle, window)

    if handle.error is not None:
        logger.error(f"Simulation ended with an error: {handle.error!r}")
        return 1
    logger.info("Application shutting down.")
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    try:
        cfg = load_config(args.config).with_overrides(
            variant=args.variant,
            master_seed=args.seed,
            max_frames=args.frames,
            fps=args.fps,
            show_hud=args.hud,
        )
    except ConfigError as exc:
        print(f"sparks-sim: configuration error: {exc}", file=sys.stderr)
        return 2

    setup_logging(run_id=cfg.run_id, level=cfg.log_level, fmt=cfg.log_format, log_dir=cfg.log_dir)
    logger.info(f"Loaded configuration: {cfg}")
    return run(cfg, headless=args.headless)


if __name__ == "__main__":
    sys.exit(main())
