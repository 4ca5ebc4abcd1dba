#!/usr/bin/env python3
"""
PokeWatch - step-powered companion on a clock face.

Run:
  python -m pokewatch

Keys:
  SPACE / click the pokemon   cry
  UP                          take 10 simulated steps
  PAGE UP                     take 100 simulated steps
  ESC / q                     quit
"""

import argparse
import datetime
import logging
import os
import threading

import pygame

from .catalog import SpeciesCatalog
from .constants import (
    DB_FILE, FPS, LOG_LEVEL, SCREEN_WIDTH, SCREEN_HEIGHT, WALK_INTERVAL_SEC, WALK_STEPS_PER_SAMPLE, BOOT_STEPS,
)
from .database import DatabaseManager
from .lifecycle import LifecycleEngine
from .session import CompanionSession
from .sound import SoundManager
from .step_ledger import StepLedger
from .watch_face import WatchFace, battery_percent

logger = logging.getLogger(__name__)


class SimulatedPedometer:
    """Stands in for the hardware step counter: a since-boot total fed to the session.

    With `walking` set, a background thread adds steps on its own, the same way
    a sensor callback would arrive off the render thread.
    """
    def __init__(self, session, walking=False, interval=WALK_INTERVAL_SEC, steps_per_sample=WALK_STEPS_PER_SAMPLE,
                 boot_steps=BOOT_STEPS):
        self.session = session
        self.interval = interval
        self.steps_per_sample = steps_per_sample
        self.total = boot_steps
        self._lock = threading.Lock()
        self._stop = threading.Event()
        self._thread = threading.Thread(target=self._walk, daemon=True) if walking else None

    def start(self):
        self.step(0)  # report the since-boot total once
        if self._thread:
            self._thread.start()

    def stop(self):
        self._stop.set()
        if self._thread:
            self._thread.join(timeout=self.interval * 2)

    def step(self, count):
        with self._lock:
            self.total += count
            total = self.total
        self.session.post_step_sample(total)

    def _walk(self):
        while not self._stop.wait(self.interval):
            self.step(self.steps_per_sample)


def build_session(db_path, rng=None):
    db = DatabaseManager(db_path)
    engine = LifecycleEngine(SpeciesCatalog(), StepLedger(db), db, SoundManager(), rng=rng)
    return CompanionSession(engine)


def run(db_path, fps, walking):
    pygame.init()
    screen = pygame.display.set_mode((SCREEN_WIDTH, SCREEN_HEIGHT))
    pygame.display.set_caption("PokeWatch")
    clock = pygame.time.Clock()

    session = build_session(db_path)
    enabled, info = session.engine.sounds.check_output()
    logger.info("Audio enabled=%s %s", enabled, info)
    face = WatchFace(screen)
    pedometer = SimulatedPedometer(session, walking=walking)
    pedometer.start()

    running = True
    try:
        while running:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False
                elif event.type == pygame.KEYDOWN:
                    if event.key in (pygame.K_ESCAPE, pygame.K_q):
                        running = False
                    elif event.key == pygame.K_SPACE:
                        session.post_cry()
                    elif event.key == pygame.K_UP:
                        pedometer.step(10)
                    elif event.key == pygame.K_PAGEUP:
                        pedometer.step(100)
                elif event.type == pygame.MOUSEBUTTONDOWN and face.pokemon_rect.collidepoint(event.pos):
                    session.post_cry()

            session.post_tick()
            session.pump()

            face.draw(session.state, datetime.datetime.now(), battery_percent())
            pygame.display.flip()
            clock.tick(fps)
    finally:
        pedometer.stop()
        session.engine.db.close()
        pygame.quit()
    return 0


def main() -> int:
    parser = argparse.ArgumentParser(description="Step-powered pokemon companion on a clock face.")
    parser.add_argument("--db", default=DB_FILE, help=f"sqlite file for step and species data (default: {DB_FILE})")
    parser.add_argument("--fps", type=int, default=FPS, help=f"frames (ticks) per second (default: {FPS})")
    parser.add_argument("--walk", action="store_true", help="simulate walking from a background sensor thread")
    parser.add_argument("--headless", action="store_true", help="use SDL dummy video/audio drivers")
    args = parser.parse_args()

    logging.basicConfig(level=LOG_LEVEL, format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    if args.headless:
        os.environ["SDL_VIDEODRIVER"] = "dummy"
        os.environ["SDL_AUDIODRIVER"] = "dummy"
    return run(args.db, max(1, args.fps), args.walk)
