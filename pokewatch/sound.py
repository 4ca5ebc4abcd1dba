import logging
import os

import pygame

from .constants import ASSET_DIR, AUDIO_FREQ, AUDIO_CHANNELS, AUDIO_BUFFER

logger = logging.getLogger(__name__)

# Conservative mixer settings for small watch/Pi speakers
try:
    pygame.mixer.pre_init(AUDIO_FREQ, -16, AUDIO_CHANNELS, AUDIO_BUFFER)
except pygame.error:
    pass


def cry_sound_name(display_name):
    return "cry_" + display_name.lower().replace("-", "_").replace("'", "")


class SoundManager:
    """Fire-and-forget audio cues with a safe no-op fallback.

    `play_effect(name)` plays `<asset_dir>/sounds/<name>.wav`, loading it on first
    use. Missing files or an unavailable mixer are ignored; `last_played` always
    records the request so headless runs and tests can see what was asked for.
    """
    def __init__(self, asset_dir=ASSET_DIR):
        self.asset_dir = asset_dir
        self.enabled = False
        self.last_played = None
        self.assets = {}
        try:
            pygame.mixer.init()
            self.enabled = True
        except pygame.error as e:
            logger.info("Audio unavailable, cues will be silent (%s)", e)

    def load(self, name, path=None):
        """Load a sound asset into memory for quicker playback. Returns True on success."""
        self.assets[name] = None
        if not self.enabled:
            return False
        path = path or os.path.join(self.asset_dir, "sounds", f"{name}.wav")
        try:
            self.assets[name] = pygame.mixer.Sound(path)
            return True
        except (pygame.error, FileNotFoundError):
            logger.debug("No sound asset for '%s' at %s", name, path)
            return False

    def play_effect(self, name):
        """Play a named effect; safe no-op if audio is unavailable."""
        self.last_played = name
        if not self.enabled:
            return
        if self.assets.get(name) is None and not self.load(name):
            return
        try:
            self.assets[name].play()
        except pygame.error as e:
            logger.debug("Playback of '%s' failed (%s)", name, e)

    def check_output(self):
        """Return diagnostic info: (enabled:bool, init_info:dict)."""
        init = pygame.mixer.get_init() if self.enabled else None
        return (self.enabled, {"mixer_init": init})
