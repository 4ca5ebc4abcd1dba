import glob
import logging
import os

import pygame

from .constants import (
    ASSET_DIR, SPRITE_PREFIX, SHINY_SUFFIX, EGG_SUFFIX,
    COLOR_BG, COLOR_TEXT, COLOR_UI_BAR_BG, COLOR_HP_GREEN, COLOR_HP_YELLOW, COLOR_HP_RED,
    COLOR_EXP, COLOR_SHINY, COLOR_EGG, COLOR_PLACEHOLDER,
)

logger = logging.getLogger(__name__)


def sprite_name(species_id, is_egg=False, is_variant=False):
    suffix = EGG_SUFFIX if is_egg else SHINY_SUFFIX if is_variant else ""
    return f"{SPRITE_PREFIX}{species_id}{suffix}"


def exp_bar_fill(experience, level):
    """Fraction of the way to the next level."""
    return max(0.0, min(1.0, experience / 100 - level))


def hp_bar_colour(percent):
    hp = percent / 100.0
    if hp > 0.5:
        return COLOR_HP_GREEN
    if hp > 0.25:
        return COLOR_HP_YELLOW
    return COLOR_HP_RED


def battery_percent(power_supply_dir="/sys/class/power_supply"):
    """Battery charge from sysfs; 100 on machines without a battery."""
    for path in sorted(glob.glob(os.path.join(power_supply_dir, "*", "capacity"))):
        try:
            with open(path, "r") as f:
                return float(f.read().strip())
        except (OSError, ValueError):
            continue
    return 100.0


class WatchFace:
    """Draws the time, the companion and its HP/EXP bars. Reads the state, never writes it."""
    def __init__(self, surface, asset_dir=ASSET_DIR):
        self.surface = surface
        self.asset_dir = asset_dir
        self.font = pygame.font.Font(None, 28)
        self.small_font = pygame.font.Font(None, 20)
        self._sprites = {}
        self.pokemon_rect = pygame.Rect(0, 0, 0, 0)

    def _load_image(self, name):
        if name not in self._sprites:
            path = os.path.join(self.asset_dir, "sprites", f"{name}.png")
            try:
                self._sprites[name] = pygame.image.load(path)
            except (pygame.error, FileNotFoundError):
                self._sprites[name] = None
        return self._sprites[name]

    def load_sprite(self, state):
        """The state's sprite; an egg without art falls back to the hatched art, then to None."""
        image = self._load_image(sprite_name(state.species_id, state.is_egg, state.is_variant))
        if image is None and state.is_egg:
            logger.debug("No egg sprite for %s, trying the hatched one", state.species_id)
            image = self._load_image(sprite_name(state.species_id, False, state.is_variant))
        return image

    def draw_bar(self, x, y, width, fill, colour):
        pygame.draw.rect(self.surface, COLOR_UI_BAR_BG, (x, y, width, 8))
        pygame.draw.rect(self.surface, colour, (x, y, max(1, int(width * fill)), 8))

    def draw(self, state, now, battery):
        self.surface.fill(COLOR_BG)
        w, h = self.surface.get_size()
        cx, cy = w // 2, h // 2

        clock_text = self.font.render(now.strftime("%H:%M"), True, COLOR_TEXT)
        self.surface.blit(clock_text, clock_text.get_rect(center=(cx, h // 6)))

        image = self.load_sprite(state)
        if image is not None:
            self.pokemon_rect = image.get_rect(center=(cx, cy))
            self.surface.blit(image, self.pokemon_rect)
        else:
            colour = COLOR_EGG if state.is_egg else COLOR_SHINY if state.is_variant else COLOR_PLACEHOLDER
            self.pokemon_rect = pygame.Rect(cx - 30, cy - 40, 60, 80 if state.is_egg else 60)
            pygame.draw.ellipse(self.surface, colour, self.pokemon_rect)

        label = f"{state.name}  Lv{state.level}"
        name_text = self.small_font.render(label, True, COLOR_SHINY if state.is_variant else COLOR_TEXT)
        self.surface.blit(name_text, name_text.get_rect(center=(cx, cy + 60)))

        bar_x, bar_w = cx - 60, 120
        self.draw_bar(bar_x, cy + 75, bar_w, battery / 100.0, hp_bar_colour(battery))
        hp_text = self.small_font.render(f"{round(battery)}%", True, COLOR_TEXT)
        self.surface.blit(hp_text, (bar_x + bar_w + 6, cy + 71))
        self.draw_bar(bar_x, cy + 90, bar_w, exp_bar_fill(state.experience, state.level), COLOR_EXP)
