"""Daily respawn, hatching and evolution rules for the step-powered companion.

The engine owns no companion itself: every operation receives the
``CompanionState`` it should act on, and the caller (normally
``CompanionSession``) makes sure only one thread ever does so.
"""

import datetime
import logging
import random

from .constants import (
    EGG_HATCH_LEVEL, TERMINAL_EGG_HATCH_LEVEL, NO_EVOLUTION, VARIANT_ODDS,
    POKEMON_PREFIX, EGG_NAME, LEVEL_UP_SOUND,
)
from .models import CompanionState
from .sound import cry_sound_name

logger = logging.getLogger(__name__)


class LifecycleEngine:
    def __init__(self, catalog, ledger, db_manager, sounds, rng=None, variant_odds=VARIANT_ODDS):
        self.catalog = catalog
        self.ledger = ledger
        self.db = db_manager
        self.sounds = sounds
        self.rng = rng or random.Random()
        self.variant_odds = variant_odds

    # ------------------------------------------------------------------
    # Public operations
    # ------------------------------------------------------------------
    def spawn(self, now):
        """Builds the companion for a fresh session on `now`'s day.

        Experience is seeded from the steps already walked today. Evolutions are
        not saved, so they are replayed silently until the companion is back in
        the form it had before the restart.
        """
        today = now.date()
        species_id = self._species_for_day(today)
        state = CompanionState(
            species_id=species_id,
            is_egg=self.catalog.has_egg_form(species_id),
            is_variant=self._roll_variant(),
            experience=self.ledger.daily_steps(today),
            current_day=today,
        )
        self._translate(state)
        for _ in range(len(self.catalog)):
            if not self._apply_evolution(state):
                break
        logger.info("Spawned %s (level %d, egg=%s, shiny=%s)", state.name, state.level, state.is_egg, state.is_variant)
        return state

    def on_tick(self, state, now):
        """Called every frame: respawns on a new day, then evolves if able."""
        self._update_day(state, now)
        if self._apply_evolution(state):
            logger.info("%s reached level %d", state.name, state.level)
            self.sounds.play_effect(LEVEL_UP_SOUND)

    def on_step_event(self, state, cumulative_steps, now=None):
        now = now or datetime.datetime.now()
        increment = self.ledger.record_step_sample(cumulative_steps, now.date())
        state.experience += increment
        logger.debug("Updated experience - %d", state.experience)
        return increment

    def cry(self, state):
        """Asks the audio collaborator for the companion's cry. Eggs stay quiet."""
        if state.is_egg:
            return
        self.sounds.play_effect(cry_sound_name(state.name))

    def can_evolve(self, state):
        if state.is_egg:
            # Species that never evolve take 2500 steps to hatch, the rest 500
            if self.catalog.evolution_threshold(state.species_id) == NO_EVOLUTION:
                return state.level >= TERMINAL_EGG_HATCH_LEVEL
            return state.level >= EGG_HATCH_LEVEL
        threshold = self.catalog.evolution_threshold(state.species_id)
        if threshold == NO_EVOLUTION:
            return False
        return state.level >= threshold

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------
    def _update_day(self, state, now):
        today = now.date()
        if today == state.current_day:
            return
        logger.info("New day %s, a new companion appears", today)
        state.current_day = today
        state.experience = 0
        state.species_id = self._species_for_day(today)
        state.is_egg = self.catalog.has_egg_form(state.species_id)
        state.is_variant = self._roll_variant()
        self._translate(state)

    def _apply_evolution(self, state):
        """Performs at most one hatch or evolution. Returns True if the companion changed."""
        if not self.can_evolve(state):
            return False
        if state.is_egg:
            state.is_egg = False
        else:
            target = self.catalog.evolution_of(state.species_id)
            if target is None:
                return False
            logger.info("Pokemon can evolve! %s -> %s", state.species_id, target)
            state.species_id = target
        self._translate(state)
        return True

    def _species_for_day(self, day):
        """Today's saved species, or a freshly drawn one that is then saved."""
        number = self.db.get_day_value(POKEMON_PREFIX, day)
        if number > 0:
            species_id = f"{number:03d}"
        else:
            species_id = self.catalog.random_species_id(self.rng)
        self.db.set_day_value(POKEMON_PREFIX, day, int(species_id))
        return species_id

    def _roll_variant(self):
        return self.rng.randrange(self.variant_odds) == 0

    def _translate(self, state):
        state.name = EGG_NAME if state.is_egg else self.catalog.display_name(state.species_id)
