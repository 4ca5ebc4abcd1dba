import os
import datetime
import random

import pytest

os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")

from pokewatch.catalog import SpeciesCatalog
from pokewatch.database import DatabaseManager
from pokewatch.lifecycle import LifecycleEngine
from pokewatch.models import SpeciesEntry
from pokewatch.step_ledger import StepLedger

DAY = datetime.datetime(2026, 10, 19, 9, 30)
NEXT_DAY = datetime.datetime(2026, 10, 20, 0, 0, 1)


class ScriptedRandom(random.Random):
    """Hands out pre-chosen species and variant rolls; runs dry loudly so double draws show up."""
    def __init__(self, species=(), rolls=()):
        super().__init__(0)
        self.species = list(species)
        self.rolls = list(rolls)

    def choice(self, seq):
        species_id = self.species.pop(0)
        assert species_id in seq
        return species_id

    def randrange(self, *args, **kwargs):
        return self.rolls.pop(0) if self.rolls else 1


class RecordingSounds:
    def __init__(self):
        self.played = []

    def play_effect(self, name):
        self.played.append(name)


@pytest.fixture
def catalog():
    return SpeciesCatalog({
        "010": SpeciesEntry("Sproutle", "011", 16),
        "011": SpeciesEntry("Bloomite", None, -1),
        "020": SpeciesEntry("Pebblet", None, -1),
        "030": SpeciesEntry("Stormwing", None, -1, has_egg=False),
        "040": SpeciesEntry("Glitchy", "999", 3),
    })


@pytest.fixture
def db(tmp_path):
    manager = DatabaseManager(str(tmp_path / "pokewatch.db"))
    yield manager
    manager.close()


@pytest.fixture
def sounds():
    return RecordingSounds()


@pytest.fixture
def make_engine(catalog, db, sounds):
    def _make(species=(), rolls=()):
        return LifecycleEngine(catalog, StepLedger(db), db, sounds, rng=ScriptedRandom(species, rolls))
    return _make
