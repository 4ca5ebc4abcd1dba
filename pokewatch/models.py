import datetime
from enum import Enum, auto
from dataclasses import dataclass, field
from typing import Optional

from .constants import EXP_PER_LEVEL, NO_EVOLUTION, EGG_NAME


class LifeStage(Enum):
    """The two shapes a companion can take over a day."""
    EGG = auto()
    HATCHED = auto()


@dataclass(frozen=True)
class SpeciesEntry:
    name: str
    evolution_target: Optional[str] = None
    evolution_threshold: int = NO_EVOLUTION
    has_egg: bool = True

    @property
    def is_terminal(self) -> bool:
        return self.evolution_threshold == NO_EVOLUTION or not self.evolution_target


@dataclass
class CompanionState:
    """Today's companion. Level is always derived from experience, never stored."""
    species_id: str
    is_egg: bool = True
    is_variant: bool = False
    experience: int = 0
    current_day: datetime.date = field(default_factory=datetime.date.today)
    name: str = EGG_NAME

    @property
    def level(self) -> int:
        return self.experience // EXP_PER_LEVEL

    @property
    def stage(self) -> LifeStage:
        return LifeStage.EGG if self.is_egg else LifeStage.HATCHED
