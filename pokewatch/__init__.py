"""
PokeWatch

A step-powered pokemon that lives on a clock face: it hatches, levels up and
evolves as you walk, and a new one appears every day.
"""

__version__ = "1.0.0"

from .models import CompanionState, SpeciesEntry
from .catalog import SpeciesCatalog
from .lifecycle import LifecycleEngine
from .session import CompanionSession
from .step_ledger import StepLedger
from .database import DatabaseManager

__all__ = [
    "CompanionState", "SpeciesEntry", "SpeciesCatalog", "LifecycleEngine",
    "CompanionSession", "StepLedger", "DatabaseManager", "__version__",
]
