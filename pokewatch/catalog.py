"""Static species table and the lookups the lifecycle engine needs."""

import logging
from typing import Dict, Optional

from .constants import NO_EVOLUTION, PLACEHOLDER_NAME
from .models import SpeciesEntry

logger = logging.getLogger(__name__)

# Species without an egg sprite hatch immediately
NO_EGG = frozenset({"144", "145", "146", "150", "151"})

# id: (name, evolves into, evolution level). Stone and trade evolutions are given a step level.
_SPECIES = {
    "001": ("Bulbasaur", "002", 16), "002": ("Ivysaur", "003", 32), "003": ("Venusaur", None, -1),
    "004": ("Charmander", "005", 16), "005": ("Charmeleon", "006", 36), "006": ("Charizard", None, -1),
    "007": ("Squirtle", "008", 16), "008": ("Wartortle", "009", 36), "009": ("Blastoise", None, -1),
    "010": ("Caterpie", "011", 7), "011": ("Metapod", "012", 10), "012": ("Butterfree", None, -1),
    "013": ("Weedle", "014", 7), "014": ("Kakuna", "015", 10), "015": ("Beedrill", None, -1),
    "016": ("Pidgey", "017", 18), "017": ("Pidgeotto", "018", 36), "018": ("Pidgeot", None, -1),
    "019": ("Rattata", "020", 20), "020": ("Raticate", None, -1),
    "021": ("Spearow", "022", 20), "022": ("Fearow", None, -1),
    "023": ("Ekans", "024", 22), "024": ("Arbok", None, -1),
    "025": ("Pikachu", "026", 30), "026": ("Raichu", None, -1),
    "027": ("Sandshrew", "028", 22), "028": ("Sandslash", None, -1),
    "029": ("Nidoran-F", "030", 16), "030": ("Nidorina", "031", 36), "031": ("Nidoqueen", None, -1),
    "032": ("Nidoran-M", "033", 16), "033": ("Nidorino", "034", 36), "034": ("Nidoking", None, -1),
    "035": ("Clefairy", "036", 30), "036": ("Clefable", None, -1),
    "037": ("Vulpix", "038", 30), "038": ("Ninetales", None, -1),
    "039": ("Jigglypuff", "040", 30), "040": ("Wigglytuff", None, -1),
    "041": ("Zubat", "042", 22), "042": ("Golbat", None, -1),
    "043": ("Oddish", "044", 21), "044": ("Gloom", "045", 36), "045": ("Vileplume", None, -1),
    "046": ("Paras", "047", 24), "047": ("Parasect", None, -1),
    "048": ("Venonat", "049", 31), "049": ("Venomoth", None, -1),
    "050": ("Diglett", "051", 26), "051": ("Dugtrio", None, -1),
    "052": ("Meowth", "053", 28), "053": ("Persian", None, -1),
    "054": ("Psyduck", "055", 33), "055": ("Golduck", None, -1),
    "056": ("Mankey", "057", 28), "057": ("Primeape", None, -1),
    "058": ("Growlithe", "059", 30), "059": ("Arcanine", None, -1),
    "060": ("Poliwag", "061", 25), "061": ("Poliwhirl", "062", 36), "062": ("Poliwrath", None, -1),
    "063": ("Abra", "064", 16), "064": ("Kadabra", "065", 36), "065": ("Alakazam", None, -1),
    "066": ("Machop", "067", 28), "067": ("Machoke", "068", 40), "068": ("Machamp", None, -1),
    "069": ("Bellsprout", "070", 21), "070": ("Weepinbell", "071", 36), "071": ("Victreebel", None, -1),
    "072": ("Tentacool", "073", 30), "073": ("Tentacruel", None, -1),
    "074": ("Geodude", "075", 25), "075": ("Graveler", "076", 40), "076": ("Golem", None, -1),
    "077": ("Ponyta", "078", 40), "078": ("Rapidash", None, -1),
    "079": ("Slowpoke", "080", 37), "080": ("Slowbro", None, -1),
    "081": ("Magnemite", "082", 30), "082": ("Magneton", None, -1),
    "083": ("Farfetch'd", None, -1),
    "084": ("Doduo", "085", 31), "085": ("Dodrio", None, -1),
    "086": ("Seel", "087", 34), "087": ("Dewgong", None, -1),
    "088": ("Grimer", "089", 38), "089": ("Muk", None, -1),
    "090": ("Shellder", "091", 30), "091": ("Cloyster", None, -1),
    "092": ("Gastly", "093", 25), "093": ("Haunter", "094", 40), "094": ("Gengar", None, -1),
    "095": ("Onix", None, -1),
    "096": ("Drowzee", "097", 26), "097": ("Hypno", None, -1),
    "098": ("Krabby", "099", 28), "099": ("Kingler", None, -1),
    "100": ("Voltorb", "101", 30), "101": ("Electrode", None, -1),
    "102": ("Exeggcute", "103", 30), "103": ("Exeggutor", None, -1),
    "104": ("Cubone", "105", 28), "105": ("Marowak", None, -1),
    "106": ("Hitmonlee", None, -1), "107": ("Hitmonchan", None, -1),
    "108": ("Lickitung", None, -1),
    "109": ("Koffing", "110", 35), "110": ("Weezing", None, -1),
    "111": ("Rhyhorn", "112", 42), "112": ("Rhydon", None, -1),
    "113": ("Chansey", None, -1), "114": ("Tangela", None, -1), "115": ("Kangaskhan", None, -1),
    "116": ("Horsea", "117", 32), "117": ("Seadra", None, -1),
    "118": ("Goldeen", "119", 33), "119": ("Seaking", None, -1),
    "120": ("Staryu", "121", 30), "121": ("Starmie", None, -1),
    "122": ("Mr-Mime", None, -1), "123": ("Scyther", None, -1), "124": ("Jynx", None, -1),
    "125": ("Electabuzz", None, -1), "126": ("Magmar", None, -1), "127": ("Pinsir", None, -1),
    "128": ("Tauros", None, -1),
    "129": ("Magikarp", "130", 20), "130": ("Gyarados", None, -1),
    "131": ("Lapras", None, -1), "132": ("Ditto", None, -1),
    "133": ("Eevee", "134", 30), "134": ("Vaporeon", None, -1),
    "135": ("Jolteon", None, -1), "136": ("Flareon", None, -1), "137": ("Porygon", None, -1),
    "138": ("Omanyte", "139", 40), "139": ("Omastar", None, -1),
    "140": ("Kabuto", "141", 40), "141": ("Kabutops", None, -1),
    "142": ("Aerodactyl", None, -1), "143": ("Snorlax", None, -1),
    "144": ("Articuno", None, -1), "145": ("Zapdos", None, -1), "146": ("Moltres", None, -1),
    "147": ("Dratini", "148", 30), "148": ("Dragonair", "149", 55), "149": ("Dragonite", None, -1),
    "150": ("Mewtwo", None, -1), "151": ("Mew", None, -1),
}


def _build_table():
    return {
        species_id: SpeciesEntry(name, target, threshold, species_id not in NO_EGG)
        for species_id, (name, target, threshold) in _SPECIES.items()
    }


class SpeciesCatalog:
    """Read-only species table. Every lookup returns None rather than raising."""

    def __init__(self, table: Optional[Dict[str, SpeciesEntry]] = None):
        self._table = dict(table) if table is not None else _build_table()
        self._ids = sorted(self._table)

    def __len__(self):
        return len(self._table)

    def __contains__(self, species_id):
        return species_id in self._table

    def lookup(self, species_id: str) -> Optional[SpeciesEntry]:
        entry = self._table.get(species_id)
        if entry is None:
            logger.debug("No catalog entry for species %r", species_id)
        return entry

    def random_species_id(self, rng) -> str:
        return rng.choice(self._ids)

    def has_egg_form(self, species_id: str) -> bool:
        entry = self.lookup(species_id)
        return bool(entry and entry.has_egg)

    def evolution_threshold(self, species_id: str) -> int:
        """Level the species evolves at; unknown species count as non-evolving."""
        entry = self.lookup(species_id)
        if entry is None or entry.is_terminal:
            return NO_EVOLUTION
        return entry.evolution_threshold

    def evolution_of(self, species_id: str) -> Optional[str]:
        """The species this one becomes, or None when terminal, unknown or pointing nowhere."""
        entry = self.lookup(species_id)
        if entry is None or entry.is_terminal:
            return None
        if entry.evolution_target not in self._table:
            logger.debug("Species %s evolves into unknown id %r; skipping", species_id, entry.evolution_target)
            return None
        return entry.evolution_target

    def display_name(self, species_id: str) -> str:
        entry = self.lookup(species_id)
        return entry.name if entry else PLACEHOLDER_NAME
