import datetime

from pokewatch.constants import POKEMON_PREFIX, DAILY_STEP_PREFIX, LEVEL_UP_SOUND
from pokewatch.models import CompanionState

from .conftest import DAY, NEXT_DAY


def test_spawn_draws_and_saves_todays_species(make_engine, db):
    engine = make_engine(species=["010"])
    state = engine.spawn(DAY)
    assert state.species_id == "010"
    assert state.is_egg is True
    assert state.name == "Egg"
    assert state.experience == 0
    assert state.current_day == DAY.date()
    assert db.get_day_value(POKEMON_PREFIX, DAY.date()) == 10


def test_spawn_reuses_saved_species_and_steps(make_engine, db, sounds):
    db.set_day_value(POKEMON_PREFIX, DAY.date(), 20)
    db.set_day_value(DAILY_STEP_PREFIX, DAY.date(), 320)
    engine = make_engine()  # nothing scripted: a draw would fail
    state = engine.spawn(DAY)
    assert state.species_id == "020"
    assert state.experience == 320
    assert state.is_egg is True
    assert sounds.played == []


def test_spawn_replays_evolutions_silently(make_engine, db, sounds):
    db.set_day_value(POKEMON_PREFIX, DAY.date(), 10)
    db.set_day_value(DAILY_STEP_PREFIX, DAY.date(), 1700)
    state = make_engine().spawn(DAY)
    assert state.is_egg is False
    assert state.species_id == "011"
    assert state.name == "Bloomite"
    assert sounds.played == []


def test_species_without_egg_form_spawns_hatched(make_engine):
    state = make_engine(species=["030"]).spawn(DAY)
    assert state.is_egg is False
    assert state.name == "Stormwing"


def test_variant_roll(make_engine):
    assert make_engine(species=["010"], rolls=[0]).spawn(DAY).is_variant is True
    assert make_engine(species=["020"], rolls=[57]).spawn(DAY).is_variant is False


def test_egg_hatches_at_level_5(make_engine, sounds):
    engine = make_engine()
    state = CompanionState("010", is_egg=True, experience=499, current_day=DAY.date())
    engine.on_tick(state, DAY)
    assert state.is_egg is True
    assert sounds.played == []

    state.experience = 500
    engine.on_tick(state, DAY)
    assert state.is_egg is False
    assert state.species_id == "010"
    assert state.name == "Sproutle"
    assert sounds.played == [LEVEL_UP_SOUND]


def test_terminal_egg_needs_level_25(make_engine):
    engine = make_engine()
    state = CompanionState("020", is_egg=True, experience=2499, current_day=DAY.date())
    engine.on_tick(state, DAY)
    assert state.is_egg is True

    state.experience = 2500
    engine.on_tick(state, DAY)
    assert state.is_egg is False
    assert state.species_id == "020"


def test_evolves_at_threshold(make_engine, sounds):
    engine = make_engine()
    state = CompanionState("010", is_egg=False, experience=1599, current_day=DAY.date())
    engine.on_tick(state, DAY)
    assert state.species_id == "010"

    state.experience = 1600
    engine.on_tick(state, DAY)
    assert state.species_id == "011"
    assert state.name == "Bloomite"
    assert sounds.played == [LEVEL_UP_SOUND]


def test_terminal_species_never_evolves(make_engine, sounds):
    engine = make_engine()
    state = CompanionState("011", is_egg=False, current_day=DAY.date())
    for experience in (0, 1600, 5000, 100000):
        state.experience = experience
        engine.on_tick(state, DAY)
        assert state.species_id == "011"
    assert sounds.played == []


def test_broken_catalog_entry_does_not_change_state(make_engine, sounds):
    engine = make_engine()
    state = CompanionState("040", is_egg=False, experience=900, current_day=DAY.date())
    engine.on_tick(state, DAY)
    assert state.species_id == "040"
    assert sounds.played == []


def test_unknown_species_is_treated_as_non_evolving(make_engine, sounds):
    engine = make_engine()
    state = CompanionState("777", is_egg=False, experience=9000, current_day=DAY.date())
    engine.on_tick(state, DAY)
    assert state.species_id == "777"
    assert sounds.played == []


def test_day_rollover_resets_once(make_engine, db):
    engine = make_engine(species=["020"])
    state = CompanionState("011", is_egg=False, is_variant=True, experience=1700, current_day=DAY.date())
    engine.on_tick(state, NEXT_DAY)
    assert state.current_day == NEXT_DAY.date()
    assert state.species_id == "020"
    assert state.is_egg is True
    assert state.is_variant is False
    assert state.experience == 0
    assert db.get_day_value(POKEMON_PREFIX, NEXT_DAY.date()) == 20

    # same day again: no second draw (ScriptedRandom would run dry) and no reset
    state.experience = 40
    engine.on_tick(state, NEXT_DAY)
    engine.on_tick(state, NEXT_DAY + datetime.timedelta(hours=5))
    assert state.species_id == "020"
    assert state.experience == 40


def test_rollover_reuses_species_already_saved_for_the_day(make_engine, db):
    db.set_day_value(POKEMON_PREFIX, NEXT_DAY.date(), 30)
    engine = make_engine()
    state = CompanionState("010", current_day=DAY.date())
    engine.on_tick(state, NEXT_DAY)
    assert state.species_id == "030"
    assert state.is_egg is False


def test_one_transition_per_tick(make_engine, sounds):
    engine = make_engine()
    state = CompanionState("010", is_egg=True, experience=2000, current_day=DAY.date())
    engine.on_tick(state, DAY)
    assert (state.is_egg, state.species_id) == (False, "010")
    engine.on_tick(state, DAY)
    assert state.species_id == "011"
    engine.on_tick(state, DAY)
    assert sounds.played == [LEVEL_UP_SOUND, LEVEL_UP_SOUND]


def test_step_events_feed_experience(make_engine):
    engine = make_engine()
    state = CompanionState("010", current_day=DAY.date())
    assert engine.on_step_event(state, 1000, DAY) == 0
    assert engine.on_step_event(state, 1050, DAY) == 50
    assert state.experience == 50


def test_cry_is_stateless_and_quiet_for_eggs(make_engine, sounds):
    engine = make_engine()
    egg = CompanionState("010", is_egg=True, current_day=DAY.date())
    engine.cry(egg)
    assert sounds.played == []

    hatched = CompanionState("010", is_egg=False, experience=700, current_day=DAY.date(), name="Sproutle")
    engine.cry(hatched)
    assert sounds.played == ["cry_sproutle"]
    assert (hatched.species_id, hatched.experience) == ("010", 700)


def test_walk_from_egg_to_evolution(make_engine, sounds):
    engine = make_engine(species=["010"])
    state = engine.spawn(DAY)
    assert state.is_egg is True

    engine.on_step_event(state, 3000, DAY)
    engine.on_step_event(state, 3500, DAY)
    engine.on_tick(state, DAY)
    assert state.experience == 500
    assert (state.is_egg, state.species_id) == (False, "010")

    engine.on_step_event(state, 4599, DAY)
    engine.on_tick(state, DAY)
    assert state.species_id == "010"

    engine.on_step_event(state, 4600, DAY)
    engine.on_tick(state, DAY)
    assert state.experience == 1600
    assert state.level == 16
    assert state.species_id == "011"
    assert sounds.played == [LEVEL_UP_SOUND, LEVEL_UP_SOUND]
