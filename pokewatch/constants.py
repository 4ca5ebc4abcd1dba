import os

# --- GLOBAL CONFIGURATION ---
SCREEN_WIDTH = 320
SCREEN_HEIGHT = 320
FPS = int(os.getenv("POKEWATCH_FPS", "1"))  # interactive mode redraws once a second
DB_FILE = os.getenv("POKEWATCH_DB_FILE", "pokewatch.db")
ASSET_DIR = os.getenv("POKEWATCH_ASSET_DIR", "assets")
LOG_LEVEL = os.getenv("POKEWATCH_LOG_LEVEL", "INFO")

# Audio pre-init, same knobs as the Pi build
AUDIO_FREQ = int(os.getenv("POKEWATCH_AUDIO_FREQ", "22050"))
AUDIO_CHANNELS = int(os.getenv("POKEWATCH_AUDIO_CHANNELS", "2"))
AUDIO_BUFFER = int(os.getenv("POKEWATCH_AUDIO_BUF", "512"))

# --- LIFECYCLE RULES ---
EXP_PER_LEVEL = 100
EGG_HATCH_LEVEL = 5            # 500 steps
TERMINAL_EGG_HATCH_LEVEL = 25  # 2500 steps for species that never evolve
NO_EVOLUTION = -1
VARIANT_ODDS = int(os.getenv("POKEWATCH_VARIANT_ODDS", "100"))  # 1 in N is shiny

# --- PERSISTENCE KEYS ---
STEP_PREFIX = "step"
DAILY_STEP_PREFIX = "daily_step"
POKEMON_PREFIX = "pokemon"

# --- DISPLAY ---
PLACEHOLDER_NAME = "Unown"
EGG_NAME = "Egg"
SPRITE_PREFIX = "sprite_"
SHINY_SUFFIX = "s"
EGG_SUFFIX = "_egg"
LEVEL_UP_SOUND = "level_up"

# Simulated pedometer (--walk)
WALK_INTERVAL_SEC = 1.0
WALK_STEPS_PER_SAMPLE = 2
BOOT_STEPS = 1000  # since-boot counter value the simulator starts from

# --- RETRO UI PALETTE ---
COLOR_BG = (40, 44, 52)
COLOR_TEXT = (171, 178, 191)
COLOR_UI_BAR_BG = (62, 68, 81)
COLOR_HP_GREEN = (152, 195, 121)
COLOR_HP_YELLOW = (229, 192, 123)
COLOR_HP_RED = (224, 108, 117)
COLOR_EXP = (97, 175, 239)
COLOR_SHINY = (255, 215, 0)
COLOR_EGG = (245, 245, 210)
COLOR_PLACEHOLDER = (100, 100, 100)
