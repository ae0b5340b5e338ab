"""Generator constants — paths, env config, fixed lookup tables."""

import os
from pathlib import Path

# ─── Paths ──────────────────────────────────────────────────────

SCRIPT_DIR = Path(__file__).resolve().parent.parent  # scripts/
PROJECT_DIR = SCRIPT_DIR.parent
DIST_DIR = PROJECT_DIR / "dist"
ITEMS_SOURCE = PROJECT_DIR / "src" / "items.ts"

# Game files — exported from the game install / depot
ASSETS_DIR = PROJECT_DIR / "assets"
ITEMS_PATH = Path(os.environ.get("ITEMS_PATH", ASSETS_DIR / "items_game.txt"))
LANGUAGE_PATH = os.environ.get("LANGUAGE_PATH", str(ASSETS_DIR / "csgo_%s.txt"))
IMAGES_PATH = Path(os.environ.get("IMAGES_PATH", ASSETS_DIR / "images"))

# CS:GO shipped UTF-16 language files, CS2 ships UTF-8 (sometimes with a BOM)
LANGUAGE_ENCODING = os.environ.get("LANGUAGE_ENCODING", "utf-8-sig")

DEFAULT_LANGUAGE = "english"

# ─── Output ─────────────────────────────────────────────────────

PARSED_ITEMS_JSON = "parsed-items-game.json"
WEAPON_ATTRIBUTES_JSON = "weapon-attributes.json"
ITEMS_JSON = "items.json"
ITEM_DEFS_JSON = "item-defs.json"
IDS_JSON = "ids.json"

CDN_URL = "https://steamcdn-a.akamaihd.net/apps/730/icons/{path}.{sha1}.png"

# Type names of the literal arrays spliced into ITEMS_SOURCE
ITEM_TYPE_NAME = "CS_Item"
ITEM_DEF_TYPE_NAME = "CS_ItemDefinition"

# ─── Teams ──────────────────────────────────────────────────────

TEAM_T = 2
TEAM_CT = 3

# used_by_classes key → team
TEAM_MAP = {
    "terrorists": TEAM_T,
    "counter-terrorists": TEAM_CT,
}

TEAM_LABELS = {
    TEAM_T: "TR",
    TEAM_CT: "CT",
}

# ─── Extraction Rules ───────────────────────────────────────────

# Weapon sub-positions in this bucket are grenades, armor, etc.
EXCLUDED_WEAPON_CATEGORY = "equipment"

BASE_WEAPON_IMAGE = "econ/weapons/base_weapons/{classname}"
LOCAL_GLOVE_IMAGE = "/{classname}.png"
STICKER_IMAGE = "econ/stickers/{material}_large"

# No rarity attribute exists for gloves in items_game
GLOVE_RARITY = "ancient"
MUSIC_KIT_RARITY = "uncommon"
DEFAULT_STICKER_RARITY = "uncommon"

# Paint ids on item definitions: base items have none, non-base knives and
# gloves get theirs from the skin variants
BASE_PAINT_ID = -1
UNPAINTED_PAINT_ID = 0

# Duplicate of the CS:GO default music kit
SKIPPED_MUSIC_KITS = {"2"}
FREE_MUSIC_KIT = 1

# Sticker folders with no capsule of their own
UNCATEGORIZED_STICKERS = [
    "standard",
    "stickers2",
    "community02",
    "tournament_assets",
    "community_mix01",
    "danger_zone",
]
UNCATEGORIZED_STICKER_LABEL = "Valve"

ALYX_STICKER_FOLDER = "alyx"
ALYX_CAPSULE_TOKEN = "#CSGO_crate_sticker_pack_hlalyx_capsule"

# Tried in order until one translates
STICKER_CATEGORY_TOKENS = [
    "#CSGO_sticker_crate_key_{folder}",
    "#CSGO_crate_sticker_pack_{folder}",
    "#CSGO_crate_sticker_pack_{folder}_capsule",
]
TOURNAMENT_NAME_TOKEN = "#CSGO_Tournament_Event_NameShort_{event_id}"

# Substrings that mark a sticker kit as graffiti / patch / spray
EXCLUDED_STICKER_NAME_TOKENS = ["SprayKit"]
EXCLUDED_STICKER_NAMES = ["spray_", "patch_"]
EXCLUDED_STICKER_MATERIALS = ["_graffiti"]
