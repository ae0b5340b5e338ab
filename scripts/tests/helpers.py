"""Shared test factories for generator tests.

Provides a small but realistic items_game tree, the matching language tokens
and a fake image resolver, all with easy overrides.
"""

import json
import sys
from pathlib import Path

# Add scripts/ to path so we can import itemgen
SCRIPTS_DIR = Path(__file__).resolve().parent.parent
if str(SCRIPTS_DIR) not in sys.path:
    sys.path.insert(0, str(SCRIPTS_DIR))

from itemgen.extraction import ExtractionContext  # noqa: E402
from itemgen.indexing import flatten_fragments  # noqa: E402
from itemgen.registry import IdRegistry  # noqa: E402

DIST_DIR = SCRIPTS_DIR.parent / "dist"


# ─── Raw items_game Factory ──────────────────────────────────────

def make_items(**overrides):
    """The items block. Override or add entries by definition id (as a kwarg: _7=...)."""
    items = {
        "1": {
            "name": "weapon_deagle",
            "prefab": "weapon_deagle_prefab",
            "baseitem": "1",
            "item_sub_position": "secondary0",
        },
        "7": {
            "name": "weapon_ak47",
            "prefab": "weapon_ak47_prefab",
            "baseitem": "1",
            "item_sub_position": "rifle1",
        },
        "31": {
            "name": "weapon_taser",
            "prefab": "weapon_taser_prefab",
            "baseitem": "1",
            "item_sub_position": "equipment2",
        },
        "41": {
            "name": "weapon_knifegg",
            "prefab": "melee",
            "item_name": "#SFUI_WPNHUD_KnifeGG",
            "image_inventory": "econ/weapons/base_weapons/weapon_knifegg",
            "used_by_classes": {"terrorists": "1", "counter-terrorists": "1"},
        },
        "42": {
            "name": "weapon_knife",
            "prefab": "melee",
            "baseitem": "1",
            "item_name": "#SFUI_WPNHUD_Knife",
            "image_inventory": "econ/weapons/base_weapons/weapon_knife",
            "used_by_classes": {"counter-terrorists": "1"},
        },
        "80": {
            "name": "weapon_knife_ghost",
            "prefab": "melee_noncustomizable",
            "item_name": "#SFUI_WPNHUD_KnifeGhost",
            "used_by_classes": {"terrorists": "1", "counter-terrorists": "1"},
        },
        "507": {
            "name": "weapon_knife_karambit",
            "prefab": "melee_unusual",
            "item_name": "#SFUI_WPNHUD_knife_karambit",
            "image_inventory": "econ/weapons/base_weapons/weapon_knife_karambit",
            "used_by_classes": {"terrorists": "1", "counter-terrorists": "1"},
        },
        "5027": {
            "name": "studded_bloodhound_gloves",
            "prefab": "hands_paintable",
            "item_name": "#CSGO_Wearable_t_studdedgloves",
            "used_by_classes": {"terrorists": "1", "counter-terrorists": "1"},
        },
        "5028": {
            "name": "t_gloves",
            "prefab": "hands",
            "baseitem": "1",
            "item_name": "#CSGO_Wearable_t_defaultgloves",
            "image_inventory": "econ/weapons/base_weapons/t_gloves",
            "used_by_classes": {"terrorists": "1"},
        },
    }
    for key, value in overrides.items():
        items[key.lstrip("_")] = value
    return items


def make_prefabs():
    # Split across fragments, the way repeated "prefabs" blocks come back
    return [
        {
            "weapon_deagle_prefab": {
                "prefab": "secondary",
                "item_name": "#SFUI_WPNHUD_DesertEagle",
                "item_rarity": "common",
                "used_by_classes": {"terrorists": "1", "counter-terrorists": "1"},
                "attributes": {"damage": "63", "in game price": "700"},
            },
            "weapon_ak47_prefab": {
                "prefab": "rifle",
                "item_name": "#SFUI_WPNHUD_AK47",
                "item_rarity": "common",
                "image_inventory": "econ/weapons/base_weapons/weapon_ak47",
                "used_by_classes": {"terrorists": "1"},
                "attributes": {"damage": "36", "in game price": "2700"},
            },
        },
        {
            "melee": {"item_rarity": "common"},
            "melee_unusual": {"prefab": "melee", "item_rarity": "ancient"},
            "hands": {},
            "hands_paintable": {"prefab": "hands"},
        },
    ]


def make_items_game(**overrides):
    """Build a raw items_game node. Override any top-level block via kwargs."""
    items_game = {
        "prefabs": make_prefabs(),
        "items": [make_items()],
        "paint_kits": [{
            "0": {"name": "default"},
            "282": {"name": "cu_ak47_cobra", "description_tag": "#PaintKit_cu_ak47_cobra_Tag"},
            "418": {"name": "am_doppler_phase1", "description_tag": "#PaintKit_am_doppler_phase1_Tag"},
            "999": {"name": "workshop_untagged"},
            "10006": {
                "name": "bloodhound_black_silver",
                "description_tag": "#PaintKit_bloodhound_black_silver_Tag",
            },
        }],
        "paint_kits_rarity": [
            {"cu_ak47_cobra": "legendary"},
            {"am_doppler_phase1": "rare"},
        ],
        "alternate_icons2": {
            "weapon_icons": {
                "65604": {"icon_path": "econ/default_generated/weapon_ak47_cu_ak47_cobra_light"},
                "65605": {"icon_path": "econ/default_generated/weapon_ak47_cu_ak47_cobra_medium"},
                "65606": {"icon_path": "econ/default_generated/weapon_ak47_cu_ak47_cobra_heavy"},
                "65700": {"icon_path": "econ/default_generated/weapon_knife_karambit_am_doppler_phase1_light"},
                "65800": {
                    "icon_path": "econ/default_generated/studded_bloodhound_gloves_bloodhound_black_silver_light",
                },
                "65900": {"icon_path": "econ/default_generated/weapon_m4a1_unknown_kit_light"},
                "66000": {"icon_path": "econ/default_generated/weapon_m4a1_cu_ak47_cobra_light"},
            },
        },
        "music_definitions": [{
            "1": {"name": "valve_csgo_01", "loc_name": "#musickit_valve_csgo_01",
                  "image_inventory": "econ/music_kits/valve_01"},
            "2": {"name": "valve_csgo_02", "loc_name": "#musickit_valve_csgo_02",
                  "image_inventory": "econ/music_kits/valve_02"},
            "3": {"name": "noisia_01", "loc_name": "#musickit_noisia_01",
                  "image_inventory": "econ/music_kits/noisia_01"},
        }],
        "sticker_kits": [{
            "0": {"name": "default", "item_name": "#StickerKit_Default", "sticker_material": ""},
            "1": {"name": "dh_gologo1", "item_name": "#StickerKit_dh_gologo1",
                  "sticker_material": "standard/dh_gologo1", "item_rarity": "rare"},
            "75": {"name": "kat2014_ibuypower", "item_name": "#StickerKit_kat2014_ibuypower",
                   "sticker_material": "emskatowice2014/ibuypower", "item_rarity": "rare",
                   "tournament_event_id": "3"},
            "200": {"name": "comm01_cheongsam", "item_name": "#StickerKit_comm01_cheongsam",
                    "sticker_material": "community01/cheongsam"},
            "1500": {"name": "spray_std_ak", "item_name": "#SprayKit_std_ak",
                     "sticker_material": "default/std_ak"},
            "1600": {"name": "std2_tag", "item_name": "#StickerKit_std2_tag",
                     "sticker_material": "default_graffiti/std2_tag"},
            "4500": {"name": "alyx_01", "item_name": "#StickerKit_alyx_01",
                     "sticker_material": "alyx/alyx_01", "item_rarity": "rare"},
            "5000": {"name": "patch_foxy", "item_name": "#PatchKit_patch_foxy",
                     "sticker_material": "patches/foxy"},
        }],
    }
    items_game.update(overrides)
    return items_game


def make_tree(**overrides):
    return {"items_game": make_items_game(**overrides)}


def make_flat_tree(**overrides):
    """Same tree with every fragment list merged, as vdf.loads returns it."""
    items_game = make_items_game(**overrides)
    return {"items_game": {
        key: flatten_fragments(value) if isinstance(value, list) else value
        for key, value in items_game.items()
    }}


# ─── Language Tokens ─────────────────────────────────────────────

def make_tokens(**overrides):
    tokens = {
        "SFUI_WPNHUD_AK47": "AK-47",
        "SFUI_WPNHUD_DesertEagle": "Desert Eagle",
        "SFUI_WPNHUD_Knife": "Knife",
        "SFUI_WPNHUD_KnifeGG": "Golden Knife",
        "SFUI_WPNHUD_KnifeGhost": "Spectral Shiv",
        "SFUI_WPNHUD_knife_karambit": "Karambit",
        "CSGO_Wearable_t_studdedgloves": "Bloodhound Gloves",
        "CSGO_Wearable_t_defaultgloves": "Default T Gloves",
        "PaintKit_cu_ak47_cobra_Tag": "Redline",
        "PaintKit_am_doppler_phase1_Tag": "Doppler",
        "PaintKit_bloodhound_black_silver_Tag": "Charred",
        "musickit_valve_csgo_01": "CS:GO",
        "musickit_valve_csgo_02": "CS:GO (duplicate)",
        "musickit_noisia_01": "Noisia, Sharpened",
        "StickerKit_dh_gologo1": "Gold Web",
        "StickerKit_kat2014_ibuypower": "iBUYPOWER | Katowice 2014",
        "StickerKit_comm01_cheongsam": "Cheongsam",
        "StickerKit_alyx_01": "Alyx",
        "CSGO_sticker_crate_key_community01": "Sticker Capsule",
        "CSGO_crate_sticker_pack_emskatowice2014": "EMS Katowice 2014 Capsule",
        "CSGO_crate_sticker_pack_hlalyx_capsule": "Half-Life: Alyx Sticker Capsule",
        "CSGO_Tournament_Event_NameShort_3": "Katowice 2014",
    }
    tokens.update(overrides)
    return tokens


# ─── Images ─────────────────────────────────────────────────────

def fake_image_url(image_path):
    return f"https://cdn.test/{image_path}.png"


# ─── Context Factory ─────────────────────────────────────────────

def make_context(items_game=None, tokens=None, ids=None):
    return ExtractionContext(
        items_game if items_game is not None else make_items_game(),
        tokens if tokens is not None else make_tokens(),
        IdRegistry(ids),
        fake_image_url,
    )


# ─── Real JSON Loader ────────────────────────────────────────────

def load_real_json(filename):
    """Load a generated JSON file from dist/. Returns None if not found."""
    path = DIST_DIR / filename
    if not path.exists():
        return None
    with open(path, "r", encoding="utf-8") as f:
        return json.load(f)
