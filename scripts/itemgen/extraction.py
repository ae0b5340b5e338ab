"""Extraction pass — turn the parsed items_game tree into catalog items.

Every extractor takes the shared ExtractionContext and appends to its
accumulators. Extractors must run in EXTRACTORS order: ids are handed out
in the order keys are first seen, so changing the order renumbers items.
"""

import re

from itemgen.constants import (
    EXCLUDED_WEAPON_CATEGORY, BASE_WEAPON_IMAGE, LOCAL_GLOVE_IMAGE, STICKER_IMAGE,
    GLOVE_RARITY, MUSIC_KIT_RARITY, DEFAULT_STICKER_RARITY,
    BASE_PAINT_ID, UNPAINTED_PAINT_ID, SKIPPED_MUSIC_KITS, FREE_MUSIC_KIT,
    EXCLUDED_STICKER_NAME_TOKENS, EXCLUDED_STICKER_NAMES, EXCLUDED_STICKER_MATERIALS,
)
from itemgen.indexing import (
    ExtractionError, Translator,
    iter_entries, index_prefabs, index_paint_kit_rarity,
    parse_teams, team_phrase,
)
from itemgen.stickers import resolve_sticker_category

# "rifle0" → "rifle", "c4" → "c4"
WEAPON_CATEGORY_RE = re.compile(r"(c4|[^\d]+)")


class ExtractionContext:
    """Indexes and output accumulators shared by every extractor."""

    def __init__(self, items_game, tokens, registry, image_url):
        self.items_game = items_game
        self.registry = registry
        self.image_url = image_url
        self.translator = Translator(tokens, warn=self.warn)
        self.prefabs = index_prefabs(items_game)
        self.paint_kit_rarity = index_paint_kit_rarity(items_game)

        self.items = []
        self.paints = []
        self.music_kits = []
        self.stickers = []
        self.item_defs = []
        self.paint_kits = []
        self.weapon_attributes = {}
        self.warnings = []

    def warn(self, reason, message):
        print(f"  Warning: {message}")
        self.warnings.append(reason)

    def require_prefab(self, name):
        prefab = self.prefabs.get(name)
        if prefab is None:
            raise ExtractionError(f'Unable to find prefab for "{name}".')
        return prefab

    def all_items(self):
        return self.items + self.paints + self.music_kits + self.stickers


def _compact(**fields):
    """Build an output record, dropping fields that are None."""
    return {key: value for key, value in fields.items() if value is not None}


def _add_base_item(ctx, item_def, entry, *, category, name, teams, image, model, rarity, type_):
    is_base = entry.get("baseitem") == "1"
    item_id = ctx.registry.assign(team_phrase(teams) + name)
    ctx.items.append(_compact(
        base=True,
        category=category,
        free=True if is_base else None,
        id=item_id,
        image=image,
        model=model,
        name=name,
        rarity=rarity,
        teams=teams,
        type=type_,
    ))
    ctx.item_defs.append({
        "classname": entry["name"],
        "def": int(item_def),
        "id": item_id,
        "paintid": BASE_PAINT_ID if is_base else UNPAINTED_PAINT_ID,
    })


# ─── Weapons / Knives / Gloves ──────────────────────────────────

def weapon_category(entry):
    """Return the weapon category of a raw item, or None if it is not a base weapon."""
    if entry.get("baseitem") != "1" or not entry.get("item_sub_position"):
        return None
    match = WEAPON_CATEGORY_RE.search(entry["item_sub_position"])
    if not match:
        return None
    category = match.group(1)
    if category == EXCLUDED_WEAPON_CATEGORY:
        return None
    return category


def is_knife(entry):
    prefab = entry.get("prefab") or ""
    if "melee" not in prefab or "noncustomizable" in prefab:
        return False
    # The bare "melee" prefab covers the default knives and a few unreleased ones
    if prefab == "melee" and entry.get("baseitem") != "1":
        return False
    return bool(entry.get("used_by_classes"))


def is_glove(entry):
    prefab = entry.get("prefab") or ""
    return "hands" in prefab and bool(entry.get("used_by_classes"))


def extract_weapons(ctx):
    """Base weapons. Stats, name, rarity, teams and image come from the prefab."""
    for item_def, entry in iter_entries(ctx.items_game.get("items")):
        category = weapon_category(entry)
        if category is None:
            continue
        prefab = ctx.require_prefab(entry.get("prefab"))
        ctx.weapon_attributes[item_def] = prefab.get("attributes")
        classname = entry["name"]
        image_path = prefab.get("image_inventory") or BASE_WEAPON_IMAGE.format(classname=classname)
        _add_base_item(
            ctx, item_def, entry,
            category=category,
            name=ctx.translator.name(prefab.get("item_name")),
            teams=parse_teams(prefab.get("used_by_classes") or {}),
            image=ctx.image_url(image_path),
            model=classname.replace("weapon_", ""),
            rarity=prefab.get("item_rarity"),
            type_="weapon",
        )


def extract_knives(ctx):
    for item_def, entry in iter_entries(ctx.items_game.get("items")):
        if not is_knife(entry):
            continue
        prefab = ctx.require_prefab(entry["prefab"])
        _add_base_item(
            ctx, item_def, entry,
            category="melee",
            name=ctx.translator.name(entry.get("item_name")),
            teams=parse_teams(entry["used_by_classes"]),
            image=ctx.image_url(entry["image_inventory"]),
            model=entry["name"].replace("weapon_", ""),
            rarity=prefab.get("item_rarity"),
            type_="melee",
        )


def extract_gloves(ctx):
    for item_def, entry in iter_entries(ctx.items_game.get("items")):
        if not is_glove(entry):
            continue
        ctx.require_prefab(entry["prefab"])
        classname = entry["name"]
        if entry.get("image_inventory"):
            image = ctx.image_url(entry["image_inventory"])
        else:
            image = LOCAL_GLOVE_IMAGE.format(classname=classname)
        _add_base_item(
            ctx, item_def, entry,
            category="glove",
            name=ctx.translator.name(entry.get("item_name")),
            teams=parse_teams(entry["used_by_classes"]),
            image=image,
            model=classname,
            rarity=GLOVE_RARITY,
            type_="glove",
        )


# ─── Paint Kits & Skins ─────────────────────────────────────────

def extract_paint_kits(ctx):
    for value, kit in iter_entries(ctx.items_game.get("paint_kits")):
        if not kit.get("description_tag") or kit.get("name") == "default":
            continue
        ctx.paint_kits.append({
            "class_name": kit["name"],
            "name": ctx.translator.name(kit["description_tag"]),
            "rarity": ctx.paint_kit_rarity.get(kit["name"]),
            "value": int(value),
        })


def _weapon_icons(items_game):
    alternate_icons = items_game.get("alternate_icons2") or {}
    return iter_entries(alternate_icons.get("weapon_icons"))


def find_paint_kit(ctx, icon_path):
    for paint_kit in ctx.paint_kits:
        if f"_{paint_kit['class_name']}_light" in icon_path:
            return paint_kit
    return None


def find_item_def(ctx, icon_path, paint_kit):
    for definition in ctx.item_defs:
        classname = definition.get("classname")
        if classname and f"{classname}_{paint_kit['class_name']}" in icon_path:
            return definition
    return None


def find_item(ctx, item_id):
    for item in ctx.items:
        if item["id"] == item_id:
            return item
    return None


def extract_paints(ctx):
    """One skin variant per "_light" inventory icon that matches a kit and a base item."""
    for _, icon in _weapon_icons(ctx.items_game):
        icon_path = icon.get("icon_path", "")
        if not icon_path.endswith("light"):
            continue

        paint_kit = find_paint_kit(ctx, icon_path)
        if paint_kit is None:
            ctx.warn("no paint kit", f"Unable to find paint kit for {icon_path}")
            continue
        definition = find_item_def(ctx, icon_path, paint_kit)
        if definition is None:
            ctx.warn("no item definition", f"Unable to find item for {icon_path}")
            continue
        item = find_item(ctx, definition["id"])
        if item is None:
            ctx.warn("no base item", f"Unable to find item for {icon_path}")
            continue

        name = f"{item['name']} | {paint_kit['name']}"
        item_id = ctx.registry.assign(name + str(paint_kit["value"]))
        rarity = paint_kit["rarity"] if paint_kit["rarity"] is not None else item.get("rarity")

        variant = {key: value for key, value in item.items() if key not in ("base", "free")}
        variant.update(
            id=item_id,
            image=ctx.image_url(icon_path + "_large"),
            name=name,
            rarity=rarity,
        )
        ctx.paints.append(_compact(**variant))
        ctx.item_defs.append({**definition, "id": item_id, "paintid": paint_kit["value"]})


# ─── Music Kits ─────────────────────────────────────────────────

def extract_music_kits(ctx):
    for music_id, kit in iter_entries(ctx.items_game.get("music_definitions")):
        if music_id in SKIPPED_MUSIC_KITS:
            continue
        name = ctx.translator.name(kit.get("loc_name"))
        item_id = ctx.registry.assign(name)
        musicid = int(music_id)
        ctx.music_kits.append(_compact(
            category="musickit",
            free=True if musicid == FREE_MUSIC_KIT else None,
            id=item_id,
            image=ctx.image_url(kit["image_inventory"]),
            name=name,
            rarity=MUSIC_KIT_RARITY,
            type="musickit",
        ))
        ctx.item_defs.append({"id": item_id, "musicid": musicid})


# ─── Stickers ───────────────────────────────────────────────────

def is_excluded_sticker(kit):
    """Default kit, graffiti, sprays and patches share sticker_kits with real stickers."""
    name = kit.get("name", "")
    if name == "default":
        return True
    if any(token in kit.get("item_name", "") for token in EXCLUDED_STICKER_NAME_TOKENS):
        return True
    if any(token in name for token in EXCLUDED_STICKER_NAMES):
        return True
    return any(token in kit.get("sticker_material", "") for token in EXCLUDED_STICKER_MATERIALS)


def extract_stickers(ctx):
    for sticker_id, kit in iter_entries(ctx.items_game.get("sticker_kits")):
        if is_excluded_sticker(kit):
            continue
        category = resolve_sticker_category(kit, ctx.translator)
        name = ctx.translator.name(kit.get("item_name"))
        item_id = ctx.registry.assign(name)
        ctx.stickers.append(_compact(
            category=category,
            id=item_id,
            image=ctx.image_url(STICKER_IMAGE.format(material=kit["sticker_material"])),
            name=name,
            rarity=kit.get("item_rarity", DEFAULT_STICKER_RARITY),
            type="sticker",
        ))
        ctx.item_defs.append({"id": item_id, "stickerid": int(sticker_id)})


EXTRACTORS = [
    ("weapons", extract_weapons),
    ("knives", extract_knives),
    ("gloves", extract_gloves),
    ("paint kits", extract_paint_kits),
    ("paints", extract_paints),
    ("music kits", extract_music_kits),
    ("stickers", extract_stickers),
]
