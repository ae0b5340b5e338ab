"""Sticker category cascade.

A sticker's category comes from the first folder of its material path. Each
lookup below is tried in order and the first non-empty result wins. A
tournament id then overrides whatever the cascade produced.
"""

from itemgen.constants import (
    ALYX_STICKER_FOLDER, ALYX_CAPSULE_TOKEN,
    UNCATEGORIZED_STICKERS, UNCATEGORIZED_STICKER_LABEL,
    STICKER_CATEGORY_TOKENS, TOURNAMENT_NAME_TOKEN,
)
from itemgen.indexing import ExtractionError


def material_folder(material):
    return material.split("/")[0]


def _alyx_capsule(folder, translator):
    if folder == ALYX_STICKER_FOLDER:
        return translator.get(ALYX_CAPSULE_TOKEN)
    return None


def _uncategorized(folder, translator):
    if folder in UNCATEGORIZED_STICKERS:
        return UNCATEGORIZED_STICKER_LABEL
    return None


def _token_lookup(template):
    def lookup(folder, translator):
        return translator.get(template.format(folder=folder))
    return lookup


CATEGORY_LOOKUPS = [
    _alyx_capsule,
    _uncategorized,
    *(_token_lookup(template) for template in STICKER_CATEGORY_TOKENS),
]


def tournament_category(event_id, translator):
    category = translator.get(TOURNAMENT_NAME_TOKEN.format(event_id=event_id))
    if not category:
        raise ExtractionError(f"Unable to find the short name for tournament {event_id}.")
    return category


def resolve_sticker_category(kit, translator):
    """Return the category label for a sticker kit, or raise ExtractionError."""
    folder = material_folder(kit.get("sticker_material", ""))

    category = None
    for lookup in CATEGORY_LOOKUPS:
        category = lookup(folder, translator)
        if category:
            break

    event_id = kit.get("tournament_event_id")
    if event_id:
        category = tournament_category(event_id, translator)

    if not category:
        raise ExtractionError(
            f'Unable to define a category for sticker "{kit.get("name")}" (folder "{folder}").'
        )
    return category
