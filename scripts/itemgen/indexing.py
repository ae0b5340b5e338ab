"""Lookup helpers — fragment flattening, prefab/rarity indexes, translation, teams.

items_game.txt repeats some top-level blocks (items, prefabs, paint_kits...).
Depending on the parser those come back either merged into one mapping or as
a list of mapping fragments, so everything here accepts both shapes.
"""

from itemgen.constants import TEAM_MAP, TEAM_LABELS


class ExtractionError(ValueError):
    """Raised when the source data breaks an assumption the generator relies on."""


def iter_fragments(node):
    """Yield the mapping fragments of a block, in source order."""
    if node is None:
        return
    if isinstance(node, dict):
        yield node
        return
    for fragment in node:
        if isinstance(fragment, dict):
            yield fragment


def iter_entries(node):
    """Yield (key, value) pairs across every fragment of a block, in source order."""
    for fragment in iter_fragments(node):
        yield from fragment.items()


def flatten_fragments(node):
    """Merge fragments into one dict. Later keys overwrite earlier ones."""
    flat = {}
    for key, value in iter_entries(node):
        flat[key] = value
    return flat


def index_prefabs(items_game):
    """Prefab name → prefab definition."""
    return flatten_fragments(items_game.get("prefabs"))


def index_paint_kit_rarity(items_game):
    """Paint kit class name → rarity name."""
    return flatten_fragments(items_game.get("paint_kits_rarity"))


# ─── Translation ────────────────────────────────────────────────

class Translator:
    """Resolves "#Token" references against a language file's Tokens block."""

    def __init__(self, tokens, warn=None):
        self.tokens = tokens
        self._warn = warn

    def get(self, token):
        """Return the translation for token, or None when it is missing."""
        if not token:
            return None
        return self.tokens.get(token[1:] if token.startswith("#") else token)

    def name(self, token):
        """Like get(), but falls back to the raw token so the item keeps a name."""
        value = self.get(token)
        if value is None:
            if self._warn:
                self._warn("missing translation", f"No translation for {token!r}")
            return token
        return value


# ─── Teams ──────────────────────────────────────────────────────

def to_team(name):
    try:
        return TEAM_MAP[name]
    except KeyError:
        raise ExtractionError(f'Unknown team "{name}"') from None


def parse_teams(used_by_classes):
    """Map a used_by_classes block to team ids, keeping its key order."""
    return [to_team(name) for name in used_by_classes]


def team_phrase(teams):
    """Build the "TR and CT's " prefix used in identifier keys."""
    return " and ".join(TEAM_LABELS[team] for team in teams) + "'s "
