"""I/O operations — KeyValues loading, id registry file, image hashing, JSON writing."""

import hashlib
import json
import re

import vdf

from itemgen.constants import (
    DIST_DIR, IDS_JSON, IMAGES_PATH, CDN_URL, LANGUAGE_ENCODING,
)
from itemgen.indexing import ExtractionError


# ─── Game Files (KeyValues) ─────────────────────────────────────

def load_keyvalues(path, encoding="utf-8-sig"):
    """Read and parse a KeyValues text file."""
    with open(path, "r", encoding=encoding) as f:
        return vdf.loads(f.read())


def load_items_game(path):
    """Load items_game.txt. Returns the full tree (rooted at "items_game")."""
    tree = load_keyvalues(path)
    if "items_game" not in tree:
        raise ExtractionError(f"{path} has no items_game block")
    print(f"  Loaded {path.name}")
    return tree


def load_language(language, path_template, encoding=LANGUAGE_ENCODING):
    """Load the Tokens block of a language file."""
    path = path_template % language
    tree = load_keyvalues(path, encoding=encoding)
    try:
        tokens = tree["lang"]["Tokens"]
    except KeyError:
        raise ExtractionError(f"{path} has no lang/Tokens block") from None
    print(f"  Loaded {len(tokens)} {language} tokens")
    return tokens


# ─── Identifier Registry File ───────────────────────────────────

def load_ids(path=None):
    """Load the previous run's id list. A missing file means a fresh registry."""
    path = path or DIST_DIR / IDS_JSON
    if not path.exists():
        print(f"  (no {path.name} found, starting a fresh id registry)")
        return []

    with open(path, "r", encoding="utf-8") as f:
        ids = json.load(f)
    if not isinstance(ids, list):
        raise ExtractionError(f"{path} must contain a JSON list of keys")
    print(f"  Loaded {len(ids)} ids")
    return ids


# ─── Images ─────────────────────────────────────────────────────

def cdn_url(image_path, images_dir=IMAGES_PATH):
    """Steam CDN url for an inventory image: <path>.<sha1 of the png>.png"""
    with open(images_dir / f"{image_path}.png", "rb") as f:
        sha1 = hashlib.sha1(f.read()).hexdigest()
    return CDN_URL.format(path=image_path, sha1=sha1)


# ─── JSON Writers ────────────────────────────────────────────────

def write_json(filename, data, dist_dir=None):
    """Write data to a JSON file in the dist directory."""
    path = (dist_dir or DIST_DIR) / filename
    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, "w", encoding="utf-8") as f:
        json.dump(data, f, indent=2, ensure_ascii=False)
    size_kb = path.stat().st_size / 1024
    print(f"  Wrote {path.name} ({size_kb:.0f} KB)")


def to_literal(data):
    """Compact JSON, as it is spliced into source files."""
    return json.dumps(data, separators=(",", ":"), ensure_ascii=False)


def replace_in_file(path, type_name, data):
    """Replace the `<type_name>[] = ...;` literal in path with data."""
    pattern = re.compile(re.escape(type_name) + r"\[\] = [^;]+;")
    with open(path, "r", encoding="utf-8") as f:
        contents = f.read()

    replacement = f"{type_name}[] = {to_literal(data)};"
    # Callable replacement so backslashes in the JSON are not treated as escapes
    contents, count = pattern.subn(lambda _: replacement, contents, count=1)
    if count == 0:
        raise ExtractionError(f"No {type_name}[] literal found in {path}")

    with open(path, "w", encoding="utf-8") as f:
        f.write(contents)
    print(f"  Updated {type_name}[] in {path.name}")
