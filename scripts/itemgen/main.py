"""Generator orchestration — build_catalog, write_all and main entry point."""

from collections import Counter
from functools import partial
from pathlib import Path

from itemgen.constants import (
    DIST_DIR, ITEMS_SOURCE, ITEMS_PATH, LANGUAGE_PATH, IMAGES_PATH, DEFAULT_LANGUAGE,
    PARSED_ITEMS_JSON, WEAPON_ATTRIBUTES_JSON, ITEMS_JSON, ITEM_DEFS_JSON, IDS_JSON,
    ITEM_TYPE_NAME, ITEM_DEF_TYPE_NAME,
)
from itemgen.extraction import ExtractionContext, EXTRACTORS
from itemgen.io_helpers import (
    load_items_game, load_language, load_ids, cdn_url,
    write_json, replace_in_file,
)
from itemgen.registry import IdRegistry


def build_catalog(tree, tokens, ids, image_url):
    """Run every extractor over a parsed items_game tree.

    Returns the ExtractionContext holding items, item definitions, weapon
    attributes and the grown id registry. Raises ExtractionError on data the
    generator cannot handle; nothing is written in that case.
    """
    ctx = ExtractionContext(tree["items_game"], tokens, IdRegistry(ids), image_url)
    for label, extract in EXTRACTORS:
        before = len(ctx.registry)
        extract(ctx)
        print(f"  {label}: {len(ctx.registry) - before} new ids")
    return ctx


def write_all(ctx, tree, dist_dir=DIST_DIR, items_source=ITEMS_SOURCE, splice=True):
    """Write every dist/ artifact and splice the item arrays into items_source."""
    items = ctx.all_items()

    write_json(PARSED_ITEMS_JSON, tree, dist_dir)
    write_json(WEAPON_ATTRIBUTES_JSON, ctx.weapon_attributes, dist_dir)
    write_json(ITEMS_JSON, items, dist_dir)
    write_json(ITEM_DEFS_JSON, ctx.item_defs, dist_dir)
    write_json(IDS_JSON, ctx.registry.to_list(), dist_dir)

    if splice:
        replace_in_file(items_source, ITEM_TYPE_NAME, items)
        replace_in_file(items_source, ITEM_DEF_TYPE_NAME, ctx.item_defs)


def print_summary(ctx):
    print(f"  Base items: {len(ctx.items)}")
    print(f"  Paints:     {len(ctx.paints)}")
    print(f"  Music kits: {len(ctx.music_kits)}")
    print(f"  Stickers:   {len(ctx.stickers)}")
    if ctx.warnings:
        print(f"  {len(ctx.warnings)} warnings:")
        for reason, count in sorted(Counter(ctx.warnings).items(), key=lambda x: -x[1]):
            print(f"    {reason}: {count}")


def main(argv=None):
    import argparse
    parser = argparse.ArgumentParser(description="CS item catalog generator")
    parser.add_argument("--language", default=DEFAULT_LANGUAGE,
                        help="Language file used for item names (default: english)")
    parser.add_argument("--dist-dir", type=Path, default=DIST_DIR,
                        help="Directory for the generated JSON files")
    parser.add_argument("--items-source", type=Path, default=ITEMS_SOURCE,
                        help="Source file whose item arrays are replaced")
    parser.add_argument("--no-splice", action="store_true",
                        help="Only write JSON, leave the items source untouched")
    args = parser.parse_args(argv)

    print("CS Item Catalog Generator")
    print("=" * 50)

    print("\n[1/4] Loading game files...")
    tree = load_items_game(ITEMS_PATH)
    tokens = load_language(args.language, LANGUAGE_PATH)

    print("\n[2/4] Loading id registry...")
    ids = load_ids(args.dist_dir / IDS_JSON)

    print("\n[3/4] Extracting items...")
    ctx = build_catalog(tree, tokens, ids, partial(cdn_url, images_dir=IMAGES_PATH))
    print_summary(ctx)

    print("\n[4/4] Writing output...")
    write_all(ctx, tree, args.dist_dir, args.items_source, splice=not args.no_splice)

    print(f"\nDone! {len(ctx.all_items())} items, {len(ctx.registry)} ids → {args.dist_dir}")
