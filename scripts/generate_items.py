"""Generate the item catalog from the game's items_game.txt and language files.

Run this after a game update:
    python scripts/generate_items.py
    python scripts/generate_items.py --language french --no-splice

Reads:  items_game.txt, csgo_<language>.txt, inventory images, dist/ids.json
Writes: dist/*.json, src/items.ts

Environment variables:
    ITEMS_PATH, LANGUAGE_PATH, IMAGES_PATH, LANGUAGE_ENCODING
"""

from itemgen.main import main


if __name__ == "__main__":
    main()
