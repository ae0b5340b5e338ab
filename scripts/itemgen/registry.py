"""Identifier registry — stable integer ids for derived item keys.

The registry is an ordered list of key strings persisted in dist/ids.json.
An item's id is its key's position in that list, so ids only stay stable
while the key formula stays the same and the list is never reordered.
"""


class IdRegistry:
    """Ordered key list with a reverse index for O(1) lookups."""

    def __init__(self, keys=None):
        self._keys = list(keys or [])
        self._index = {}
        for i, key in enumerate(self._keys):
            # A hand-edited list may repeat a key; the first position wins
            self._index.setdefault(key, i)

    def assign(self, key):
        """Return the id for key, appending it if it has not been seen."""
        idx = self._index.get(key)
        if idx is None:
            idx = len(self._keys)
            self._keys.append(key)
            self._index[key] = idx
        return idx

    def to_list(self):
        return list(self._keys)

    def __contains__(self, key):
        return key in self._index

    def __len__(self):
        return len(self._keys)
