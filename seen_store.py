"""Seen-set of race ids already written to the signup sheet.

Backed by a single JSON file, {"seen_ids": [...]}, read once at startup and
rewritten in full after every add. Ids are never removed.
"""
import os
import json
import logging
import tempfile

log = logging.getLogger("nmg_bot.seen_store")


def _valid_id(race_id):
    return isinstance(race_id, (int, str)) and not isinstance(race_id, bool)


class SeenStore:
    def __init__(self, path, seen_ids=None):
        self.path = path
        self._ids = list(seen_ids or [])
        self._lookup = set(self._ids)

    @classmethod
    def load(cls, path):
        """Load the store from disk. A missing or malformed file gives an empty store."""
        if not os.path.exists(path):
            return cls(path)

        try:
            with open(path) as f:
                state = json.load(f)
        except (OSError, ValueError) as e:
            log.warning(f"Failed to parse {path} ({e}), starting fresh.")
            return cls(path)

        seen_ids = state.get("seen_ids") if isinstance(state, dict) else None
        if not isinstance(seen_ids, list):
            log.warning(f"{path} has no seen_ids list, starting fresh.")
            return cls(path)
        if not all(_valid_id(i) for i in seen_ids):
            log.warning(f"{path} has malformed seen_ids entries, starting fresh.")
            return cls(path)
        return cls(path, seen_ids)

    def has(self, race_id):
        return race_id in self._lookup

    def __contains__(self, race_id):
        return self.has(race_id)

    def __len__(self):
        return len(self._ids)

    def add(self, race_id):
        """Record a race id and persist immediately."""
        if race_id in self._lookup:
            return
        self._ids.append(race_id)
        self._lookup.add(race_id)
        self.save()

    def save(self):
        """Rewrite the state file; the old file stays intact until the new one is complete."""
        directory = os.path.dirname(os.path.abspath(self.path))
        fd, tmp_path = tempfile.mkstemp(prefix=".state-", suffix=".json", dir=directory)
        try:
            with os.fdopen(fd, "w") as f:
                json.dump({"seen_ids": self._ids}, f, indent=2)
            os.replace(tmp_path, self.path)
        except BaseException:
            os.unlink(tmp_path)
            raise

    @property
    def seen_ids(self):
        return list(self._ids)
