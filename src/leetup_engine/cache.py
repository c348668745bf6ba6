"""Local metadata cache — a small JSON key/value store."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

from leetup_engine.paths import cache_path


class ProblemCache:
    """JSON-file backed cache with get/put/invalidate.

    Every call reads the file; writes go straight back to disk.
    """

    def __init__(self, path: Path | str | None = None):
        self.path = Path(path) if path else cache_path()

    def get(self, key: str) -> Any | None:
        return self._load().get(key)

    def put(self, key: str, value: Any) -> None:
        data = self._load()
        data[key] = value
        self._save(data)

    def invalidate(self, key: str) -> bool:
        """Remove ``key``. Returns False if it was not cached."""
        data = self._load()
        if key not in data:
            return False
        del data[key]
        self._save(data)
        return True

    def _load(self) -> dict[str, Any]:
        if not self.path.is_file():
            return {}
        with open(self.path) as f:
            return json.load(f)

    def _save(self, data: dict[str, Any]) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        with open(self.path, "w") as f:
            json.dump(data, f, indent=2)
            f.write("\n")


def problem_key(slug: str) -> str:
    return f"problem:{slug}"
