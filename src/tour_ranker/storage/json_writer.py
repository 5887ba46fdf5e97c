"""JSON persistence helpers."""
from __future__ import annotations

import json
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Iterable


class JsonStore:
    def __init__(self, root: Path) -> None:
        self.root = root
        self.root.mkdir(parents=True, exist_ok=True)

    def write(
        self,
        data: Iterable[dict[str, object]],
        *,
        filename: str,
        subdir: str | None = None,
        metadata: dict[str, Any] | None = None,
    ) -> Path:
        target_dir = self.root / subdir if subdir else self.root
        target_dir.mkdir(parents=True, exist_ok=True)
        path = target_dir / filename
        serialisable: dict[str, Any] = {
            "generated_at": datetime.now(timezone.utc).isoformat().replace("+00:00", "Z"),
            **(metadata or {}),
            "items": list(data),
        }
        path.write_text(json.dumps(serialisable, indent=2, ensure_ascii=False), encoding="utf-8")
        return path

    def read_items(self, path: Path) -> list[Any]:
        """Return the ``items`` list of a file written by :meth:`write`, or a bare JSON list."""
        if not path.exists():
            raise FileNotFoundError(f"JSON file not found at {path}")
        payload = json.loads(path.read_text(encoding="utf-8"))
        if isinstance(payload, dict):
            items = payload.get("items", payload.get("offers", []))
            return list(items) if isinstance(items, list) else []
        if isinstance(payload, list):
            return payload
        return []
