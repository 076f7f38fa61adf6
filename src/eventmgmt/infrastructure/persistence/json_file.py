"""A JSON array document on disk, replaced atomically on every write.

Writers go through a temporary file in the same directory followed by
``os.replace`` so readers never observe a half-written document.
Concurrent writers still race; the last replace wins.
"""

from __future__ import annotations

import json
import os
import tempfile
from pathlib import Path


class JsonFile:

    def __init__(self, path: Path) -> None:
        self.path = path
        self._ensure_file()

    def load(self) -> list[dict]:
        return json.loads(self.path.read_text(encoding="utf-8"))

    def persist(self, rows: list[dict]) -> None:
        fd, tmp_name = tempfile.mkstemp(
            dir=self.path.parent, prefix=f".{self.path.name}.", suffix=".tmp"
        )
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as fh:
                fh.write(json.dumps(rows, indent=2) + "\n")
            os.replace(tmp_name, self.path)
        except BaseException:
            Path(tmp_name).unlink(missing_ok=True)
            raise

    def _ensure_file(self) -> None:
        if not self.path.exists():
            self.path.parent.mkdir(parents=True, exist_ok=True)
            self.path.write_text("[]", encoding="utf-8")
