"""JSON-file key-value store for single-machine use.

Keeps every record in one JSON object on disk, the same shape a browser
``localStorage`` has. Blocking file I/O runs in a worker thread.
"""

from __future__ import annotations

import asyncio
import contextlib
import json
import os
import tempfile
from pathlib import Path

import structlog

from app.exceptions import StorageError

log = structlog.get_logger()


class LocalFileStore:
    """Async key-value store persisted to a single JSON file.

    Writes go to a temporary sibling file and are moved into place with
    ``os.replace`` so a crash never leaves a half-written store behind.
    """

    def __init__(self, path: str | Path) -> None:
        self._path = Path(path)
        self._lock = asyncio.Lock()

    @property
    def path(self) -> Path:
        return self._path

    async def get(self, key: str) -> str | None:
        data = await asyncio.to_thread(self._read)
        return data.get(key)

    async def set(self, key: str, value: str) -> None:
        async with self._lock:
            data = await asyncio.to_thread(self._read)
            data[key] = value
            await asyncio.to_thread(self._write, data)

    async def delete(self, *keys: str) -> int:
        async with self._lock:
            data = await asyncio.to_thread(self._read)
            removed = 0
            for key in keys:
                if data.pop(key, None) is not None:
                    removed += 1
            if removed:
                await asyncio.to_thread(self._write, data)
            return removed

    # ------------------------------------------------------------------
    # File I/O (worker thread)
    # ------------------------------------------------------------------

    def _read(self) -> dict[str, str]:
        try:
            raw = self._path.read_text(encoding="utf-8")
        except FileNotFoundError:
            return {}
        except OSError as exc:
            raise StorageError(f"Cannot read {self._path}: {exc}") from exc

        if not raw.strip():
            return {}
        try:
            data = json.loads(raw)
        except json.JSONDecodeError as exc:
            raise StorageError(f"Store file {self._path} is not valid JSON") from exc
        if not isinstance(data, dict):
            raise StorageError(f"Store file {self._path} must hold a JSON object")
        return data

    def _write(self, data: dict[str, str]) -> None:
        try:
            self._path.parent.mkdir(parents=True, exist_ok=True)
            # mkstemp creates the file with mode 0600 and a unique name.
            fd, tmp_name = tempfile.mkstemp(
                dir=self._path.parent, prefix=f".{self._path.name}.", suffix=".tmp"
            )
        except OSError as exc:
            raise StorageError(f"Cannot write {self._path}: {exc}") from exc

        try:
            with os.fdopen(fd, "w", encoding="utf-8") as fh:
                json.dump(data, fh, ensure_ascii=False, indent=2)
            os.replace(tmp_name, self._path)
        except OSError as exc:
            with contextlib.suppress(FileNotFoundError):
                os.unlink(tmp_name)
            raise StorageError(f"Cannot write {self._path}: {exc}") from exc
        log.debug("local_store_written", path=str(self._path), keys=len(data))
