import json
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Any

from paper_planner.logging.logger import Log
from paper_planner.project.exceptions import ProjectStoreError


class KeyValueStore(ABC):
    """Browser-storage-like persistence: JSON values under string keys."""

    @abstractmethod
    def get(self, key: str) -> Any | None:
        raise NotImplementedError

    @abstractmethod
    def set(self, key: str, value: Any) -> None:
        raise NotImplementedError

    @abstractmethod
    def delete(self, key: str) -> None:
        raise NotImplementedError


class InMemoryStore(KeyValueStore):
    def __init__(self) -> None:
        self._data: dict[str, str] = {}

    def get(self, key: str) -> Any | None:
        raw = self._data.get(key)
        return None if raw is None else json.loads(raw)

    def set(self, key: str, value: Any) -> None:
        # Serialized on write so callers cannot mutate stored state.
        self._data[key] = json.dumps(value)

    def delete(self, key: str) -> None:
        self._data.pop(key, None)


class JsonFileStore(KeyValueStore):
    """All keys in one JSON object on disk, rewritten on every change."""

    def __init__(self, path: str | Path) -> None:
        self._path = Path(path)

    def get(self, key: str) -> Any | None:
        return self._read().get(key)

    def set(self, key: str, value: Any) -> None:
        data = self._read()
        data[key] = value
        self._write(data)

    def delete(self, key: str) -> None:
        data = self._read()
        if key in data:
            del data[key]
            self._write(data)

    def _read(self) -> dict[str, Any]:
        if not self._path.exists():
            return {}
        try:
            data = json.loads(self._path.read_text(encoding="utf-8"))
        except (OSError, json.JSONDecodeError) as exc:
            raise ProjectStoreError(f"Cannot read project store {self._path}: {exc}") from exc
        if not isinstance(data, dict):
            raise ProjectStoreError(f"Project store {self._path} does not hold a JSON object")
        return data

    def _write(self, data: dict[str, Any]) -> None:
        try:
            self._path.parent.mkdir(parents=True, exist_ok=True)
            tmp_path = self._path.with_suffix(self._path.suffix + ".tmp")
            tmp_path.write_text(json.dumps(data, indent=2), encoding="utf-8")
            tmp_path.replace(self._path)
        except OSError as exc:
            raise ProjectStoreError(f"Cannot write project store {self._path}: {exc}") from exc
        Log.debug(f"Wrote {len(data)} keys to {self._path}")
