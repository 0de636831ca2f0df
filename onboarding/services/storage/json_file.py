"""
JSON File Preference Store

Persists preferences as one flat JSON object on disk. This is the
desktop counterpart of the device's user-defaults store and is what
the Streamlit host uses.

DESIGN DECISION: Every write rewrites the whole document through a
temporary file and os.replace(), so a crash mid-write leaves the
previous document intact.
"""

import json
import os
from pathlib import Path
from typing import Optional, Union

import structlog

from onboarding.services.storage.interface import (
    NotFoundError,
    PreferenceStore,
    StorageConnectionError,
    StorageError,
)


logger = structlog.get_logger(__name__)


class JsonFilePreferenceStore(PreferenceStore):
    """
    Preference store backed by a JSON file.

    A missing file reads as an empty store; it is created on first write.
    """

    def __init__(self, path: Union[str, Path]):
        self._path = Path(path)

    @property
    def path(self) -> Path:
        return self._path

    def _read(self) -> dict[str, str]:
        if not self._path.exists():
            return {}

        try:
            with self._path.open("r", encoding="utf-8") as f:
                data = json.load(f)
        except json.JSONDecodeError as e:
            raise StorageError(f"Preference file is not valid JSON: {self._path}") from e
        except OSError as e:
            raise StorageConnectionError(f"Cannot read {self._path}: {e}") from e

        if not isinstance(data, dict):
            raise StorageError(f"Preference file must hold a JSON object: {self._path}")

        return {str(k): str(v) for k, v in data.items() if v is not None}

    def _write(self, data: dict[str, str]) -> None:
        tmp_path = self._path.with_name(self._path.name + ".tmp")
        try:
            self._path.parent.mkdir(parents=True, exist_ok=True)
            with tmp_path.open("w", encoding="utf-8") as f:
                json.dump(data, f, ensure_ascii=False, indent=2, sort_keys=True)
            os.replace(tmp_path, self._path)
        except OSError as e:
            tmp_path.unlink(missing_ok=True)
            raise StorageConnectionError(f"Cannot write {self._path}: {e}") from e

        logger.debug("preferences_written", path=str(self._path), keys=len(data))

    def get(self, key: str) -> Optional[str]:
        return self._read().get(key)

    def set(self, key: str, value: str) -> None:
        data = self._read()
        data[key] = value
        self._write(data)

    def delete(self, key: str) -> None:
        data = self._read()
        if key not in data:
            raise NotFoundError(f"Preference not set: {key}")
        del data[key]
        self._write(data)
