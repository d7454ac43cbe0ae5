"""Key-value storage of JSON documents, one file per key under a data directory.

Every write replaces the whole document atomically (temp file + rename), and
a document that cannot be parsed is treated as absent. Other read errors
propagate, so an unreadable file is never overwritten with a default.
"""
import copy
import json
import logging
import os
import tempfile
from pathlib import Path
from typing import Any, Optional

logger = logging.getLogger(__name__)


class JsonStorage:
    def __init__(self, data_dir):
        self.data_dir = Path(data_dir)

    def path_for(self, key: str) -> Path:
        return self.data_dir / f"{key}.json"

    def get(self, key: str, default: Any = None, expected_type: Optional[type] = None) -> Any:
        """Return the stored document, or a copy of ``default`` when missing or malformed.

        OSErrors other than a missing file are raised.
        """
        path = self.path_for(key)
        try:
            with open(path, 'r', encoding='utf-8') as f:
                value = json.load(f)
        except FileNotFoundError:
            return copy.deepcopy(default)
        except (json.JSONDecodeError, UnicodeDecodeError) as e:
            logger.warning("Corrupt document %s (%s); resetting to default", path.name, e)
            return copy.deepcopy(default)
        if expected_type is not None and not isinstance(value, expected_type):
            logger.warning("Document %s has type %s, expected %s; resetting to default",
                           path.name, type(value).__name__, expected_type.__name__)
            return copy.deepcopy(default)
        return value

    def set(self, key: str, value: Any) -> None:
        self.data_dir.mkdir(parents=True, exist_ok=True)
        target = self.path_for(key)
        fd, tmp_path = tempfile.mkstemp(dir=str(self.data_dir), prefix=f".{key}_", suffix=".json")
        try:
            with os.fdopen(fd, 'w', encoding='utf-8') as tmp:
                json.dump(value, tmp, indent=2, ensure_ascii=False)
            os.replace(tmp_path, target)
        finally:
            if os.path.exists(tmp_path):
                os.remove(tmp_path)

    def remove(self, key: str) -> None:
        try:
            self.path_for(key).unlink()
        except FileNotFoundError:
            pass


__all__ = ['JsonStorage']
