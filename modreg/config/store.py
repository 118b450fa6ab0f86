"""Persisted key/value stores that configuration properties are bound to.

Values are addressed by (category, name). A store tracks whether it holds
modifications since the last load/save so callers can skip needless writes.
"""

from __future__ import annotations

import copy
import logging
from pathlib import Path
from typing import Any, Dict, Optional, Protocol, Union

from ..core.config_manager import read_config_file, write_config_file

logger = logging.getLogger(__name__)


class ConfigStore(Protocol):
    def load(self, category: str, name: str, default: Any, comment: str = "") -> Any:
        """Return the stored value, inserting ``default`` when absent."""
        ...

    def get(self, category: str, name: str, default: Any = None) -> Any: ...

    def set(self, category: str, name: str, value: Any) -> None: ...

    def has_changed(self) -> bool: ...

    def save(self) -> None: ...


class MemoryStore:
    """Dictionary-backed store. ``save`` only clears the dirty flag."""

    def __init__(self, data: Optional[Dict[str, Dict[str, Any]]] = None):
        self._data: Dict[str, Dict[str, Any]] = copy.deepcopy(data) if data else {}
        self._comments: Dict[tuple[str, str], str] = {}
        self._changed = False

    def load(self, category: str, name: str, default: Any, comment: str = "") -> Any:
        if comment:
            self._comments[(category, name)] = comment
        values = self._data.setdefault(category, {})
        if name not in values:
            values[name] = copy.deepcopy(default)
            self._changed = True
        return copy.deepcopy(values[name])

    def get(self, category: str, name: str, default: Any = None) -> Any:
        values = self._data.get(category, {})
        if name not in values:
            return default
        return copy.deepcopy(values[name])

    def set(self, category: str, name: str, value: Any) -> None:
        values = self._data.setdefault(category, {})
        if name in values and values[name] == value:
            return
        values[name] = copy.deepcopy(value)
        self._changed = True

    def comment(self, category: str, name: str) -> str:
        return self._comments.get((category, name), "")

    def has_changed(self) -> bool:
        return self._changed

    def save(self) -> None:
        self._flush()
        self._changed = False

    def _flush(self) -> None:
        pass

    def as_dict(self) -> Dict[str, Dict[str, Any]]:
        return copy.deepcopy(self._data)


class FileStore(MemoryStore):
    """Store persisted as a TOML, YAML or JSON file chosen by suffix.

    The file is laid out as one table per category. A missing file is an
    empty store and is created on the first save.
    """

    def __init__(self, path: Union[str, Path]):
        self.path = Path(path)
        super().__init__()
        self.reload()

    def reload(self) -> None:
        """Re-read the file, dropping unsaved modifications."""
        if self.path.exists():
            self._data = {
                category: dict(values)
                for category, values in read_config_file(self.path).items()
                if isinstance(values, dict)
            }
        else:
            self._data = {}
        self._changed = False

    def _flush(self) -> None:
        logger.info(f"Saving configuration to {self.path}")
        write_config_file(self.path, self._data)
