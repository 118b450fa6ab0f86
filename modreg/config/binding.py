"""Runtime link between a configuration field and its persisted value."""

from __future__ import annotations

import logging
from enum import Enum
from typing import Any, Tuple, get_origin

from pydantic import TypeAdapter, ValidationError

from ..api.exceptions import ConfigurationError, FieldBindingError
from ..core.annotations import MISSING
from ..core.scanner import FieldSlot
from .store import ConfigStore

logger = logging.getLogger(__name__)

# List-like field types; they take any number of values
MULTI_VALUE_TYPES = (list, tuple)


class SetResult(Enum):
    OK = "ok"
    INVALID_VALUE = "invalid_value"
    INVALID_COUNT = "invalid_count"


class PropertyBinding:
    """
    One configuration field bound to (namespace, category, name) in a store.

    The field attachment and identity are fixed at creation; the value can be
    re-synced from the store at any time.
    """

    def __init__(
        self,
        namespace: str,
        store: ConfigStore,
        slot: FieldSlot,
        category: str,
        name: str,
        default: Any,
        comment: str = "",
    ):
        self.namespace = namespace
        self.category = category
        self.name = name
        self.comment = comment
        self.default = default
        self._store = store
        self._slot = slot
        self._adapter = TypeAdapter(slot.declared_type)

    @property
    def key(self) -> Tuple[str, str, str]:
        return (self.namespace.lower(), self.category.lower(), self.name.lower())

    @property
    def field_name(self) -> str:
        return self._slot.name

    @property
    def declared_type(self) -> Any:
        return self._slot.declared_type

    @property
    def value(self) -> Any:
        return self._slot.read()

    @property
    def accepts_multiple_values(self) -> bool:
        value_type = self._slot.value_type
        origin = get_origin(value_type) or value_type
        return isinstance(origin, type) and issubclass(origin, MULTI_VALUE_TYPES)

    @property
    def type_name(self) -> str:
        declared = self.declared_type
        return declared.__name__ if isinstance(declared, type) else str(declared)

    def _to_store(self, value: Any) -> Any:
        return self._adapter.dump_python(value, mode="json")

    def _bind(self, value: Any) -> None:
        try:
            self._slot.bind(value)
        except Exception as e:
            raise FieldBindingError(self._slot.holder, self._slot.name) from e

    def _convert(self, raw: Any) -> Any:
        try:
            return self._adapter.validate_python(raw)
        except ValidationError as e:
            raise ConfigurationError(
                f"Invalid value {raw!r} for {self.namespace}:{self.category}.{self.name} "
                f"(expected {self.type_name})"
            ) from e

    def check_stored_value(self) -> None:
        """
        Validate the stored value, if any, without touching store or field.

        Raises:
            ConfigurationError: If the stored value cannot be converted
        """
        raw = self._store.get(self.category, self.name, MISSING)
        if raw is not MISSING:
            self._convert(raw)

    def update_value_from_store(self) -> Any:
        """
        Load the value from the store and write it into the field.

        The store receives the default when it has no value yet.

        Raises:
            ConfigurationError: If the stored value cannot be converted
        """
        raw = self._store.load(self.category, self.name, self._to_store(self.default), self.comment)
        value = self._convert(raw)
        self._bind(value)
        return value

    def try_change_value(self, *values: Any) -> SetResult:
        """
        Validate and apply new raw value(s) to both store and field.

        Args:
            *values: One value for scalar properties, any number for list-like ones

        Returns:
            SetResult describing whether the change was applied
        """
        if self.accepts_multiple_values:
            candidate: Any = list(values)
        elif len(values) != 1:
            return SetResult.INVALID_COUNT
        else:
            candidate = values[0]

        try:
            value = self._adapter.validate_python(candidate)
        except ValidationError as e:
            logger.info(
                f"Rejected value {candidate!r} for {self.category}.{self.name}: "
                f"{e.error_count()} validation error(s)"
            )
            return SetResult.INVALID_VALUE

        self._store.set(self.category, self.name, self._to_store(value))
        self._bind(value)
        return SetResult.OK

    def __repr__(self) -> str:
        return (
            f"PropertyBinding(namespace={self.namespace!r}, category={self.category!r}, "
            f"name={self.name!r}, value={self.value!r})"
        )
