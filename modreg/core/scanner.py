"""Declarative field scanner.

Walks the public class-level fields of a holder class, filters them by
declared type, resolves their metadata tag and hands each one through a
feature gate, a factory and a processor:

    holder field -> tag -> processor.entry_name -> processor.is_enabled
                 -> factory.construct -> bind into field -> processor.process

Holders are described by ``Annotated`` class annotations. ``iter_fields`` is
the only place that introspects them, so other holder descriptions can be
supported by producing the same ``FieldSlot`` objects.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from types import UnionType
from typing import (
    Annotated,
    Any,
    Callable,
    ClassVar,
    Iterator,
    List,
    Optional,
    Protocol,
    Tuple,
    Type,
    TypeVar,
    Union,
    get_args,
    get_origin,
    get_type_hints,
)

from ..api.exceptions import FieldBindingError
from .annotations import MISSING, IgnoreFeature

logger = logging.getLogger(__name__)

A = TypeVar("A")

FieldType = Union[type, Tuple[type, ...]]


@dataclass(frozen=True)
class FieldSlot:
    """A typed, named, writable slot on a holder class."""

    holder: type
    name: str
    declared_type: Any
    tags: Tuple[Any, ...] = field(default_factory=tuple)

    def tag(self, tag_type: Type[A]) -> Optional[A]:
        """Return the first tag of ``tag_type``, or None."""
        for tag in self.tags:
            if isinstance(tag, tag_type):
                return tag
        return None

    def has_tag(self, tag_type: type) -> bool:
        return self.tag(tag_type) is not None

    @property
    def value_type(self) -> Any:
        """The declared type with ``Optional[...]`` / ``X | None`` removed."""
        return unwrap_optional(self.declared_type)

    def accepts(self, field_type: FieldType) -> bool:
        """Check the value type (or its generic origin) against ``field_type``."""
        origin = get_origin(self.value_type) or self.value_type
        return isinstance(origin, type) and issubclass(origin, field_type)

    def read(self) -> Any:
        return getattr(self.holder, self.name, MISSING)

    def bind(self, value: Any) -> None:
        setattr(self.holder, self.name, value)

    def __str__(self) -> str:
        return f"{self.holder.__qualname__}.{self.name}"


def unwrap_optional(declared: Any) -> Any:
    if get_origin(declared) in (Union, UnionType):
        args = [arg for arg in get_args(declared) if arg is not type(None)]
        if len(args) == 1:
            return args[0]
    return declared


def iter_fields(holder: type) -> Iterator[FieldSlot]:
    """Yield the public annotated fields of ``holder`` in declaration order.

    Base class fields come first. ``ClassVar`` wrappers are unwrapped since
    every scanned field is class-level anyway.
    """
    hints = get_type_hints(holder, include_extras=True)
    for name, hint in hints.items():
        if name.startswith("_"):
            continue
        if get_origin(hint) is ClassVar:
            args = get_args(hint)
            if not args:
                continue
            hint = args[0]
        if get_origin(hint) is Annotated:
            declared, *tags = get_args(hint)
            yield FieldSlot(holder, name, declared, tuple(tags))
        else:
            yield FieldSlot(holder, name, hint)


class EntryFactory(Protocol):
    def construct(self, name: str, declared_type: Any) -> Any:
        """Build an entry for ``name`` or return None to skip it."""
        ...


class AnnotationProcessor(Protocol[A]):
    def entry_name(self, tag: A, slot: FieldSlot) -> str: ...

    def is_enabled(self, name: str) -> bool: ...

    def process(self, entry: Any, tag: A, slot: FieldSlot) -> None: ...


def _type_name(field_type: FieldType) -> str:
    if isinstance(field_type, tuple):
        return "(" + ", ".join(t.__name__ for t in field_type) + ")"
    return field_type.__name__


def current_value(tag: Any, slot: FieldSlot) -> Any:
    value = slot.read()
    return None if value is MISSING else value


def process_annotations(
    holder: type,
    field_type: FieldType,
    tag_type: Type[A],
    factory: Optional[EntryFactory],
    processor: AnnotationProcessor[A],
    *,
    seed: Callable[[A, FieldSlot], Any] = current_value,
    warn_untagged: bool = True,
) -> List[str]:
    """Scan ``holder`` and register every tagged field of ``field_type``.

    Args:
        holder: Class whose annotated fields are scanned.
        field_type: Type (or tuple of types) a field must be declared as.
        tag_type: Tag class a candidate field must carry.
        factory: Builds entries. ``None`` takes the entry from ``seed``.
        processor: Names, gates and finishes registration of each entry.
        seed: Computes the entry from the tag and slot when there is no factory.
            Defaults to the field's current value.
        warn_untagged: Log a warning for candidates without a tag.

    Returns:
        Names of the fields that were bound and processed.

    Raises:
        FieldBindingError: If an entry cannot be written back into its field.
    """
    processed = []
    for slot in iter_fields(holder):
        if not slot.accepts(field_type):
            continue

        if slot.has_tag(IgnoreFeature):
            continue

        tag = slot.tag(tag_type)
        if tag is None:
            if warn_untagged:
                logger.warning(
                    f"Field {slot} has valid type {_type_name(field_type)} "
                    f"for registration, but no annotation {tag_type.__name__}"
                )
            continue

        name = processor.entry_name(tag, slot)
        if not processor.is_enabled(name):
            logger.info(f"Entry {name} (from field {slot}) is disabled")
            continue

        if factory is None:
            entry = seed(tag, slot)
        else:
            entry = factory.construct(name, slot.value_type)
        if entry is None:
            continue

        try:
            slot.bind(entry)
        except Exception as exc:
            raise FieldBindingError(holder, slot.name) from exc

        logger.debug(f"Bound {name} into field {slot}")
        processor.process(entry, tag, slot)
        processed.append(slot.name)

    return processed
