"""Flat legacy key namespace for settings trees.

Earlier releases persisted settings as one flat mapping of string keys to
booleans and numbers. Every field of the current tree maps onto exactly one
key of that namespace. The mapping is spelled out per section as an explicit
table of :class:`LegacyField` entries, collected into a :class:`LegacySchema`
whenever a tree is converted. The key set grows with the workshop resources
a tree has loaded, so the table is never cached.

Key conventions:

- ``toggle-<alias>``: section enable flag
- ``trigger-<alias>``: section trigger
- ``toggle-<key>``: domain item enable flag
- ``set-<key>-max``: domain item maximum
- ``toggle-limited-<key>``: domain item "limited" flag
- ``toggle-<key>-<season>``: nested seasonal flag
- ``toggle-<key>-trigger``: nested trigger

Reading is null-coalescing: a key missing from the flat mapping leaves the
field at its current value. Values that cannot be coerced to the field's kind
are ignored with a warning. Writing is total: every field is written.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from enum import StrEnum
from typing import TYPE_CHECKING, Any, Self

from pydantic import TypeAdapter
from pydantic import ValidationError as PydanticValidationError

from kitsci.foundation.domain.exceptions import DuplicateLegacyKeyError
from kitsci.foundation.domain.limits import normalize_limit

if TYPE_CHECKING:
    from collections.abc import Iterable, Iterator, Mapping, MutableMapping

logger = logging.getLogger(__name__)

LegacyValue = bool | int | float
"""A value stored in the flat legacy namespace."""

_BOOL: TypeAdapter[bool] = TypeAdapter(bool)
_INT: TypeAdapter[int] = TypeAdapter(int)
_FLOAT: TypeAdapter[float] = TypeAdapter(float)


class LegacyFieldKind(StrEnum):
    """How a legacy value is coerced when it is read back."""

    TOGGLE = "toggle"
    LIMIT = "limit"
    NUMBER = "number"
    INTEGER = "integer"


def coerce_legacy_value(raw: object, kind: LegacyFieldKind) -> LegacyValue | None:
    """Coerce a raw legacy value to the Python type of its field.

    Pydantic lax mode does the conversion, so ``1``, ``"true"`` and ``"on"``
    are accepted for toggles and numeric strings for numbers.

    Args:
        raw: Value read from the flat mapping.
        kind: Kind of the receiving field.

    Returns:
        The coerced value, or ``None`` if ``raw`` is unusable.
    """
    try:
        if kind is LegacyFieldKind.TOGGLE:
            return _BOOL.validate_python(raw)
        if kind is LegacyFieldKind.INTEGER:
            return _INT.validate_python(raw)
        number = _FLOAT.validate_python(raw)
    except PydanticValidationError:
        return None

    if math.isnan(number):
        return None
    if kind is LegacyFieldKind.LIMIT:
        return normalize_limit(number)
    return number


@dataclass(frozen=True, slots=True)
class LegacyField:
    """One row of a legacy key table: a flat key bound to a model attribute.

    Attributes:
        key: Flat legacy key (e.g., ``"set-moonBase-max"``).
        target: Model instance owning the attribute.
        attribute: Attribute name on ``target``.
        kind: Coercion applied when reading the value back.
    """

    key: str
    target: Any
    attribute: str
    kind: LegacyFieldKind = LegacyFieldKind.TOGGLE

    def read(self) -> LegacyValue:
        """Return the attribute value as it is written to the flat mapping."""
        value: LegacyValue = getattr(self.target, self.attribute)
        if self.kind is LegacyFieldKind.LIMIT:
            return normalize_limit(value)
        return value

    def write(self, raw: object) -> bool:
        """Assign a raw legacy value to the attribute.

        Args:
            raw: Value read from the flat mapping.

        Returns:
            True if the value was assigned, False if it was ignored.
        """
        value = coerce_legacy_value(raw, self.kind)
        if value is None:
            logger.warning(
                "legacy_value_ignored",
                extra={"key": self.key, "kind": self.kind.value, "value": repr(raw)},
            )
            return False
        setattr(self.target, self.attribute, value)
        return True


def toggle_field(key: str, target: Any, attribute: str = "enabled") -> LegacyField:
    """Bind a boolean attribute (``enabled`` by default)."""
    return LegacyField(key, target, attribute, LegacyFieldKind.TOGGLE)


def limit_field(key: str, target: Any) -> LegacyField:
    """Bind the ``max`` attribute of a ``SettingMax``."""
    return LegacyField(key, target, "max", LegacyFieldKind.LIMIT)


def trigger_field(key: str, target: Any) -> LegacyField:
    """Bind the ``trigger`` attribute of a ``SettingTrigger``."""
    return LegacyField(key, target, "trigger", LegacyFieldKind.NUMBER)


def number_field(key: str, target: Any, attribute: str, *, integer: bool = False) -> LegacyField:
    """Bind any other numeric attribute."""
    kind = LegacyFieldKind.INTEGER if integer else LegacyFieldKind.NUMBER
    return LegacyField(key, target, attribute, kind)


class LegacySchema:
    """Closed table of flat legacy keys for one settings tree.

    Built from the fields a tree declares at the time of the call.
    Registering two fields under the same key is a schema bug and raises
    immediately.

    Args:
        fields: Fields to register, in serialization order.

    Raises:
        DuplicateLegacyKeyError: If two fields share a key.
    """

    def __init__(self, fields: Iterable[LegacyField] = ()) -> None:
        self._fields: dict[str, LegacyField] = {}
        for field in fields:
            self.register(field)

    def register(self, field: LegacyField) -> None:
        """Add one field to the table.

        Raises:
            DuplicateLegacyKeyError: If ``field.key`` is already registered.
        """
        existing = self._fields.get(field.key)
        if existing is not None:
            raise DuplicateLegacyKeyError(
                field.key,
                first=f"{type(existing.target).__name__}.{existing.attribute}",
                second=f"{type(field.target).__name__}.{field.attribute}",
            )
        self._fields[field.key] = field

    def __contains__(self, key: object) -> bool:
        return key in self._fields

    def __iter__(self) -> Iterator[LegacyField]:
        return iter(self._fields.values())

    def __len__(self) -> int:
        return len(self._fields)

    def keys(self) -> list[str]:
        """Return every registered key in serialization order."""
        return list(self._fields)

    def dump(self) -> dict[str, LegacyValue]:
        """Write every field, including those at their default."""
        return {key: field.read() for key, field in self._fields.items()}

    def apply(self, subject: Mapping[str, object]) -> int:
        """Read every registered key from ``subject`` onto the tree.

        Keys missing from ``subject`` (or set to ``None``) keep the current
        value. Keys of ``subject`` unknown to this table are ignored.

        Args:
            subject: Flat legacy mapping.

        Returns:
            Number of fields that were assigned.
        """
        applied = 0
        for key, field in self._fields.items():
            raw = subject.get(key)
            if raw is None:
                continue
            if field.write(raw):
                applied += 1
        return applied

    def unknown_keys(self, subject: Mapping[str, object]) -> list[str]:
        """Return the keys of ``subject`` this table does not recognise."""
        return [key for key in subject if key not in self._fields]


class LegacySection:
    """Mixin giving a settings section its legacy import/export operations.

    Sections implement :meth:`legacy_fields`. Sections whose collections are
    populated from loaded data also override :meth:`prepare_legacy_options`
    to create entries for keys present in the flat mapping.
    """

    def legacy_fields(self) -> Iterator[LegacyField]:
        """Yield one field per flat key this section owns."""
        raise NotImplementedError

    def legacy_schema(self) -> LegacySchema:
        """Build the closed key table for this section."""
        return LegacySchema(self.legacy_fields())

    def prepare_legacy_options(self, subject: Mapping[str, object]) -> None:
        """Create entries required by ``subject`` before it is applied."""

    def to_legacy_options(self, subject: MutableMapping[str, LegacyValue]) -> None:
        """Write this section into a flat legacy mapping."""
        subject.update(self.legacy_schema().dump())

    def apply_legacy_options(self, subject: Mapping[str, object]) -> None:
        """Read this section from a flat legacy mapping, in place."""
        self.prepare_legacy_options(subject)
        self.legacy_schema().apply(subject)

    @classmethod
    def from_legacy_options(cls, subject: Mapping[str, object]) -> Self:
        """Build a section from defaults overlaid with a flat legacy mapping."""
        options = cls()
        options.apply_legacy_options(subject)
        return options
