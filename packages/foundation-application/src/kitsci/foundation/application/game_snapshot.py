"""Immutable capture of the live game's entity registries."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True, slots=True)
class GameSnapshot:
    """Plain GamePort implementation holding entity names by value.

    Attributes:
        technologies: Technology names.
        policies: Policy names.
        bonfire_buildings: Bonfire building names.
        space_buildings: Space building names across all planets.
        missions: Space program names.
        races: Trade partner names.
        resources: Resource names.

    Example:
        >>> snapshot = GameSnapshot(technologies=("calendar", "agriculture"))
        >>> snapshot.technologies
        ('calendar', 'agriculture')
    """

    technologies: tuple[str, ...] = ()
    policies: tuple[str, ...] = ()
    bonfire_buildings: tuple[str, ...] = ()
    space_buildings: tuple[str, ...] = ()
    missions: tuple[str, ...] = ()
    races: tuple[str, ...] = ()
    resources: tuple[str, ...] = ()

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> GameSnapshot:
        """Build a snapshot from a mapping of registry name to names.

        Unknown registries are ignored; missing registries are empty.

        Args:
            data: e.g. ``{"technologies": ["calendar"], "races": ["lizards"]}``.
        """
        values: dict[str, tuple[str, ...]] = {}
        for name in cls.__dataclass_fields__:
            names = data.get(name)
            if isinstance(names, Sequence) and not isinstance(names, str):
                values[name] = tuple(str(entry) for entry in names)
        return cls(**values)
