"""Port interface for the live game's entity registries.

The settings model never holds a reference into the game. It only reads the
identifiers the game currently knows, in order to detect drift between the
compiled-in schema and the running game.

Example:
    >>> from kitsci.foundation.domain.ports import GamePort
    >>> def known_techs(game: GamePort) -> set[str]:
    ...     return set(game.technologies)
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from collections.abc import Sequence


@runtime_checkable
class GamePort(Protocol):
    """Read-only view of the game's entity registries.

    Each attribute is an ordered sequence of entity identifiers, as the game
    reports them (e.g., ``game.science.techs.map(tech => tech.name)``).

    Attributes:
        technologies: Technology names.
        policies: Policy names.
        bonfire_buildings: Bonfire building names.
        space_buildings: Space building names across all planets.
        missions: Space program names.
        races: Trade partner names.
        resources: Resource names.
    """

    technologies: Sequence[str]
    policies: Sequence[str]
    bonfire_buildings: Sequence[str]
    space_buildings: Sequence[str]
    missions: Sequence[str]
    races: Sequence[str]
    resources: Sequence[str]
