"""Shared fixtures for integration tests."""

from __future__ import annotations

from typing import Any

import pytest

from kitsci.foundation.application.game_snapshot import GameSnapshot
from kitsci.foundation.domain.game_types import (
    BonfireBuilding,
    Mission,
    Policy,
    Race,
    Resource,
    SpaceBuilding,
    Technology,
)


@pytest.fixture()
def current_game() -> GameSnapshot:
    """A game whose registries match the settings schema exactly."""
    return GameSnapshot(
        technologies=tuple(Technology),
        policies=tuple(Policy),
        bonfire_buildings=tuple(BonfireBuilding),
        space_buildings=tuple(SpaceBuilding),
        missions=tuple(Mission),
        races=tuple(Race),
        resources=tuple(Resource),
    )


@pytest.fixture()
def legacy_blob() -> dict[str, Any]:
    """A storage blob as written by an older release."""
    return {
        "version": 1,
        "toggles": {"engine": True, "build": True, "space": False, "trade": True, "upgrade": True},
        "triggers": {"build": 0.2, "space": 0.9, "trade": 0.98},
        "items": {
            "toggle-hut": False,
            "set-library-max": 30,
            "set-moonBase-max": float("inf"),
            "toggle-limited-dragons": False,
            "toggle-lizards-winter": True,
            "toggle-crypto": False,
            "toggle-policies": True,
            "toggle-liberty": True,
            "toggle-tech-genetics": False,
            "toggle-embassy-nagas": True,
            "set-embassy-nagas-max": -20,
            "toggle-religion": True,
        },
        "resources": {
            "furs": {"enabled": True, "stock": 1000, "consume": 0.5},
            "catnip": {"stock": 5000},
        },
    }
