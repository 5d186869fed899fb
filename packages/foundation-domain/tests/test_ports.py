"""Tests for port protocol conformance."""

from __future__ import annotations

import logging
from typing import Any

import pytest

from kitsci.foundation.domain.ports import GamePort, WarningSink


class _FakeGame:
    """Fake game that conforms to GamePort protocol."""

    technologies = ("calendar",)
    policies = ("liberty",)
    bonfire_buildings = ("hut",)
    space_buildings = ("moonBase",)
    missions = ("orbitalLaunch",)
    races = ("lizards",)
    resources = ("wood",)


class _CollectingSink:
    """Fake sink that conforms to WarningSink protocol."""

    def __init__(self) -> None:
        self.messages: list[str] = []

    def warning(self, msg: str, *args: Any, **kwargs: Any) -> None:
        self.messages.append(msg)


class _NotAGame:
    technologies = ("calendar",)


@pytest.mark.unit
class TestGamePort:
    def test_fake_conforms(self) -> None:
        assert isinstance(_FakeGame(), GamePort)

    def test_partial_registry_does_not_conform(self) -> None:
        assert not isinstance(_NotAGame(), GamePort)


@pytest.mark.unit
class TestWarningSink:
    def test_fake_conforms(self) -> None:
        sink = _CollectingSink()
        assert isinstance(sink, WarningSink)
        sink.warning("drift")
        assert sink.messages == ["drift"]

    def test_stdlib_logger_conforms(self) -> None:
        assert isinstance(logging.getLogger("kitsci.test"), WarningSink)

    def test_plain_object_does_not_conform(self) -> None:
        assert not isinstance(object(), WarningSink)
