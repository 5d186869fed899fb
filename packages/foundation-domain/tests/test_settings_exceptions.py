"""Tests for the settings exception hierarchy."""

from __future__ import annotations

import pytest

from kitsci.foundation.domain.exceptions import (
    DomainKeyMismatchError,
    DuplicateLegacyKeyError,
    InvalidSettingValueError,
    SchemaError,
    SettingsError,
)


@pytest.mark.unit
class TestSettingsError:
    def test_message_and_code(self) -> None:
        err = SettingsError("Something failed")
        assert err.message == "Something failed"
        assert err.error_code == "SETTINGS_ERROR"
        assert err.context == {}

    def test_str_with_context(self) -> None:
        err = SettingsError("Failed", context={"section": "trade"})
        assert str(err) == "Failed (section=trade)"

    def test_repr(self) -> None:
        err = SettingsError("Failed", context={"a": "1"})
        assert "SettingsError" in repr(err)
        assert "Failed" in repr(err)


@pytest.mark.unit
class TestDuplicateLegacyKeyError:
    def test_error_code(self) -> None:
        assert DuplicateLegacyKeyError("toggle-x").error_code == "DUPLICATE_LEGACY_KEY"

    def test_message_format(self) -> None:
        err = DuplicateLegacyKeyError("toggle-hydroponics")
        assert str(err).startswith("Legacy key registered twice: toggle-hydroponics")

    def test_extra_context(self) -> None:
        err = DuplicateLegacyKeyError("toggle-x", first="A.enabled")
        assert err.key == "toggle-x"
        assert err.context["first"] == "A.enabled"

    def test_is_schema_error(self) -> None:
        assert issubclass(DuplicateLegacyKeyError, SchemaError)
        assert issubclass(SchemaError, SettingsError)


@pytest.mark.unit
class TestDomainKeyMismatchError:
    def test_attributes(self) -> None:
        err = DomainKeyMismatchError(section="trade", key="lizards", tagged="sharks")
        assert err.error_code == "DOMAIN_KEY_MISMATCH"
        assert err.section == "trade"
        assert "'sharks'" in err.message

    def test_is_schema_error(self) -> None:
        assert issubclass(DomainKeyMismatchError, SchemaError)


@pytest.mark.unit
class TestInvalidSettingValueError:
    def test_message_format(self) -> None:
        err = InvalidSettingValueError("trigger", "'abc' is not a number")
        assert err.message == "Invalid value for 'trigger': 'abc' is not a number"
        assert err.error_code == "INVALID_SETTING_VALUE"

    def test_not_a_schema_error(self) -> None:
        assert not issubclass(InvalidSettingValueError, SchemaError)
