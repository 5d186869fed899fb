"""Port interface for drift warning output."""

from __future__ import annotations

from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class WarningSink(Protocol):
    """Anything accepting human-readable warning strings.

    Satisfied by ``logging.Logger`` and by structlog bound loggers alike.
    Used for reporting only, never for control flow.
    """

    def warning(self, msg: str, *args: Any, **kwargs: Any) -> Any:
        """Emit one warning message."""
        ...
