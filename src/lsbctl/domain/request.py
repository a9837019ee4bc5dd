"""The immutable unit of work handed to the dispatcher."""

from __future__ import annotations

from enum import StrEnum

from pydantic import BaseModel, Field, StrictStr


class Command(StrEnum):
    """Action keywords understood by an LSB init script."""

    START = "start"
    STOP = "stop"
    RESTART = "restart"
    TRY_RESTART = "try-restart"
    RELOAD = "reload"
    FORCE_RELOAD = "force-reload"
    STATUS = "status"
    CACHED_STATUS = "cached-status"

    @classmethod
    def parse(cls, value: str | None) -> Command | None:
        """Return the matching keyword, or None for anything unrecognised."""
        if value is None:
            return None
        try:
            return cls(value)
        except ValueError:
            return None


class Request(BaseModel):
    """Target service, requested command, and any residual tokens.

    Attributes:
        name: Service identifier, e.g. ``"web"`` or ``"aaa/bbb"``.
        command: Raw command keyword. Optional here, required by dispatch.
        args: Extra tokens after the command. No command accepts any yet.
    """

    model_config = {"frozen": True, "extra": "forbid"}

    name: StrictStr = Field(min_length=1)
    command: StrictStr | None = None
    args: tuple[StrictStr, ...] = ()
