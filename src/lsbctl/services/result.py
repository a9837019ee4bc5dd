"""CommandResult: what one dispatched command printed and how it ended.

The dispatcher never exits the process.  Entry points take the result,
write ``stdout``/``stderr`` verbatim, and exit with ``exit_code``.
"""

from __future__ import annotations

from enum import IntEnum

from pydantic import BaseModel


class ExitCode(IntEnum):
    """LSB init-script exit statuses used by the dispatcher."""

    OK = 0
    USAGE = 2
    PERMISSION_DENIED = 4


class CommandResult(BaseModel):
    """Outcome of a single dispatched command.

    Attributes:
        op: Command keyword exactly as requested.
        name: Target service name.
        stdout: Text for standard output, written without an added newline.
        stderr: Text for standard error, written without an added newline.
        exit_code: Process exit status.
    """

    model_config = {"frozen": True}

    op: str | None
    name: str
    stdout: str = ""
    stderr: str = ""
    exit_code: int = ExitCode.OK

    @property
    def ok(self) -> bool:
        return self.exit_code == ExitCode.OK
