"""Derive a Request from the running process.

An init script is a symlink ``<init_dir>/<service>`` pointing at
``lsbctl-init``.  The service name comes from the invocation path, the
command from the first argument, and everything after it is kept as
``args`` so dispatch can reject it.

The derived request is a process-wide singleton: built on first use and
returned unchanged afterwards, even if ``sys.argv`` is later mutated.
"""

from __future__ import annotations

import logging
import sys
from collections.abc import Sequence
from pathlib import Path

from lsbctl.domain.request import Request
from lsbctl.errors import ResolutionError

DEFAULT_INIT_DIR = Path("/etc/init.d")

logger = logging.getLogger(__name__)

_current: Request | None = None


def derive_request(
    prog_path: str,
    argv: Sequence[str],
    *,
    init_dir: Path | str = DEFAULT_INIT_DIR,
) -> Request:
    """Build a Request from an invocation path and its argument list.

    Raises:
        ResolutionError: *prog_path* is not ``<init_dir>/<name>``.
    """
    prefix = str(init_dir).rstrip("/") + "/"
    name = prog_path[len(prefix) :] if prog_path.startswith(prefix) else ""
    if not name:
        raise ResolutionError(f"Strange invocation path '{prog_path}'")

    command = argv[0] if argv and argv[0] else None
    return Request(name=name, command=command, args=tuple(argv[1:]))


def current_request(*, init_dir: Path | str = DEFAULT_INIT_DIR) -> Request:
    """Return the process-wide Request, deriving it from ``sys.argv`` once."""
    global _current
    if _current is None:
        _current = derive_request(sys.argv[0], sys.argv[1:], init_dir=init_dir)
        logger.debug(
            "Derived request name=%s command=%s", _current.name, _current.command
        )
    return _current


def resolve_request(
    source: Request | None = None,
    *,
    init_dir: Path | str = DEFAULT_INIT_DIR,
) -> Request:
    """Pass an explicit Request through, or fall back to the process singleton.

    Raises:
        ResolutionError: *source* is neither a Request nor None.
    """
    if isinstance(source, Request):
        return source
    if source is None:
        return current_request(init_dir=init_dir)
    raise ResolutionError(f"Unknown argument '{source}'")
