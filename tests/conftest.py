"""Shared pytest fixtures and test helpers for lsbctl tests."""

from __future__ import annotations

import logging
from collections.abc import Generator
from pathlib import Path

import pytest
from click.testing import CliRunner

from lsbctl.domain import bootstrap


class FakeManager:
    """In-memory ServiceManager recording every call it receives."""

    def __init__(
        self,
        *,
        enabled: bool = True,
        status: str = "running",
        cached: str = "running",
        result: str = "done",
    ) -> None:
        self.enabled = enabled
        self.live = status
        self.cached = cached
        self.result = result
        self.calls: list[tuple[str, str]] = []

    def _record(self, op: str, name: str) -> None:
        self.calls.append((op, name))

    @property
    def ops(self) -> list[str]:
        return [op for op, _name in self.calls]

    def is_enabled(self, name: str) -> bool:
        self._record("is_enabled", name)
        return self.enabled

    def status(self, name: str) -> str:
        self._record("status", name)
        return self.live

    def cached_status(self, name: str) -> str:
        self._record("cached_status", name)
        return self.cached

    def start(self, name: str) -> str:
        self._record("start", name)
        return self.result

    def stop(self, name: str) -> str:
        self._record("stop", name)
        return self.result

    def restart(self, name: str) -> str:
        self._record("restart", name)
        return self.result

    def try_restart(self, name: str) -> str:
        self._record("try_restart", name)
        return self.result

    def reload(self, name: str) -> str:
        self._record("reload", name)
        return self.result

    def force_reload(self, name: str) -> str:
        self._record("force_reload", name)
        return self.result


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def manager() -> FakeManager:
    """An enabled, running service whose operations return ``"done"``."""
    return FakeManager()


@pytest.fixture(autouse=True)
def _fresh_current_request(monkeypatch: pytest.MonkeyPatch) -> None:
    """Start every test without a derived process-wide request."""
    monkeypatch.setattr(bootstrap, "_current", None)


@pytest.fixture(autouse=True)
def _isolated_env(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    """Keep host config and LSBCTL_* env vars out of tests."""
    monkeypatch.setenv("LSBCTL_CONFIG", str(tmp_path / "absent.toml"))
    for var in (
        "LSBCTL_INIT_DIR",
        "LSBCTL_COLOR",
        "LSBCTL_BACKEND",
        "LSBCTL_VERBOSE",
        "LSBCTL_LOG_JSON",
    ):
        monkeypatch.delenv(var, raising=False)


@pytest.fixture
def as_root(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr("lsbctl.services.dispatch.os.geteuid", lambda: 0)


@pytest.fixture
def as_user(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr("lsbctl.services.dispatch.os.geteuid", lambda: 1000)


@pytest.fixture
def backend(monkeypatch: pytest.MonkeyPatch, manager: FakeManager) -> Generator[FakeManager]:
    """Make the CLI entry points load *manager* instead of installed backends."""
    monkeypatch.setattr(
        "lsbctl.plugins.manager.load_service_manager",
        lambda settings: manager,
    )
    yield manager


@pytest.fixture(autouse=True)
def _restore_logging() -> Generator[None]:
    """Undo the root-handler swap done by configure_logging()."""
    root = logging.getLogger()
    original_handlers = root.handlers[:]
    original_level = root.level
    lsb = logging.getLogger("lsbctl")
    lsb_level = lsb.level
    yield
    root.handlers = original_handlers
    root.setLevel(original_level)
    lsb.setLevel(lsb_level)


@pytest.fixture
def no_backend(monkeypatch: pytest.MonkeyPatch) -> list[object]:
    """Make backend loading fail; returns the list of attempted loads."""
    from lsbctl.errors import BackendNotFoundError

    attempts: list[object] = []

    def _missing(settings: object) -> FakeManager:
        attempts.append(settings)
        raise BackendNotFoundError("No service manager backend available")

    monkeypatch.setattr("lsbctl.plugins.manager.load_service_manager", _missing)
    return attempts
