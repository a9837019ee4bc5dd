"""Tests for deriving the process-wide Request."""

import pytest

from lsbctl.domain.bootstrap import current_request, derive_request, resolve_request
from lsbctl.domain.request import Request
from lsbctl.errors import ResolutionError


class TestDeriveRequest:
    def test_name_command_args(self) -> None:
        request = derive_request("/etc/init.d/web", ["start", "extra"])
        assert request == Request(name="web", command="start", args=("extra",))

    def test_nested_name(self) -> None:
        request = derive_request("/etc/init.d/aaa/bbb", ["status"])
        assert request.name == "aaa/bbb"

    def test_no_arguments(self) -> None:
        request = derive_request("/etc/init.d/web", [])
        assert request.command is None
        assert request.args == ()

    def test_empty_command_is_absent(self) -> None:
        assert derive_request("/etc/init.d/web", [""]).command is None

    def test_custom_init_dir(self) -> None:
        request = derive_request("/etc/rc.d/init.d/web", ["stop"], init_dir="/etc/rc.d/init.d/")
        assert request.name == "web"

    @pytest.mark.parametrize(
        "path",
        ["/usr/bin/lsbctl-init", "/etc/init.d/", "etc/init.d/web", "/etc/init.dweb"],
    )
    def test_strange_path(self, path: str) -> None:
        with pytest.raises(ResolutionError, match="Strange invocation path"):
            derive_request(path, ["start"])

    def test_resolution_error_exit_code(self) -> None:
        with pytest.raises(ResolutionError) as excinfo:
            derive_request("/tmp/web", [])
        assert excinfo.value.exit_code == 1


class TestCurrentRequest:
    def test_derived_from_sys_argv(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setattr("sys.argv", ["/etc/init.d/web", "restart"])
        request = current_request()
        assert request.name == "web"
        assert request.command == "restart"

    def test_cached_across_argv_mutation(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setattr("sys.argv", ["/etc/init.d/web", "start"])
        first = current_request()
        monkeypatch.setattr("sys.argv", ["/etc/init.d/db", "stop", "now"])
        second = current_request()
        assert second is first
        assert second.name == "web"

    def test_strange_argv0(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setattr("sys.argv", ["/usr/bin/python", "start"])
        with pytest.raises(ResolutionError):
            current_request()


class TestResolveRequest:
    def test_explicit_request_passes_through(self) -> None:
        request = Request(name="web", command="stop")
        assert resolve_request(request) is request

    def test_none_uses_singleton(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setattr("sys.argv", ["/etc/init.d/web", "status"])
        first = resolve_request()
        monkeypatch.setattr("sys.argv", ["/etc/init.d/web", "stop"])
        assert resolve_request() is first
        assert first.command == "status"

    def test_unknown_argument(self) -> None:
        with pytest.raises(ResolutionError, match="Unknown argument 'Bogus'"):
            resolve_request("Bogus")  # type: ignore[arg-type]
