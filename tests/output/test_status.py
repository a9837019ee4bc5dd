"""Tests for status line rendering."""

from lsbctl.output.status import render_disabled, render_status


class TestRenderStatus:
    def test_plain(self) -> None:
        assert render_status("web", "running") == "web\trunning\n"

    def test_running_green(self) -> None:
        assert render_status("web", "running", color=True) == "\x1b[32mweb\trunning\n\x1b[0m"

    def test_other_state_red(self) -> None:
        assert render_status("web", "broken", color=True) == "\x1b[31mweb\tbroken\n\x1b[0m"

    def test_running_prefix_is_not_running(self) -> None:
        assert render_status("web", "running?", color=True).startswith("\x1b[31m")

    def test_state_verbatim(self) -> None:
        assert render_status("aaa/bbb", "not running (pid 12 gone)") == (
            "aaa/bbb\tnot running (pid 12 gone)\n"
        )


class TestRenderDisabled:
    def test_off(self) -> None:
        assert render_disabled("web") == "web\toff\n"
