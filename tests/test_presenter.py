from __future__ import annotations

import io
from dataclasses import replace

from ocproj.presenter import RESET, color_enabled, list_projects, render_projects

from .fakes import FakeClient


class TtyStream(io.StringIO):
    def isatty(self):
        return True


def test_render_plain_keeps_client_order():
    lines = list(render_projects(["zeta", "alpha", "mid"], "alpha", colorize=False))
    assert lines == ["zeta", "alpha", "mid"]


def test_render_highlights_only_current():
    lines = list(render_projects(["a", "b"], "b", colorize=True, fg="<fg>", bg="<bg>"))
    assert lines == ["a", f"<bg><fg>b{RESET}"]


def test_color_forced(settings):
    assert color_enabled(replace(settings, force_color=True), io.StringIO())


def test_color_on_terminal(settings):
    assert color_enabled(settings, TtyStream())


def test_no_color_on_pipe(settings):
    assert not color_enabled(settings, io.StringIO())


def test_no_color_env_disables_terminal_color(settings):
    assert not color_enabled(replace(settings, no_color=True), TtyStream())


def test_force_wins_over_no_color(settings):
    assert color_enabled(replace(settings, force_color=True, no_color=True), io.StringIO())


def test_list_projects_plain(settings):
    out = io.StringIO()
    list_projects(FakeClient(projects=["default", "staging"]), settings, out=out)
    assert out.getvalue() == "default\nstaging\n"


def test_list_projects_colored(settings):
    out = io.StringIO()
    colored = replace(settings, force_color=True, current_fg="F", current_bg="B")
    list_projects(FakeClient(current="staging"), colored, out=out)
    assert out.getvalue() == f"default\nBFstaging{RESET}\n"


def test_list_projects_empty(settings):
    out = io.StringIO()
    list_projects(FakeClient(projects=[]), settings, out=out)
    assert out.getvalue() == ""
