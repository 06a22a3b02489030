from __future__ import annotations

import io
from unittest.mock import patch

import pytest

from ocproj import picker
from ocproj.models import CommandResult, PickerAbortedError, PickerUnavailableError
from ocproj.switcher import ProjectSwitcher

from .fakes import FakeClient


def _switcher(client, store):
    return ProjectSwitcher(client, store, out=io.StringIO(), err=io.StringIO())


def _fzf_result(stdout, returncode=0):
    return CommandResult(argv=("fzf",), returncode=returncode, stdout=stdout)


def test_empty_listing_never_starts_fzf(store):
    client = FakeClient(projects=[])
    with patch.object(picker, "run_command") as run:
        with pytest.raises(PickerUnavailableError, match="could not list projects"):
            picker.pick_project(client, _switcher(client, store))
    run.assert_not_called()


def test_selection_switches_project(store):
    client = FakeClient()
    with patch.object(picker, "run_command", return_value=_fzf_result("staging\n")) as run:
        picker.pick_project(client, _switcher(client, store))

    assert client.switches == [("dev", "staging")]
    assert store.read_project("dev") == "default"

    argv = run.call_args.args[0]
    assert argv == ["fzf", "--ansi", "--no-preview"]
    env = run.call_args.kwargs["env"]
    assert env["_OCPROJ_FORCE_COLOR"] == "1"
    assert env["FZF_DEFAULT_COMMAND"] == picker.self_command()
    assert run.call_args.kwargs["capture_stderr"] is False


def test_abort_raises(store):
    client = FakeClient()
    with patch.object(picker, "run_command", return_value=_fzf_result("", returncode=130)):
        with pytest.raises(PickerAbortedError, match="you did not choose any of the options"):
            picker.pick_project(client, _switcher(client, store))
    assert client.switches == []


def test_self_command_falls_back_to_module(monkeypatch):
    monkeypatch.setattr("sys.argv", ["/nonexistent/ocproj"])
    assert picker.self_command().endswith("-m ocproj")


def test_self_command_uses_installed_script(monkeypatch, tmp_path):
    script = tmp_path / "ocproj"
    script.write_text("#!/bin/sh\n")
    script.chmod(0o755)
    monkeypatch.setattr("sys.argv", [str(script)])
    assert picker.self_command() == str(script)


def test_whitespace_output_counts_as_abort(store):
    client = FakeClient()
    with patch.object(picker, "run_command", return_value=_fzf_result("  \n")):
        with pytest.raises(PickerAbortedError):
            picker.pick_project(client, _switcher(client, store))
    assert client.switches == []
