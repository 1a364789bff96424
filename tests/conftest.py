"""Pytest fixtures for release-picker tests."""

import io

import pytest
from rich.console import Console

from release_picker.types import (
    ContainerUpdate,
    ControllerResult,
    ImageRef,
    ResourceID,
    Result,
    UpdateStatus,
)


@pytest.fixture(autouse=True)
def isolated_config(tmp_path, monkeypatch):
    """Point the config directory at a temp dir and clear env overrides."""
    config_home = tmp_path / "config"
    config_home.mkdir()
    monkeypatch.setenv("XDG_CONFIG_HOME", str(config_home))
    monkeypatch.delenv("RELEASE_PICKER_VERBOSITY", raising=False)
    return config_home / "release-picker"


@pytest.fixture
def console(monkeypatch):
    """A terminal-like Rich console writing plain text to a buffer."""
    monkeypatch.setenv("TERM", "xterm-256color")
    monkeypatch.delenv("TTY_COMPATIBLE", raising=False)
    return Console(
        file=io.StringIO(),
        force_terminal=True,
        color_system=None,
        width=200,
        highlight=False,
    )


@pytest.fixture
def scripted_keys():
    """Factory for a key source that replays the given keys.

    Once the script runs out the source raises EOFError, like a closed
    stream would.
    """

    def _make(*keys):
        pending = list(keys)
        reads = []

        def read_key():
            if not pending:
                raise EOFError("no more keys")
            key = pending.pop(0)
            reads.append(key)
            return key

        read_key.reads = reads
        read_key.pending = pending
        return read_key

    return _make


def update(container, current, target):
    return ContainerUpdate(
        container=container,
        current=ImageRef.parse(current),
        target=ImageRef.parse(target),
    )


RES_A = ResourceID.parse("default:deployment/res-a")
RES_B = ResourceID.parse("default:deployment/res-b")
RES_C = ResourceID.parse("default:deployment/res-c")
RES_FAILED = ResourceID.parse("default:deployment/aaa-failed")

APP = update("app", "quay.io/example/app:1.0", "quay.io/example/app:2.0")
SIDECAR = update("sidecar", "quay.io/example/sidecar:1.0", "quay.io/example/sidecar:1.1")
WORKER = update("worker", "quay.io/example/worker:3.0", "quay.io/example/worker:3.1")


@pytest.fixture
def two_update_result():
    """res-a with two updates and an ignored res-b."""
    return Result(
        {
            RES_A: ControllerResult(status=UpdateStatus.SUCCESS, per_container=[APP, SIDECAR]),
            RES_B: ControllerResult(status=UpdateStatus.IGNORED),
        }
    )


@pytest.fixture
def mixed_result():
    """One resource of every shape, inserted out of lexical order."""
    return Result(
        {
            RES_C: ControllerResult(status=UpdateStatus.SKIPPED, error="image locked"),
            RES_A: ControllerResult(status=UpdateStatus.SUCCESS, per_container=[APP, SIDECAR]),
            RES_FAILED: ControllerResult(status=UpdateStatus.FAILED, error="registry unreachable"),
            RES_B: ControllerResult(status=UpdateStatus.SUCCESS, per_container=[WORKER]),
        }
    )
