"""Tests for the debug/logging manager."""

import io
import logging
import sys
from pathlib import Path

import pytest

# Add parent directory to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from connect4.debug import DebugLevel, DebugManager


@pytest.fixture
def manager(request):
    dm = DebugManager(name=f"connect4.test.{request.node.name}")
    stream = io.StringIO()
    handler = logging.StreamHandler(stream)
    handler.setFormatter(logging.Formatter('%(levelname)s %(message)s'))
    dm.logger.addHandler(handler)
    yield dm, stream
    dm.logger.removeHandler(handler)


def test_level_filtering(manager):
    dm, stream = manager
    dm.configure(level=DebugLevel.INFO)
    dm.info("shown", "board")
    dm.debug("hidden", "board")
    output = stream.getvalue()
    assert "INFO [board] shown" in output
    assert "hidden" not in output


def test_trace_uses_debug(manager):
    dm, stream = manager
    dm.configure(level=DebugLevel.TRACE)
    dm.trace("step")
    assert "DEBUG TRACE: step" in stream.getvalue()


def test_component_filtering(manager):
    dm, stream = manager
    dm.configure(level=DebugLevel.INFO, components=["cli"])
    dm.info("from cli", "cli")
    dm.info("from run", "run")
    output = stream.getvalue()
    assert "from cli" in output
    assert "from run" not in output


def test_none_and_disabled_silence_everything(manager):
    dm, stream = manager
    dm.configure(level=DebugLevel.NONE)
    dm.error("quiet")
    dm.configure(level=DebugLevel.ERROR, enabled=False)
    dm.error("still quiet")
    assert stream.getvalue() == ""


def test_set_from_string(manager):
    dm, _ = manager
    assert dm.set_from_string("debug")
    assert dm.level == DebugLevel.DEBUG
    assert not dm.set_from_string("chatty")
    assert dm.level == DebugLevel.DEBUG


def test_timers(manager):
    dm, stream = manager
    dm.configure(level=DebugLevel.DEBUG)
    dm.start_timer("batch")
    elapsed = dm.end_timer("batch", "cli")
    assert elapsed is not None and elapsed >= 0
    assert "Performance [batch]" in stream.getvalue()
    assert dm.end_timer("batch") is None


def test_log_file(manager, tmp_path):
    dm, _ = manager
    log_path = tmp_path / "connect4.log"
    dm.configure(level=DebugLevel.INFO, log_file=str(log_path))
    dm.info("to file")
    dm.configure(log_file="")
    assert "to file" in log_path.read_text()
