"""Tests for the headless runner and the logging renderer."""

import logging

import pytest

from driftbox.cli import main, make_frame_limit_system, parse_args
from driftbox.render import LogRenderer, NullRenderer
from driftbox.types import ENEMY, PLAYER, Entity, Snapshot


def _snapshot(frame_number: int) -> Snapshot:
    return Snapshot(
        frame_number=frame_number,
        dt=0.016,
        playing=True,
        player=Entity(kind=PLAYER, x=1.0, y=2.0, w=16, h=16, vx=3.0, vy=-4.0),
        enemies=(Entity(kind=ENEMY, x=5.0, y=6.0, w=8, h=12),),
    )


# --- parse_args ---

def test_parse_args_defaults():
    args = parse_args([])
    assert args.frames == 60
    assert args.seed is None
    assert args.enemies == 10
    assert args.timing == "frame"
    assert args.verbose is False


def test_parse_args_clamps():
    args = parse_args(["--frames", "0", "--enemies", "-3", "--every", "0"])
    assert args.frames == 1
    assert args.enemies == 0
    assert args.every == 1


def test_parse_args_rejects_unknown_timing():
    with pytest.raises(SystemExit):
        parse_args(["--timing", "vsync"])


# --- main ---

def test_main_runs_requested_frames(caplog):
    caplog.set_level(logging.INFO)
    code = main(["--frames", "3", "--seed", "5", "--timing", "interval", "--every", "1"])
    assert code == 0
    frame_lines = [r for r in caplog.records if r.name == "driftbox.frames"]
    assert len(frame_lines) == 3
    assert "done after 3 frames" in caplog.text
    assert "seed=5" in caplog.text


def test_main_verbose_logs_enemies(caplog):
    caplog.set_level(logging.DEBUG)
    main(["--frames", "1", "--seed", "1", "--enemies", "2", "--every", "1", "-v"])
    assert "enemy 1 at" in caplog.text


# --- frame limit system ---

def test_frame_limit_system_requests_stop():
    calls = []

    class Ctx:
        def __init__(self, n):
            self.frame_number = n

        def request_stop(self):
            calls.append(self.frame_number)

    system = make_frame_limit_system(3)
    for n in range(1, 6):
        system(None, Ctx(n))
    assert calls == [3, 4, 5]


# --- renderers ---

def test_null_renderer_accepts_snapshots():
    NullRenderer()(_snapshot(1))


def test_log_renderer_logs_every_nth_frame(caplog):
    caplog.set_level(logging.INFO)
    renderer = LogRenderer(logging.getLogger("test.frames"), every=2)
    for n in range(1, 5):
        renderer(_snapshot(n))
    assert renderer.frames_drawn == 4
    lines = [r.getMessage() for r in caplog.records if r.name == "test.frames"]
    assert len(lines) == 2
    assert "frame 2" in lines[0]
    assert "vX: 3.00 vY: -4.00" in lines[0]


def test_log_renderer_rejects_bad_every():
    with pytest.raises(ValueError):
        LogRenderer(every=0)
