import datetime
import logging

import pytest

import drawclock
from config import FaceConfig
from hands import ClockFace


class FakeClock:
    def __init__(self):
        self.t = 0.0
        self.sleeps = []

    def monotonic(self):
        return self.t

    def sleep(self, seconds):
        self.sleeps.append(seconds)
        self.t += seconds

    def now(self):
        return datetime.datetime(2024, 1, 1, 13, 56, 22) + datetime.timedelta(seconds=self.t)


def test_run_calls_render_once_per_frame():
    fake = FakeClock()
    seen = []
    count = drawclock.run(seen.append, 0.01, frames=3, now=fake.now,
                          monotonic=fake.monotonic, sleep=fake.sleep)
    assert count == 3
    assert len(seen) == 3
    assert seen[0] < seen[1] < seen[2]
    assert fake.sleeps == pytest.approx([0.01, 0.01])


def test_run_does_not_sleep_when_late():
    fake = FakeClock()

    def slow_render(now):
        fake.t += 0.05

    drawclock.run(slow_render, 0.01, frames=2, now=fake.now,
                  monotonic=fake.monotonic, sleep=fake.sleep)
    assert fake.sleeps == []


def test_run_reraises_render_errors(caplog):
    fake = FakeClock()

    def broken(now):
        raise RuntimeError("no surface")

    with caplog.at_level(logging.ERROR):
        with pytest.raises(RuntimeError):
            drawclock.run(broken, 0.01, frames=5, now=fake.now,
                          monotonic=fake.monotonic, sleep=fake.sleep)
    assert "rendering frame 0 failed" in caplog.text


def test_renderer_writes_png(tmp_path):
    path = tmp_path / "clock.png"
    render = drawclock.make_renderer(str(path), FaceConfig())
    face = render(datetime.time(13, 56, 22, 113000))
    assert isinstance(face, ClockFace)
    assert path.read_bytes()[:4] == b"\x89PNG"


def test_parse_time():
    assert drawclock.parse_time("13:56:22.113") == datetime.time(13, 56, 22, 113000)


def test_main_draws_a_fixed_time(tmp_path, monkeypatch):
    monkeypatch.setattr(drawclock, "setup_logging", lambda level, log_file: None)
    path = tmp_path / "out.png"
    status = drawclock.main(["--time", "09:15", "--output", str(path),
                             "--minute-hand", "line"])
    assert status == 0
    assert path.exists()


def test_main_rejects_bad_time(capsys):
    with pytest.raises(SystemExit) as excinfo:
        drawclock.main(["--time", "quarter past"])
    assert excinfo.value.code == 2
    assert "not a time of day" in capsys.readouterr().err


@pytest.mark.parametrize("argv, message", [
    (["--frames", "-3"], "frame count can't be negative"),
    (["--interval", "-1"], "interval must be positive"),
    (["--interval", "0"], "interval must be positive"),
    (["--size", "0"], "size must be positive"),
])
def test_main_rejects_bad_scheduling(tmp_path, capsys, argv, message):
    path = tmp_path / "out.png"
    with pytest.raises(SystemExit) as excinfo:
        drawclock.main(["--time", "09:15", "--output", str(path)] + argv)
    assert excinfo.value.code == 2
    assert message in capsys.readouterr().err
    assert not path.exists()


def test_main_passes_log_file(tmp_path, monkeypatch):
    calls = []
    monkeypatch.setattr(drawclock, "setup_logging",
                        lambda level, log_file: calls.append((level, log_file)))
    log_path = str(tmp_path / "clock.log")
    drawclock.main(["--time", "09:15", "--output", str(tmp_path / "out.png"),
                    "--verbose", "--log-file", log_path])
    assert calls == [(logging.DEBUG, log_path)]


def interrupt(*args, **kwargs):
    raise KeyboardInterrupt


@pytest.mark.parametrize("frames, status", [("0", 0), ("5", 1)])
def test_interrupt_status(tmp_path, monkeypatch, frames, status):
    monkeypatch.setattr(drawclock, "setup_logging", lambda level, log_file: None)
    monkeypatch.setattr(drawclock, "run", interrupt)
    assert drawclock.main(["--output", str(tmp_path / "out.png"),
                           "--frames", frames]) == status
