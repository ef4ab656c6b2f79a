"""Tests for the presentation loop in AsciiCubeApp."""

import io

import pytest
from prompt_toolkit.data_structures import Size
from prompt_toolkit.output.vt100 import Vt100_Output

from ascii_cube.config import Config
from ascii_cube.rendering.renderer import CubeRenderer
from ascii_cube.ui.app import AsciiCubeApp


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


class RecordingOutput:
    """Duck-typed prompt_toolkit Output that records calls."""

    def __init__(self):
        self.calls = []
        self.text = []

    def write(self, data):
        self.text.append(data)
        self.calls.append(("write", data))

    def cursor_up(self, amount):
        self.calls.append(("cursor_up", amount))

    def cursor_down(self, amount):
        self.calls.append(("cursor_down", amount))

    def hide_cursor(self):
        self.calls.append(("hide_cursor",))

    def show_cursor(self):
        self.calls.append(("show_cursor",))

    def flush(self):
        self.calls.append(("flush",))

    def names(self):
        return [c[0] for c in self.calls]


def _cfg(tmp_path, **animation):
    cfg = Config(path=str(tmp_path / "ascii_cube.json"))
    cfg.update({"animation": animation})
    return cfg


# ---------------------------------------------------------------------------
# Loop behaviour
# ---------------------------------------------------------------------------


class TestRun:
    def test_bounded_run_without_pacing(self, tmp_path):
        out = RecordingOutput()
        sleeps = []
        app = AsciiCubeApp(_cfg(tmp_path, frame_delay_ms=0), output=out, sleep=sleeps.append)
        assert app.run(max_frames=3) == 3
        assert sleeps == []
        assert app.renderer.frame_number == 3
        assert out.names().count("cursor_up") == 3

    def test_paces_each_frame(self, tmp_path):
        sleeps = []
        app = AsciiCubeApp(_cfg(tmp_path), output=RecordingOutput(), sleep=sleeps.append)
        app.run(max_frames=4)
        assert sleeps == [pytest.approx(0.03)] * 4

    def test_frame_zero_output_matches_renderer(self, tmp_path):
        out = RecordingOutput()
        app = AsciiCubeApp(_cfg(tmp_path, frame_delay_ms=0), output=out)
        app.run(max_frames=1)
        r = CubeRenderer()
        expected = "".join(line + "\n" for line in r.frame_to_lines(r.render_frame(0)))
        assert "".join(out.text) == expected

    def test_each_frame_is_rows_then_cursor_up(self, tmp_path):
        out = RecordingOutput()
        app = AsciiCubeApp(_cfg(tmp_path, frame_delay_ms=0), output=out)
        app.run(max_frames=2)
        ups = [i for i, c in enumerate(out.calls) if c[0] == "cursor_up"]
        assert [out.calls[i] for i in ups] == [("cursor_up", 40)] * 2
        first_frame = out.calls[1:ups[0]]
        assert len([c for c in first_frame if c == ("write", "\n")]) == 40

    def test_cursor_hidden_and_restored(self, tmp_path):
        out = RecordingOutput()
        app = AsciiCubeApp(_cfg(tmp_path, frame_delay_ms=0), output=out)
        app.run(max_frames=1)
        names = out.names()
        assert names[0] == "hide_cursor"
        assert names[-3:] == ["cursor_down", "show_cursor", "flush"]
        assert ("cursor_down", 40) in out.calls

    def test_cursor_left_alone_when_disabled(self, tmp_path):
        cfg = _cfg(tmp_path, frame_delay_ms=0)
        cfg.update({"render": {"hide_cursor": False}})
        out = RecordingOutput()
        AsciiCubeApp(cfg, output=out).run(max_frames=1)
        assert "hide_cursor" not in out.names()
        assert "show_cursor" not in out.names()

    def test_interrupt_restores_cursor(self, tmp_path):
        out = RecordingOutput()

        def interrupt(_delay):
            raise KeyboardInterrupt

        app = AsciiCubeApp(_cfg(tmp_path), output=out, sleep=interrupt)
        with pytest.raises(KeyboardInterrupt):
            app.run()
        assert app.frames_drawn == 1
        assert out.names()[-2:] == ["show_cursor", "flush"]

    def test_count_is_per_run(self, tmp_path):
        out = RecordingOutput()
        app = AsciiCubeApp(_cfg(tmp_path, frame_delay_ms=0), output=out)
        assert app.run(max_frames=2) == 2
        assert app.run(max_frames=0) == 0
        assert app.frames_drawn == 0
        assert out.names().count("cursor_down") == 1

    def test_zero_frames(self, tmp_path):
        out = RecordingOutput()
        app = AsciiCubeApp(_cfg(tmp_path), output=out)
        assert app.run(max_frames=0) == 0
        assert "cursor_down" not in out.names()


class TestVt100Output:
    def test_escape_sequences(self, tmp_path):
        buf = io.StringIO()
        output = Vt100_Output(buf, lambda: Size(rows=40, columns=80), term="xterm")
        app = AsciiCubeApp(_cfg(tmp_path, frame_delay_ms=0), output=output)
        app.run(max_frames=2)
        data = buf.getvalue()
        assert data.count("\x1b[40A") == 2
        assert "\x1b[40B" in data
        r = CubeRenderer()
        assert r.frame_to_lines(r.render_frame(0))[6] + "\n" in data
