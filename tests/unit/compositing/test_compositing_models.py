"""Tests for geometry parsing and the recording compositor."""

from __future__ import annotations

from pathlib import Path

import pytest

from rpsprites.core.compositing import (
    Canvas,
    CompositeJob,
    CompositingError,
    Compositor,
    Geometry,
    Layer,
    RecordingCompositor,
)


class TestGeometry:
    """Test WIDTHxHEIGHT+X+Y parsing."""

    def test_parse(self):
        geometry = Geometry.parse("48x48+8+72")
        assert geometry == Geometry(width=48, height=48, x=8, y=72)

    def test_str_round_trips(self):
        assert str(Geometry.parse("48x48+72+72")) == "48x48+72+72"

    def test_negative_offsets(self):
        geometry = Geometry.parse("16x8-4+2")
        assert (geometry.x, geometry.y) == (-4, 2)
        assert str(geometry) == "16x8-4+2"

    @pytest.mark.parametrize("spec", ["48x48", "48+8+72", "x48+8+72", "48x48+8", "big", ""])
    def test_malformed(self, spec: str):
        with pytest.raises(ValueError, match="Malformed geometry"):
            Geometry.parse(spec)

    def test_zero_size_rejected(self):
        with pytest.raises(ValueError):
            Geometry(0, 48)


class TestCanvas:
    def test_defaults(self):
        canvas = Canvas()
        assert canvas.size == "128x128"
        assert canvas.depth == 8
        assert canvas.background == "none"


class TestRecordingCompositor:
    """Test the in-memory compositor."""

    def _job(self, name: str) -> CompositeJob:
        return CompositeJob(
            canvas=Canvas(),
            layers=(Layer(Path(f"sources/{name}.png")),),
            output=Path(f"{name}.png"),
        )

    def test_records_in_order(self):
        recorder = RecordingCompositor()
        recorder.composite(self._job("fire"))
        recorder.composite(self._job("water"))

        assert recorder.outputs == ["fire.png", "water.png"]
        assert isinstance(recorder, Compositor)

    def test_simulated_failure(self):
        recorder = RecordingCompositor(fail_on=lambda job: job.output.name == "water.png")
        recorder.composite(self._job("fire"))

        with pytest.raises(CompositingError) as exc_info:
            recorder.composite(self._job("water"))

        assert exc_info.value.returncode == 1
        assert recorder.outputs == ["fire.png", "water.png"]
