import os

import pytest

from plasma_frames.config.render_config import RenderConfig
from plasma_frames.core.frame_generator import FrameGenerator
from plasma_frames.errors import FrameWriteError
from plasma_frames.output.ppm_writer import PPMWriter, ppm_header, read_ppm


def test_header_format():
    assert ppm_header(960, 540) == b"P6\n960 540\n255\n"


def test_writes_header_and_pixels(tmp_path):
    config = RenderConfig(width=2, height=1, frames=10, output_dir=str(tmp_path))
    writer = PPMWriter(config)
    data = bytes([255, 0, 0, 0, 32, 10])

    writer(7, 2, memoryview(data))

    path = tmp_path / "out-py-007.ppm"
    assert path.read_bytes() == b"P6\n2 1\n255\n" + data
    assert writer.written == [str(path)]
    assert os.listdir(tmp_path) == ["out-py-007.ppm"]


def test_generator_into_writer(tmp_path):
    config = RenderConfig(width=5, height=3, frames=2, output_dir=str(tmp_path), prefix="loop")
    writer = PPMWriter(config)
    frames = list(FrameGenerator(config).frames())
    FrameGenerator(config).generate(writer)

    assert sorted(os.listdir(tmp_path)) == ["loop-000.ppm", "loop-001.ppm"]
    for frame in frames:
        width, height, data = read_ppm(str(tmp_path / f"loop-{frame.index:03d}.ppm"))
        assert (width, height) == (5, 3)
        assert data == frame.data


def test_missing_directory_reports_frame(tmp_path):
    config = RenderConfig(width=1, height=1, frames=1, output_dir=str(tmp_path / "nope"))
    writer = PPMWriter(config)

    with pytest.raises(FrameWriteError) as exc_info:
        writer(0, 1, b"\x00\x00\x00")

    err = exc_info.value
    assert err.frame == 0
    assert err.path.endswith("out-py-000.ppm")
    assert isinstance(err.cause, OSError)
    assert "frame 0" in str(err)


def test_failed_rename_leaves_no_partial_file(tmp_path, monkeypatch):
    config = RenderConfig(width=1, height=1, frames=3, output_dir=str(tmp_path))
    writer = PPMWriter(config)

    def broken_replace(src, dst):
        raise PermissionError("read-only")

    monkeypatch.setattr(os, "replace", broken_replace)
    with pytest.raises(FrameWriteError) as exc_info:
        writer(2, 1, b"\x01\x02\x03")

    assert exc_info.value.frame == 2
    assert os.listdir(tmp_path) == []
    assert writer.written == []


def test_read_rejects_other_formats(tmp_path):
    path = tmp_path / "image.ppm"
    path.write_bytes(b"P3\n1 1\n255\n0 0 0\n")
    with pytest.raises(ValueError):
        read_ppm(str(path))


def test_read_rejects_truncated_data(tmp_path):
    path = tmp_path / "short.ppm"
    path.write_bytes(ppm_header(2, 2) + b"\x00" * 5)
    with pytest.raises(ValueError):
        read_ppm(str(path))


def test_interrupted_write_removes_temp_file(tmp_path, monkeypatch):
    config = RenderConfig(width=1, height=1, frames=1, output_dir=str(tmp_path))
    writer = PPMWriter(config)

    def interrupted_replace(src, dst):
        raise KeyboardInterrupt

    monkeypatch.setattr(os, "replace", interrupted_replace)
    with pytest.raises(KeyboardInterrupt):
        writer(0, 1, b"\x01\x02\x03")

    assert os.listdir(tmp_path) == []
    assert writer.written == []


def test_read_header_with_comments_and_spacing(tmp_path):
    path = tmp_path / "gimp.ppm"
    pixels = b"\x0a\x20\x23" * 2
    path.write_bytes(b"P6\n# CREATOR: an editor\n2   1\n# depth\n255\n" + pixels)

    assert read_ppm(str(path)) == (2, 1, pixels)


def test_read_rejects_malformed_dimensions(tmp_path):
    path = tmp_path / "bad.ppm"
    path.write_bytes(b"P6\nwide 1\n255\n\x00\x00\x00")
    with pytest.raises(ValueError):
        read_ppm(str(path))
