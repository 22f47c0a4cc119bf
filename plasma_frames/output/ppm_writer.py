import os
import logging
import tempfile
from typing import List, Tuple

from plasma_frames.config.render_config import RenderConfig
from plasma_frames.errors import FrameWriteError

logger = logging.getLogger(__name__)

MAGIC = b"P6"
MAX_VALUE = 255


def ppm_header(width: int, height: int) -> bytes:
    """Binary PPM header: P6, dimensions, max channel value"""
    return b"%s\n%d %d\n%d\n" % (MAGIC, width, height, MAX_VALUE)


class PPMWriter:
    """Frame sink writing one binary PPM file per frame

    Each frame is written to a temporary file in the output directory and
    renamed into place once complete, so any <prefix>-NNN.ppm on disk is a
    whole frame. Failures raise FrameWriteError and abort the run.
    """

    def __init__(self, config: RenderConfig):
        self.config = config
        self.output_dir = config.output_dir
        self.frame_count = config.frames
        self.written: List[str] = []

    def path_for(self, frame: int) -> str:
        return os.path.join(self.output_dir, self.config.frame_path(frame))

    def __call__(self, frame: int, width: int, data) -> None:
        height = len(data) // (width * 3)
        path = self.path_for(frame)

        tmp_path = None
        try:
            fd, tmp_path = tempfile.mkstemp(
                prefix=f".{self.config.prefix}-", suffix=".tmp", dir=self.output_dir
            )
            with os.fdopen(fd, "wb") as f:
                f.write(ppm_header(width, height))
                f.write(data)
            os.replace(tmp_path, path)
            tmp_path = None
        except OSError as e:
            raise FrameWriteError(frame, path, e) from e
        finally:
            # Set only while an unfinished temp file is on disk
            if tmp_path is not None and os.path.exists(tmp_path):
                os.remove(tmp_path)

        self.written.append(path)
        logger.info(f"Generated {path} ({frame + 1:3}/{self.frame_count})")


def _header_tokens(content: bytes, count: int) -> Tuple[List[bytes], int]:
    """Split the first `count` header tokens, skipping whitespace and # comments

    Returns the tokens and the offset just past the single whitespace byte
    that ends the header.
    """
    tokens = []
    pos = 0
    size = len(content)
    while len(tokens) < count:
        while pos < size and content[pos : pos + 1].isspace():
            pos += 1
        if pos < size and content[pos : pos + 1] == b"#":
            while pos < size and content[pos : pos + 1] not in (b"\n", b"\r"):
                pos += 1
            continue
        start = pos
        while pos < size and not content[pos : pos + 1].isspace():
            pos += 1
        if start == pos:
            break
        tokens.append(content[start:pos])
    return tokens, pos + 1


def read_ppm(path: str) -> Tuple[int, int, bytes]:
    """Read a binary PPM (P6, max value 255)

    Returns:
        (width, height, raw RGB bytes)
    """
    with open(path, "rb") as f:
        content = f.read()

    # Magic, width, height and max value, then one whitespace byte
    parts, offset = _header_tokens(content, 4)
    if len(parts) < 4 or parts[0] != MAGIC:
        raise ValueError(f"{path} is not a binary PPM file")

    try:
        width, height, max_value = (int(v) for v in parts[1:4])
    except ValueError:
        raise ValueError(f"Malformed PPM header in {path}") from None
    if max_value != MAX_VALUE:
        raise ValueError(f"Unsupported max value {max_value} in {path}")

    data = content[offset:]
    if len(data) != width * height * 3:
        logger.warning(
            f"Invalid frame {path}: expected {width * height * 3} bytes, "
            f"got {len(data)}"
        )
        raise ValueError(f"Truncated pixel data in {path}")

    return width, height, data
