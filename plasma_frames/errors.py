from typing import Optional


class PlasmaError(Exception):
    """Base class for errors raised by plasma_frames"""


class ConfigError(PlasmaError, ValueError):
    """Invalid render configuration value"""


class FrameWriteError(PlasmaError):
    """Failure to persist a rendered frame

    Carries the frame index, the destination path and the underlying
    I/O error so the run can abort with a useful diagnostic.
    """

    def __init__(self, frame: int, path: str, cause: Optional[BaseException] = None):
        self.frame = frame
        self.path = path
        self.cause = cause
        message = f"Failed to write frame {frame} to {path}"
        if cause is not None:
            message += f": {cause}"
        super().__init__(message)
