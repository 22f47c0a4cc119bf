from plasma_frames.config.render_config import RenderConfig, DEFAULT_CONFIG
from plasma_frames.config.settings import Config

__all__ = ["RenderConfig", "DEFAULT_CONFIG", "Config"]
