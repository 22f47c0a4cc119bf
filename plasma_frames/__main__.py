#!/usr/bin/env python3

"""
Plasma frame renderer

Renders the looping plasma animation to numbered PPM files. Convert them to
a video with e.g.:

    ffmpeg -i out-py-%03d.ppm -r 60 out-py.mp4
"""

import os
import sys
import argparse

from plasma_frames.config.settings import Config
from plasma_frames.core.frame_generator import FrameGenerator
from plasma_frames.errors import PlasmaError
from plasma_frames.output.ppm_writer import PPMWriter


class PlasmaRenderer:
    """Main application class"""

    def __init__(self, config_file=None, overrides=None):
        # Load configuration
        self.config = Config.load(config_file, overrides)

        # Set up logging
        self.logger = Config.setup_logging(self.config.log_level)

        self.logger.info(
            f"Render configuration: {self.config.width}x{self.config.height}, "
            f"{self.config.frames} frames, {self.config.workers} worker(s)"
        )
        self.logger.info(f"Output: {os.path.abspath(self.config.output_dir)}")

    def run(self) -> int:
        """Render every frame to disk and return the number written"""
        os.makedirs(self.config.output_dir, exist_ok=True)

        writer = PPMWriter(self.config)
        generator = FrameGenerator(self.config)
        count = generator.generate(writer)

        prefix = self.config.prefix
        pattern = os.path.join(
            self.config.output_dir, f"{prefix}-%0{self.config.index_width}d.ppm"
        )
        self.logger.info(
            f"Done. Make a video with: ffmpeg -i {pattern} -r 60 {prefix}.mp4"
        )
        return count


def parse_arguments(argv=None):
    """Parse command line arguments"""
    parser = argparse.ArgumentParser(
        description="Render the plasma animation to PPM frames"
    )

    parser.add_argument("--config", type=str, help="Path to JSON configuration file")

    parser.add_argument("--frames", type=int, help="Number of frames in the loop")

    parser.add_argument("--width", type=int, help="Frame width in pixels")

    parser.add_argument("--height", type=int, help="Frame height in pixels")

    parser.add_argument("--output-dir", type=str, help="Directory for the PPM files")

    parser.add_argument("--prefix", type=str, help="Filename prefix for the PPM files")

    parser.add_argument("--workers", type=int, help="Threads rendering row bands")

    parser.add_argument(
        "--log-level",
        type=str,
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging level",
    )

    return parser.parse_args(argv)


def main(argv=None):
    """Main entry point"""
    args = parse_arguments(argv)

    # Command-line args override config file and environment
    overrides = {
        key: value
        for key, value in vars(args).items()
        if key != "config" and value is not None
    }

    try:
        renderer = PlasmaRenderer(args.config, overrides)
    except PlasmaError as e:
        print(f"Configuration error: {e}", file=sys.stderr)
        return 1

    try:
        renderer.run()
    except PlasmaError as e:
        renderer.logger.error(str(e))
        return 1
    except OSError as e:
        renderer.logger.error(f"Cannot prepare output directory: {e}")
        return 1
    except KeyboardInterrupt:
        renderer.logger.info("Keyboard interrupt received")
        return 130

    return 0


if __name__ == "__main__":
    sys.exit(main())
