from plasma_frames.output.ppm_writer import PPMWriter, ppm_header, read_ppm

__all__ = ["PPMWriter", "ppm_header", "read_ppm"]
