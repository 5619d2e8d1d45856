# -*- coding: utf-8 -*-

"""
Filename: main.py
Author: storro
Date: 2026-10-18
Description: Main application entry point
"""

import argparse
import logging

from oceanfft.ocean.ocean_config import OceanConfig
from oceanfft.ocean.ocean_errors import OceanConfigError
from oceanfft.ocean.ocean_simulation import OceanSimulation
from oceanfft.util.logging_config import setup_logging


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Tessendorf FFT ocean simulation")
    parser.add_argument("-n", "--resolution", type=int, default=256,
                        help="Grid resolution, power of two in [64, 1024] (default: 256)")
    parser.add_argument("-l", "--length", type=float, default=256.0,
                        help="Patch size in meters (default: 256.0)")
    parser.add_argument("-w", "--wind-speed", type=float, default=15.0,
                        help="Wind speed in m/s (default: 15.0)")
    parser.add_argument("--wind-dir", type=float, nargs=2, default=(1.0, 1.0),
                        metavar=("X", "Z"), help="Wind direction (default: 1 1)")
    parser.add_argument("--choppiness", type=float, default=1.5,
                        help="Horizontal displacement scale (default: 1.5)")
    parser.add_argument("--seed", type=int, default=0,
                        help="Seed of the spectrum random draws (default: 0)")
    parser.add_argument("--precision", choices=("float32", "float64"), default="float32",
                        help="Working precision (default: float32)")
    parser.add_argument("--normals", choices=("spectral", "finite_difference"),
                        default="spectral", help="Normal derivation (default: spectral)")
    parser.add_argument("--headless", action="store_true",
                        help="Run without a window and log field statistics")
    parser.add_argument("--frames", type=int, default=10,
                        help="Frames to simulate in headless mode (default: 10)")
    parser.add_argument("--dt", type=float, default=1.0 / 60.0,
                        help="Time step in seconds (default: 1/60)")
    parser.add_argument("-t", "--time-scale", type=float, default=1.0,
                        help="Time scaling factor for the preview (default: 1.0)")
    parser.add_argument("--log-level", default="INFO",
                        choices=("DEBUG", "INFO", "WARNING", "ERROR"), type=str.upper,
                        help="Logging level (default: INFO)")
    parser.add_argument("--log-file", action="store_true",
                        help="Also write logs to logs/ocean.log")
    return parser


def run_headless(config: OceanConfig, frames: int, dt: float) -> None:
    with OceanSimulation(config, publish=False) as ocean:
        for _ in range(frames):
            frame = ocean.step(dt)
            logging.info(
                "t=%.3f s  height min=%.3f max=%.3f mean=%.2e std=%.3f",
                frame.time, frame.height.min(), frame.height.max(),
                frame.height.mean(), frame.height.std(),
            )


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    setup_logging(args.log_level, log_to_file=args.log_file)

    config = OceanConfig(
        resolution=args.resolution,
        ocean_size=args.length,
        wind_direction=tuple(args.wind_dir),
        wind_speed=args.wind_speed,
        choppiness=args.choppiness,
        seed=args.seed,
        precision=args.precision,
        normal_mode=args.normals,
    )

    try:
        config = config.validate()
    except OceanConfigError as exc:
        logging.error("Invalid configuration: %s", exc)
        return 2

    if args.headless:
        run_headless(config, args.frames, args.dt)
        return 0

    from oceanfft.app.ocean_app import OceanApp
    OceanApp(config, time_scale=args.time_scale).run()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
