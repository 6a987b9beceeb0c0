#!/usr/bin/env python3
"""Render the floating spheres scene.

Five colored spheres float in a cross in front of the camera, lit by a
single white point light. Each sphere reflects a little of its neighbours.

Usage:
    python -m examples.render_floating_spheres [options]

Options:
    --width WIDTH       Image width in pixels (default: 300)
    --height HEIGHT     Image height in pixels (default: 180)
    --output OUTPUT     Output file path (default: floating_spheres.png)
    --ppm               Also write a plain-text PPM next to the PNG
    --verbose           Log camera progress through the logging module
    --quiet             Suppress progress output

Example:
    python -m examples.render_floating_spheres --width 600 --height 360
"""

from __future__ import annotations

import argparse
import logging
import sys
import time
from pathlib import Path

import taichi as ti


def parse_args() -> argparse.Namespace:
    """Parse command-line arguments."""
    parser = argparse.ArgumentParser(
        description="Render the floating spheres scene.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "--width",
        type=int,
        default=300,
        help="Image width in pixels (default: 300)",
    )
    parser.add_argument(
        "--height",
        type=int,
        default=180,
        help="Image height in pixels (default: 180)",
    )
    parser.add_argument(
        "--output",
        type=str,
        default="floating_spheres.png",
        help="Output file path (default: floating_spheres.png)",
    )
    parser.add_argument(
        "--ppm",
        action="store_true",
        help="Also write a plain-text PPM next to the PNG",
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Log camera progress through the logging module",
    )
    parser.add_argument(
        "--quiet",
        action="store_true",
        help="Suppress progress output",
    )
    return parser.parse_args()


def render_floating_spheres(
    width: int = 300,
    height: int = 180,
    output_path: str = "floating_spheres.png",
    write_ppm: bool = False,
    quiet: bool = False,
) -> Path:
    """Render the floating spheres scene and save to file.

    Args:
        width: Image width in pixels.
        height: Image height in pixels.
        output_path: Output file path (PNG).
        write_ppm: Also save a P3 PPM with the same stem.
        quiet: If True, suppress progress output.

    Returns:
        Path to the saved image file.
    """
    # Lazy imports to allow Taichi initialization first
    from src.whitted.preview.export import save_png, save_ppm
    from src.whitted.scene.showcase import create_floating_spheres_scene

    if not quiet:
        print(f"Creating floating spheres scene ({width}x{height})...")

    world, camera = create_floating_spheres_scene(width, height)

    start_time = time.time()

    def progress_callback(rows_done: int, total_rows: int) -> None:
        if not quiet:
            elapsed = time.time() - start_time
            progress_pct = (rows_done / total_rows) * 100 if total_rows > 0 else 0
            rows_per_sec = rows_done / elapsed if elapsed > 0 else 0
            print(
                f"\r  Progress: {rows_done}/{total_rows} rows "
                f"({progress_pct:.1f}%) - {rows_per_sec:.1f} rows/s",
                end="",
                flush=True,
            )

    canvas = camera.render(world, callback=progress_callback)

    if not quiet:
        print()  # Newline after progress

    output_file = Path(output_path)
    save_png(canvas, output_file)
    if write_ppm:
        save_ppm(canvas, output_file.with_suffix(".ppm"))

    total_time = time.time() - start_time
    if not quiet:
        print(f"Saved to: {output_file.absolute()}")
        print(f"Total time: {total_time:.2f}s")

    return output_file


def main() -> int:
    """Main entry point."""
    args = parse_args()

    logging.basicConfig(
        level=logging.INFO if args.verbose else logging.WARNING,
        format="%(asctime)s %(name)s %(levelname)s: %(message)s",
    )

    # Initialize Taichi
    # Use GPU if available, fall back to CPU
    try:
        ti.init(arch=ti.gpu)
        if not args.quiet:
            print("Using GPU backend")
    except Exception:
        ti.init(arch=ti.cpu)
        if not args.quiet:
            print("Using CPU backend")

    try:
        render_floating_spheres(
            width=args.width,
            height=args.height,
            output_path=args.output,
            write_ppm=args.ppm,
            quiet=args.quiet,
        )
        return 0
    except Exception as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
