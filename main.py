#main.py

import argparse
import cProfile
import pstats
import sys
import numpy as np
import pygame
import constants as C
from rasterizer import FieldRasterizer
from graphing_manager import GraphingManager
import image_sink
import ui
import logger

def non_negative_int(text):
    value = int(text)
    if value < 0:
        raise argparse.ArgumentTypeError(f"expected a non-negative integer, got {value}")
    return value

def parse_args(argv=None):
    parser = argparse.ArgumentParser(description="Generates a seeded Perlin noise terrain texture as a PNG")
    parser.add_argument("--width", type=non_negative_int, default=C.DEFAULT_IMAGE_WIDTH, help="Image width in pixels")
    parser.add_argument("--height", type=non_negative_int, default=C.DEFAULT_IMAGE_HEIGHT, help="Image height in pixels")
    parser.add_argument("--octaves", "-o", type=non_negative_int, default=C.DEFAULT_OCTAVES, help="Number of layers of noise to sum")
    parser.add_argument("--seed", type=int, default=None, help="64-bit seed; drawn from OS entropy when omitted")
    parser.add_argument("--out", type=str, default=C.DEFAULT_OUTPUT_PATH, help="File path for the PNG image")
    parser.add_argument("--histogram", nargs="?", const=C.DEFAULT_HISTOGRAM_PATH, default=None,
                        help="Also save an intensity histogram (optionally to the given path)")
    parser.add_argument("--preview", action="store_true", help="Show render progress and the result in a window")
    parser.add_argument("--profile", action="store_true", help="Print a cProfile report after the run")
    return parser.parse_args(argv)

def draw_entropy_seed():
    """Draws a fresh 64-bit seed from the operating system's entropy source."""
    return int(np.random.default_rng().integers(0, 2**64, dtype=np.uint64))

def open_preview(width, height):
    try:
        return ui.open_preview_window(width, height)
    except pygame.error as e:
        logger.log(f"Preview disabled: {e}")
        return None, None

def generate_noise(width, height, octaves, seed, out_path, histogram_path=None, preview=False):
    """Renders one image, writes it, and runs the optional reports. Returns the pixel bytes."""
    rasterizer = FieldRasterizer(seed)
    histogram = GraphingManager() if histogram_path else None
    screen, font = open_preview(width, height) if preview else (None, None)

    def on_strip(y_start, y_end, intensities, colors, clock):
        if histogram is not None:
            histogram.add_strip(intensities)
        if screen is not None:
            pygame.event.pump()
            ui.draw_loading_screen(screen, font, clock.rows_done, clock.total_rows)

    pixels = rasterizer.render(width, height, octaves, on_strip=on_strip)
    image_sink.write_png(out_path, pixels, width, height)

    if histogram is not None:
        histogram.generate_and_save_histogram(histogram_path)

    if screen is not None:
        try:
            ui.show_image(screen, pixels, width, height)
        except (pygame.error, image_sink.EncodeError) as e:
            logger.log(f"Preview failed: {e}")
        finally:
            pygame.quit()

    return pixels

def run(args):
    seed = args.seed if args.seed is not None else draw_entropy_seed()
    # The seed is always printed so a random run can be reproduced.
    logger.log(f"Seed: {seed & C.SEED_MASK}")
    try:
        generate_noise(args.width, args.height, args.octaves, seed, args.out,
                       histogram_path=args.histogram, preview=args.preview)
    except image_sink.ImageSinkError as e:
        logger.log(f"ERROR: {type(e).__name__}: {e}")
        return 1
    return 0

def main(argv=None):
    args = parse_args(argv)
    logger.log("--- Generation Start ---")
    if not args.profile:
        exit_code = run(args)
    else:
        profiler = cProfile.Profile()
        try:
            exit_code = profiler.runcall(run, args)
        finally:
            print("\n\n--- PROFILER REPORT ---")
            stats = pstats.Stats(profiler)
            # Sort the stats by the cumulative time spent in each function
            stats.sort_stats(pstats.SortKey.CUMULATIVE)
            stats.print_stats(C.PROFILER_PRINT_LINE_COUNT)
    logger.log("--- Generation Exit ---")
    return exit_code

if __name__ == '__main__':
    sys.exit(main())
