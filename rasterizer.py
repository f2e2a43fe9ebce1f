#rasterizer.py

import numpy as np
import constants as C
from numpy_noise import fractal_brownian_motion
from permutation import build_permutation_table
from render_clock import RenderClock
import logger as log

def noise_to_intensity(noise_values):
    """
    Maps fBm values to 8-bit intensity: round(255 * (value + 1) / 2), with
    halves rounded up. Values beyond [-1, 1] saturate at 0 or 255.
    """
    values = np.asarray(noise_values, dtype=np.float32)
    scaled = np.floor(255.0 * (values + 1.0) / 2.0 + 0.5)
    return np.clip(scaled, 0, 255).astype(np.uint8)

def validate_bands(bands):
    """Checks that the bands are ordered and together cover every intensity 0..255."""
    if not bands:
        raise ValueError("At least one color band is required.")
    previous_upper = -1
    for upper, channels in bands:
        if upper <= previous_upper:
            raise ValueError(f"Band upper bounds must increase, got {upper} after {previous_upper}.")
        if len(channels) != C.BYTES_PER_PIXEL:
            raise ValueError(f"Each band needs {C.BYTES_PER_PIXEL} channel formulas, got {len(channels)}.")
        previous_upper = upper
    if previous_upper < 255:
        raise ValueError(f"The last band must reach intensity 255, it stops at {previous_upper}.")

def band_index(intensities, bands=C.TERRAIN_BANDS):
    """Returns, per intensity, the index of the first band whose upper bound covers it."""
    levels = np.asarray(intensities, dtype=np.int64)
    uppers = np.array([upper for upper, _ in bands], dtype=np.int64)
    return np.searchsorted(uppers, levels, side="left")

def colorize(intensities, bands=C.TERRAIN_BANDS):
    """
    Maps intensities to RGBA using the first band that covers each value.

    Every channel is (scale * intensity + offset) modulo 256, so sums past
    255 wrap instead of clamping.

    Returns:
        uint8 array with shape intensities.shape + (4,).
    """
    levels = np.asarray(intensities, dtype=np.int64)
    colors = np.zeros((*levels.shape, C.BYTES_PER_PIXEL), dtype=np.uint8)
    unassigned = np.ones(levels.shape, dtype=bool)

    for upper, channels in bands:
        band_mask = unassigned & (levels <= upper)
        if np.any(band_mask):
            band_levels = levels[band_mask]
            for channel, (scale, offset) in enumerate(channels):
                colors[band_mask, channel] = (scale * band_levels + offset) & 0xFF
        unassigned &= ~band_mask

    return colors

def _validate_dimensions(width, height, octaves):
    for name, value in (("width", width), ("height", height), ("octaves", octaves)):
        if value < 0:
            raise ValueError(f"{name} must be non-negative, got {value}")


class FieldRasterizer:
    """Turns a seed into RGBA terrain pixels, one horizontal strip at a time."""
    def __init__(self, seed, bands=C.TERRAIN_BANDS):
        validate_bands(bands)
        self.seed = seed & C.SEED_MASK
        self.bands = bands
        self.p = build_permutation_table(self.seed)

    def field_values(self, width, y_start, y_end, octaves):
        """Raw fBm values for rows [y_start, y_end), shape (rows, width)."""
        wx = np.arange(width, dtype=np.float32)
        wy = np.arange(y_start, y_end, dtype=np.float32)
        wx_grid, wy_grid = np.meshgrid(wx, wy)
        return fractal_brownian_motion(wx_grid, wy_grid, octaves, self.p)

    def render_strip(self, width, y_start, y_end, octaves):
        intensities = noise_to_intensity(self.field_values(width, y_start, y_end, octaves))
        return intensities, colorize(intensities, self.bands)

    def iter_strips(self, width, height, octaves, strip_rows=C.RENDER_STRIP_ROWS):
        """Yields (y_start, y_end, intensities, colors) for consecutive row strips, top to bottom."""
        _validate_dimensions(width, height, octaves)
        for y_start in range(0, height, strip_rows):
            y_end = min(height, y_start + strip_rows)
            intensities, colors = self.render_strip(width, y_start, y_end, octaves)
            yield y_start, y_end, intensities, colors

    def render(self, width, height, octaves, on_strip=None, strip_rows=C.RENDER_STRIP_ROWS):
        """
        Renders the whole image as row-major RGBA bytes (width * height * 4).

        Args:
            on_strip: Optional callable(y_start, y_end, intensities, colors, clock)
                      invoked after every strip, for progress displays and reports.
        """
        _validate_dimensions(width, height, octaves)

        clock = RenderClock(height)
        log.set_render_clock(clock)
        clock.start()
        log.log(f"Rendering {width}x{height} with {octaves} octaves...")

        pixels = bytearray()
        try:
            strips = self.iter_strips(width, height, octaves, strip_rows)
            for strip_number, (y_start, y_end, intensities, colors) in enumerate(strips, start=1):
                pixels += colors.tobytes()
                clock.advance(y_end - y_start)
                if on_strip is not None:
                    on_strip(y_start, y_end, intensities, colors, clock)
                if strip_number % C.RENDER_LOG_INTERVAL_STRIPS == 0 or y_end == height:
                    log.log(f"Rows {y_end}/{height} rendered.")
        finally:
            clock.stop()
            log.log(f"Render finished: {len(pixels):,} bytes.")
            log.set_render_clock(None)

        return bytes(pixels)


def render(width, height, octaves, seed):
    """Convenience wrapper: build the table for `seed` and render one image."""
    return FieldRasterizer(seed).render(width, height, octaves)
