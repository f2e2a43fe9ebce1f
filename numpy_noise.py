#numpy_noise.py

import numpy as np
import constants as C

GRADIENT_VECTORS = np.array(C.GRADIENT_DIRECTIONS, dtype=np.float32)

def perlin_noise_2d(x, y, p):
    """
    Evaluate 2D Perlin noise using a pre-computed permutation table.

    Args:
        x, y: Scalars or numpy arrays of the same shape, in noise space.
              Negative values are allowed.
        p: The 257-entry permutation table from build_permutation_table.

    Returns:
        float32 noise value(s) with the shape of x and y.
    """
    x = np.asarray(x, dtype=np.float32)
    y = np.asarray(y, dtype=np.float32)
    p = np.asarray(p, dtype=np.intp)

    # Cell coordinates. np.mod keeps negative cells in 0..255.
    x_floor = np.floor(x)
    y_floor = np.floor(y)
    xi = np.mod(x_floor, C.PERMUTATION_SIZE).astype(np.intp)
    yi = np.mod(y_floor, C.PERMUTATION_SIZE).astype(np.intp)

    # Internal coordinates, in [0, 1)
    xf = x - x_floor
    yf = y - y_floor

    u = fade(xf)
    v = fade(yf)

    # Hash the four corners. Index 256 duplicates index 0, so xi + 1 and a + 1 stay in range.
    a = (p[xi] + yi) & C.PERMUTATION_MASK
    b = (p[xi + 1] + yi) & C.PERMUTATION_MASK

    g00 = gradient(p[a], xf, yf)
    g10 = gradient(p[b], xf - 1, yf)
    g01 = gradient(p[a + 1], xf, yf - 1)
    g11 = gradient(p[b + 1], xf - 1, yf - 1)

    # Interpolate along x, then along y
    x1 = lerp(u, g00, g10)
    x2 = lerp(u, g01, g11)
    return lerp(v, x1, x2)

def fractal_brownian_motion(x, y, octaves, p):
    """
    Sum `octaves` layers of Perlin noise. Each layer doubles the frequency and
    halves the amplitude of the one before. The sum is not renormalised.
    """
    x = np.asarray(x, dtype=np.float32)
    y = np.asarray(y, dtype=np.float32)

    total_noise = np.zeros(np.broadcast(x, y).shape, dtype=np.float32)
    amplitude = np.float32(C.NOISE_BASE_AMPLITUDE)
    frequency = np.float32(C.NOISE_BASE_FREQUENCY)
    persistence = np.float32(C.NOISE_PERSISTENCE)
    lacunarity = np.float32(C.NOISE_LACUNARITY)

    for _ in range(octaves):
        total_noise += amplitude * perlin_noise_2d(x * frequency, y * frequency, p)
        amplitude *= persistence
        frequency *= lacunarity

    return total_noise

def lerp(t, a, b):
    "Linear interpolation."
    return a + t * (b - a)

def fade(t):
    "6t^5 - 15t^4 + 10t^3"
    return t * t * t * (t * (t * 6 - 15) + 10)

def gradient(h, x, y):
    """Picks one of the four axis gradients with h & 3 and returns its dot product with (x, y)."""
    g = GRADIENT_VECTORS[h & 3]
    return g[..., 0] * x + g[..., 1] * y
