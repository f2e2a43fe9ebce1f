# constants.py

# =============================================================================
# --- RENDER DEFAULTS ---
# =============================================================================
DEFAULT_IMAGE_WIDTH = 1024
DEFAULT_IMAGE_HEIGHT = 1024
DEFAULT_OCTAVES = 8
DEFAULT_OUTPUT_PATH = "outputs/test.png"
DEFAULT_HISTOGRAM_PATH = "outputs/intensity_histogram.png"

# Rows are rendered in horizontal strips so progress can be reported.
RENDER_STRIP_ROWS = 64
RENDER_LOG_INTERVAL_STRIPS = 4

BYTES_PER_PIXEL = 4
OPAQUE_ALPHA = 255

# =============================================================================
# --- NOISE ---
# =============================================================================
# These control the macro feature size and the detail falloff of the terrain.
# Changing any of them changes every image produced for a given seed.
NOISE_BASE_AMPLITUDE = 1.0
NOISE_BASE_FREQUENCY = 0.005
NOISE_PERSISTENCE = 0.5 # Amplitude multiplier per octave
NOISE_LACUNARITY = 2.0 # Frequency multiplier per octave

PERMUTATION_SIZE = 256
PERMUTATION_MASK = PERMUTATION_SIZE - 1

# Only the four axis-aligned directions are used, selected by hash & 3.
GRADIENT_DIRECTIONS = ((0, 1), (0, -1), (1, 0), (-1, 0))

# =============================================================================
# --- PRNG (xoshiro256++ seeded by SplitMix64) ---
# =============================================================================
SEED_MASK = 0xFFFFFFFFFFFFFFFF
SPLITMIX_INCREMENT = 0x9E3779B97F4A7C15
SPLITMIX_MULTIPLIER_1 = 0xBF58476D1CE4E5B9
SPLITMIX_MULTIPLIER_2 = 0x94D049BB133111EB
XOSHIRO_STATE_WORDS = 4

# =============================================================================
# --- TERRAIN COLOR BANDS ---
# =============================================================================
# Each band: (highest intensity it covers, ((scale, offset) per R, G, B, A)).
# A channel is (scale * intensity + offset) modulo 256. Bands are tested in
# order and the first whose upper bound is >= intensity wins.
BAND_WATER_MAX = 100
BAND_SHORE_MAX = 140
BAND_GRASS_MAX = 210
BAND_SNOW_MAX = 255

TERRAIN_BANDS = (
    (BAND_WATER_MAX, ((0, 67), (1, 65), (1, 155), (0, OPAQUE_ALPHA))),
    (BAND_SHORE_MAX, ((1, 60), (1, 0), (0, 44), (0, OPAQUE_ALPHA))),
    (BAND_GRASS_MAX, ((0, 92), (1, 45), (0, 36), (0, OPAQUE_ALPHA))),
    (BAND_SNOW_MAX, ((0, 244), (0, 249), (0, 255), (0, OPAQUE_ALPHA))),
)
TERRAIN_BAND_NAMES = ("water", "shore", "grass", "snow")

# =============================================================================
# --- UI (preview window) ---
# =============================================================================
PREVIEW_MAX_WINDOW_SIZE = 800
PREVIEW_CAPTION = "Terrain Noise Preview"
PREVIEW_FPS = 30
UI_FONT_SIZE = 36
UI_LOADING_TEXT_OFFSET_Y = 50
UI_LOADING_BAR_WIDTH = 400
UI_LOADING_BAR_HEIGHT = 30
COLOR_WHITE = (255, 255, 255)
COLOR_BLACK = (0, 0, 0)
COLOR_LOADING_BAR_BG = (50, 50, 50); COLOR_LOADING_BAR_FG = (100, 200, 100)

# =============================================================================
# --- INTENSITY HISTOGRAM ---
# =============================================================================
HISTOGRAM_FIGURE_SIZE = (12, 7)
# Matplotlib colors for the band threshold markers, in band order.
HISTOGRAM_BAND_COLORS = ("tab:blue", "tab:orange", "tab:green", "tab:gray")

MILLISECONDS_PER_SECOND = 1000.0
SECONDS_PER_MINUTE = 60
PROFILER_PRINT_LINE_COUNT = 20
