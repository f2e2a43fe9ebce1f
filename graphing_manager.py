# graphing_manager.py

import os
import numpy as np
import matplotlib.pyplot as plt
import logger as log
import constants as C
from rasterizer import band_index

class GraphingManager:
    """
    Collects the intensity of every rendered pixel and plots the
    distribution, with the terrain band thresholds marked, after the render.
    """
    def __init__(self, bands=C.TERRAIN_BANDS, band_names=C.TERRAIN_BAND_NAMES):
        self.bands = bands
        self.band_names = band_names
        self.counts = np.zeros(256, dtype=np.int64)
        log.log("GraphingManager initialized.")

    def add_strip(self, intensities):
        """
        Adds one strip of uint8 intensities to the running histogram.
        """
        flat = np.asarray(intensities, dtype=np.uint8).ravel()
        self.counts += np.bincount(flat, minlength=256)

    def has_data(self):
        return int(self.counts.sum()) > 0

    def band_fractions(self):
        """
        Returns {band name: fraction of pixels} for every band.
        """
        total = int(self.counts.sum())
        per_band = np.bincount(band_index(np.arange(256), self.bands), weights=self.counts, minlength=len(self.bands))
        if total == 0:
            return {name: 0.0 for name in self.band_names}
        return {name: float(count) / total for name, count in zip(self.band_names, per_band)}

    def generate_and_save_histogram(self, file_path=C.DEFAULT_HISTOGRAM_PATH):
        """
        Uses matplotlib to generate and save a bar chart of pixel intensities.
        Returns True if the file was written.
        """
        if not self.has_data():
            log.log("[GraphingManager] No data collected, skipping histogram.")
            return False

        log.log(f"[GraphingManager] Generating intensity histogram from {int(self.counts.sum()):,} pixels...")

        fig, ax = plt.subplots(figsize=C.HISTOGRAM_FIGURE_SIZE)
        ax.bar(np.arange(256), self.counts, width=1.0, color='tab:purple', label='Pixels')

        # Mark where each band ends
        fractions = self.band_fractions()
        for (upper, _), name, color in zip(self.bands, self.band_names, C.HISTOGRAM_BAND_COLORS):
            ax.axvline(upper + 0.5, color=color, linestyle='--', linewidth=0.8, label=f'{name} <= {upper} ({fractions[name]:.1%})')

        ax.set_title('Terrain Intensity Distribution')
        ax.set_xlabel('Intensity (0-255)')
        ax.set_ylabel('Pixel Count')
        ax.set_xlim(-0.5, 255.5)
        ax.grid(True, which='both', linestyle='--', linewidth=0.5)
        ax.legend()

        fig.tight_layout()

        try:
            directory = os.path.dirname(file_path)
            if directory:
                os.makedirs(directory, exist_ok=True)
            fig.savefig(file_path)
            log.log(f"[GraphingManager] Intensity histogram saved to {file_path}")
            return True
        except Exception as e:
            log.log(f"[GraphingManager] ERROR: Could not save intensity histogram. Reason: {e}")
            return False
        finally:
            plt.close(fig)
