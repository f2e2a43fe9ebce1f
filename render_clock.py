#render_clock.py

import time
import constants as C

class RenderClock:
    """Tracks wall-clock time and row progress for a single render pass."""
    def __init__(self, total_rows, timer=time.perf_counter):
        self.timer = timer
        self.total_rows = total_rows
        self.rows_done = 0
        self.start_seconds = None
        self.end_seconds = None

    def start(self):
        self.start_seconds = self.timer()
        self.end_seconds = None

    def stop(self):
        if self.start_seconds is not None:
            self.end_seconds = self.timer()

    @property
    def is_running(self):
        return self.start_seconds is not None and self.end_seconds is None

    def advance(self, rows):
        """Records that another strip of rows has been rendered."""
        self.rows_done = min(self.total_rows, self.rows_done + rows)

    def elapsed_seconds(self):
        if self.start_seconds is None:
            return 0.0
        end = self.end_seconds if self.end_seconds is not None else self.timer()
        return end - self.start_seconds

    def progress_ratio(self):
        # An empty image is complete as soon as it starts.
        if self.total_rows <= 0:
            return 1.0
        return self.rows_done / self.total_rows

    def get_display_string(self):
        elapsed = self.elapsed_seconds()
        minutes = int(elapsed // C.SECONDS_PER_MINUTE)
        seconds = int(elapsed % C.SECONDS_PER_MINUTE)
        millis = int((elapsed * C.MILLISECONDS_PER_SECOND) % C.MILLISECONDS_PER_SECOND)

        time_str = f"{minutes:02d}:{seconds:02d}.{millis:03d}"
        percent = int(self.progress_ratio() * 100)
        return f"{time_str} | {percent:3d}%"
