# logger.py

# This will hold a reference to the active render's RenderClock instance.
_render_clock = None

def set_render_clock(clock):
    """Sets the render clock the logger uses for timestamps. Pass None to detach."""
    global _render_clock
    _render_clock = clock

def log(message):
    """Prints a message with the render's elapsed time and progress if available."""
    # Check if a clock has been set and the render is actually under way.
    if _render_clock and _render_clock.start_seconds is not None:
        print(f"[{_render_clock.get_display_string()}] {message}")
    else:
        # For messages logged before or outside a render pass.
        print(f"[Render Start] {message}")
