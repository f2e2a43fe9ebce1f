#image_sink.py

import io
import os
import pygame
import constants as C
import logger as log

class ImageSinkError(Exception):
    """Base class for failures while persisting a rendered image."""

class EncodeError(ImageSinkError):
    """The pixel buffer could not be turned into an encoded image."""

class WriteError(ImageSinkError):
    """The encoded image could not be written to the file system."""

def make_surface(pixels, width, height):
    """Wraps a row-major RGBA buffer in a pygame Surface without copying it."""
    expected_length = width * height * C.BYTES_PER_PIXEL
    if len(pixels) != expected_length:
        raise EncodeError(f"Expected {expected_length} bytes for a {width}x{height} RGBA image, got {len(pixels)}.")
    try:
        return pygame.image.frombuffer(pixels, (width, height), "RGBA")
    except (pygame.error, ValueError) as e:
        raise EncodeError(f"Could not build a {width}x{height} surface: {e}") from e

def encode_png(surface):
    """Encodes a surface to PNG bytes in memory."""
    buffer = io.BytesIO()
    try:
        # The name hint only selects the encoder.
        pygame.image.save(surface, buffer, "image.png")
    except pygame.error as e:
        raise EncodeError(f"PNG encoding failed: {e}") from e
    return buffer.getvalue()

def write_png(path, pixels, width, height):
    """
    Saves an 8-bit RGBA buffer as a PNG file, creating the parent directory if needed.

    Raises:
        EncodeError: the buffer does not match the size, or encoding failed.
        WriteError: the directory or file could not be created or written.
    """
    surface = make_surface(pixels, width, height)
    encoded = encode_png(surface)

    # The destination is only touched once encoding has succeeded.
    directory = os.path.dirname(path)
    try:
        if directory:
            os.makedirs(directory, exist_ok=True)
        with open(path, "wb") as image_file:
            image_file.write(encoded)
    except OSError as e:
        raise WriteError(f"Could not write {path}: {e}") from e

    log.log(f"Image saved to {path} ({width}x{height} RGBA).")
