#ui.py

import pygame
import constants as C
from image_sink import make_surface

def preview_window_size(width, height):
    """Scales the image size down so the longest side fits the preview window."""
    longest_side = max(width, height, 1)
    scale = min(1.0, C.PREVIEW_MAX_WINDOW_SIZE / longest_side)
    return max(1, int(width * scale)), max(1, int(height * scale))

def open_preview_window(width, height):
    pygame.init()
    screen = pygame.display.set_mode(preview_window_size(width, height))
    pygame.display.set_caption(C.PREVIEW_CAPTION)
    font = pygame.font.Font(None, C.UI_FONT_SIZE)
    return screen, font

def draw_loading_screen(screen, font, progress, total):
    """Draws a progress bar and loading text."""
    screen.fill(C.COLOR_BLACK)
    center_x = screen.get_width() / 2
    center_y = screen.get_height() / 2

    # Render text
    text_surface = font.render("Rendering Terrain...", True, C.COLOR_WHITE)
    text_rect = text_surface.get_rect(center=(center_x, center_y - C.UI_LOADING_TEXT_OFFSET_Y))
    screen.blit(text_surface, text_rect)

    # Draw progress bar, never wider than the window
    bar_width = min(C.UI_LOADING_BAR_WIDTH, screen.get_width())
    bar_height = C.UI_LOADING_BAR_HEIGHT
    bar_x = center_x - bar_width / 2
    bar_y = center_y - bar_height / 2

    progress_ratio = progress / total if total else 1.0
    current_bar_width = bar_width * progress_ratio

    # Background of the bar
    pygame.draw.rect(screen, C.COLOR_LOADING_BAR_BG, (bar_x, bar_y, bar_width, bar_height))
    # Foreground of the bar
    pygame.draw.rect(screen, C.COLOR_LOADING_BAR_FG, (bar_x, bar_y, current_bar_width, bar_height))

    pygame.display.flip()

def show_image(screen, pixels, width, height):
    """Displays the finished image until the window is closed or a key is pressed."""
    image = make_surface(pixels, width, height)
    scaled = pygame.transform.scale(image, screen.get_size())
    clock = pygame.time.Clock()

    running = True
    while running:
        for event in pygame.event.get():
            if event.type == pygame.QUIT or event.type == pygame.KEYDOWN:
                running = False
        screen.blit(scaled, (0, 0))
        pygame.display.flip()
        clock.tick(C.PREVIEW_FPS)
