"""
pygame drawing for Simulation.snapshot() output.

Alpha is emulated by blending toward the black background, so everything here
draws onto a plain display surface.
"""
import pygame

from . import constants


def blend(rgb, alpha, background=constants.BLACK):
    """Colour `rgb` drawn at opacity `alpha` over `background`."""
    alpha = max(0.0, min(1.0, alpha))
    return tuple(int(round(b + (c - b) * alpha)) for c, b in zip(rgb, background))


def fade(screen, trails=True):
    """Clear the frame; with trails only darken it so old frames linger."""
    if not trails:
        screen.fill(constants.BLACK)
        return
    veil = pygame.Surface(screen.get_size())
    veil.set_alpha(constants.TRAIL_ALPHA)
    veil.fill(constants.BLACK)
    screen.blit(veil, (0, 0))


def draw_particles(screen, views, use_color=True, draw_collisions=False, alpha=1.0):
    """Helper to draw all particles of a snapshot."""
    for v in views:
        if use_color:
            fill, stroke = v.fill, v.stroke
        else:
            fill = stroke = constants.WHITE
        # collision colour-coding is only visible in monochrome mode
        if draw_collisions and v.colliding and not use_color:
            fill = constants.RED
        center = (int(v.x), int(v.y))
        radius = max(1, int(round(v.radius)))
        pygame.draw.circle(screen, blend(fill, alpha), center, radius)
        pygame.draw.circle(screen, blend(stroke, alpha), center, radius, 1)


def draw_tethers(screen, views, pointer_pos, use_color=True):
    """Lines from each particle to the pointer, faded by the falloff value."""
    if pointer_pos is None:
        return
    target = (int(pointer_pos.x), int(pointer_pos.y))
    for v in views:
        if v.tether_alpha == 0.0:
            continue
        color = v.stroke if use_color else constants.RED
        pygame.draw.line(screen, blend(color, v.tether_alpha), (int(v.x), int(v.y)), target, 1)


def draw_center_of_mass(screen, com, size=constants.CENTER_OF_MASS_SIZE):
    half = size / 2
    x, y = com.x, com.y
    pygame.draw.line(screen, constants.CENTER_OF_MASS_COLOR, (x + half, y + half), (x - half, y - half), 1)
    pygame.draw.line(screen, constants.CENTER_OF_MASS_COLOR, (x - half, y + half), (x + half, y - half), 1)
