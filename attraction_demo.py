import logging

import pygame

from ballpit import constants, render
from ballpit.Vector2 import Vector2
from ballpit.config import GravityConfig, Toggles
from ballpit.constants import FPS, HEIGHT, TRANSLATE_STEP, WHITE, WIDTH
from ballpit.simulation import Simulation

logger = logging.getLogger("ballpit")

# arrow keys move the view, i.e. the particles go the other way
PAN = {
    pygame.K_UP: Vector2(0, TRANSLATE_STEP),
    pygame.K_DOWN: Vector2(0, -TRANSLATE_STEP),
    pygame.K_LEFT: Vector2(TRANSLATE_STEP, 0),
    pygame.K_RIGHT: Vector2(-TRANSLATE_STEP, 0),
}


def main():
    logging.basicConfig(level=logging.DEBUG if constants.DEBUG else logging.INFO,
                        format="%(asctime)s %(levelname)s %(name)s: %(message)s")

    pygame.init()
    screen = pygame.display.set_mode((WIDTH, HEIGHT), pygame.RESIZABLE)
    pygame.display.set_caption("Attractive Balls")
    clock = pygame.time.Clock()
    font = pygame.font.Font(None, 28)

    sim = Simulation(GravityConfig(), WIDTH, HEIGHT, toggles=Toggles(trails=True))

    while sim.running:
        for ev in pygame.event.get():
            if ev.type == pygame.QUIT:
                sim.stop()
            elif ev.type == pygame.VIDEORESIZE:
                sim.resize(ev.w, ev.h)
            elif ev.type == pygame.MOUSEMOTION:
                sim.move_pointer(*ev.pos)
            elif ev.type == pygame.WINDOWLEAVE:
                sim.leave_pointer()
            elif ev.type == pygame.MOUSEBUTTONDOWN and ev.button == 1:
                sim.move_pointer(*ev.pos)
                sim.press_pointer()
            elif ev.type == pygame.MOUSEBUTTONUP and ev.button == 1:
                sim.release_pointer()
            elif ev.type == pygame.KEYDOWN:
                if ev.key == pygame.K_ESCAPE:
                    sim.stop()
                elif ev.key == pygame.K_SPACE:
                    sim.recentre_view()
                elif ev.key == pygame.K_c:
                    sim.toggles.recentre = not sim.toggles.recentre
                    logger.debug("recentre=%s", sim.toggles.recentre)
                elif ev.key == pygame.K_p:
                    sim.toggle_pause()
                elif ev.key in PAN:
                    sim.translate_view(PAN[ev.key])

        sim.update()

        render.fade(screen, sim.toggles.trails)
        views = sim.snapshot()
        render.draw_particles(screen, views, alpha=constants.PARTICLE_ALPHA)
        if sim.toggles.show_center_of_mass and views:
            render.draw_center_of_mass(screen, sim.center_of_mass)

        count_surf = font.render(f"Particles: {len(views)}", True, WHITE)
        screen.blit(count_surf, (10, sim.height - 30))

        pygame.display.flip()
        clock.tick(FPS)

    pygame.quit()


if __name__ == "__main__":
    main()
