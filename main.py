import logging
from multiprocessing import Manager, Process

import pygame

import gui_controller as gui_ctrl
from ballpit import constants, render
from ballpit.config import ElasticConfig, Toggles
from ballpit.constants import FPS, HEIGHT, WHITE, WIDTH
from ballpit.simulation import Simulation

logger = logging.getLogger("ballpit")


def handle_event(event, sim, shared):
    """Feed one pygame event to the simulation. Returns False to quit."""
    if event.type == pygame.QUIT:
        return False
    elif event.type == pygame.VIDEORESIZE:
        sim.resize(event.w, event.h)
    elif event.type == pygame.MOUSEMOTION:
        mx, my = event.pos
        sim.move_pointer(mx, my)
    elif event.type == pygame.WINDOWLEAVE:
        sim.leave_pointer()
    elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
        mx, my = event.pos
        sim.move_pointer(mx, my)
        shared['use_color'] = not sim.toggles.use_color
        logger.debug("use_color=%s", shared['use_color'])
    elif event.type == pygame.KEYDOWN:
        if event.key == pygame.K_ESCAPE:
            return False
        elif event.key == pygame.K_SPACE:
            shared['toggle_pause'] = True
        elif event.key == pygame.K_c:
            shared['collisions'] = not sim.toggles.collisions
        elif event.key == pygame.K_d:
            shared['damping'] = not sim.toggles.damping
        elif event.key == pygame.K_t:
            shared['trails'] = not sim.toggles.trails
        elif event.key == pygame.K_r:
            shared['reset_world'] = True
    return True


def sync_from_gui(sim, shared):
    """Apply toggle values written by either the GUI process or the key handlers."""
    for name in gui_ctrl.TOGGLES:
        setattr(sim.toggles, name, bool(shared.get(name, getattr(sim.toggles, name))))
    if shared.get('toggle_pause', False):
        sim.toggle_pause()
        shared['toggle_pause'] = False
    if shared.get('reset_world', False):
        sim.reset()
        shared['reset_world'] = False
    if shared.get('__exit__', False):
        sim.stop()
    shared['paused'] = sim.paused
    shared['particle_count'] = len(sim.particles)


def main():
    logging.basicConfig(level=logging.DEBUG if constants.DEBUG else logging.INFO,
                        format="%(asctime)s %(levelname)s %(name)s: %(message)s")

    pygame.init()
    screen = pygame.display.set_mode((WIDTH, HEIGHT), pygame.RESIZABLE)
    pygame.display.set_caption("Pretty Balls")
    clock = pygame.time.Clock()
    font = pygame.font.Font(None, 32)

    sim = Simulation(ElasticConfig(), WIDTH, HEIGHT, toggles=Toggles(trails=False))

    # spawn DearPyGui controller process (protected inside main)
    _mgr = Manager()
    _shared = _mgr.dict()
    for name in gui_ctrl.TOGGLES:
        _shared[name] = getattr(sim.toggles, name)
    _shared['toggle_pause'] = False
    _shared['reset_world'] = False
    _shared['__exit__'] = False
    _gui_proc = Process(target=gui_ctrl.run_gui, args=(_shared,), daemon=True)
    _gui_proc.start()

    while sim.running:
        for event in pygame.event.get():
            if not handle_event(event, sim, _shared):
                sim.stop()

        sync_from_gui(sim, _shared)

        # --- Update ---
        sim.update()

        # --- Draw ---
        render.fade(screen, sim.toggles.trails)
        views = sim.snapshot()
        render.draw_tethers(screen, views, sim.pointer.position, sim.toggles.use_color)
        render.draw_particles(screen, views, sim.toggles.use_color, sim.toggles.draw_collisions)

        if sim.paused:
            pause_text = font.render("PAUSED", True, WHITE)
            screen.blit(pause_text, (sim.width - pause_text.get_width() - 10, 10))

        pygame.display.flip()
        clock.tick(FPS)

    # cleanup: signal GUI to exit and join
    _shared['__exit__'] = True
    _gui_proc.join(timeout=1.0)

    pygame.quit()


if __name__ == "__main__":
    main()
