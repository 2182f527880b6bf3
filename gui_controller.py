import time
import dearpygui.dearpygui as dpg

TOGGLES = ("use_color", "damping", "draw_collisions", "collisions", "trails")


def _make_callbacks(shared):
    def toggle_cb(sender, app_data, user_data):
        shared[user_data] = bool(app_data)
    def pause_cb():
        shared['toggle_pause'] = True
    def reset_cb():
        shared['reset_world'] = True
    def exit_cb():
        shared['__exit__'] = True
    return toggle_cb, pause_cb, reset_cb, exit_cb


def run_gui(shared):
    """
    Run DearPyGui in its own process. Writes toggle values into `shared`;
    the pygame loop reads them once per frame.
    """
    dpg.create_context()

    toggle_cb, pause_cb, reset_cb, exit_cb = _make_callbacks(shared)

    with dpg.window(label="Pretty Balls", tag="controls_window", width=320, height=300):
        dpg.add_text("Display")
        dpg.add_checkbox(label="Colour (attract)", tag="use_color", user_data="use_color",
                         default_value=bool(shared.get('use_color', True)), callback=toggle_cb)
        dpg.add_checkbox(label="Highlight collisions", tag="draw_collisions", user_data="draw_collisions",
                         default_value=bool(shared.get('draw_collisions', True)), callback=toggle_cb)
        dpg.add_checkbox(label="Trails", tag="trails", user_data="trails",
                         default_value=bool(shared.get('trails', False)), callback=toggle_cb)
        dpg.add_separator()
        dpg.add_text("Physics")
        dpg.add_checkbox(label="Damping", tag="damping", user_data="damping",
                         default_value=bool(shared.get('damping', True)), callback=toggle_cb)
        dpg.add_checkbox(label="Particle collisions", tag="collisions", user_data="collisions",
                         default_value=bool(shared.get('collisions', True)), callback=toggle_cb)
        dpg.add_separator()
        with dpg.group(horizontal=True):
            dpg.add_button(label="Pause / Toggle", callback=lambda s, a, u: pause_cb())
            dpg.add_button(label="Reset", callback=lambda s, a, u: reset_cb())
            dpg.add_button(label="Exit", callback=lambda s, a, u: exit_cb())
        dpg.add_spacer()
        dpg.add_text("Status:", tag="status_label")
        dpg.add_text("", tag="status_text")

    dpg.create_viewport(title='Pretty Balls Controls', width=340, height=320)
    dpg.set_primary_window("controls_window", True)
    dpg.setup_dearpygui()
    dpg.show_viewport()

    try:
        while not shared.get('__exit__', False) and dpg.is_dearpygui_running():
            # the pygame window can flip toggles too (click, keys); mirror them
            for name in TOGGLES:
                dpg.set_value(name, bool(shared.get(name, False)))
            status = f"particles={shared.get('particle_count', 0)}, paused={shared.get('paused', False)}"
            dpg.set_value("status_text", status)
            dpg.render_dearpygui_frame()
            time.sleep(0.01)
    finally:
        dpg.destroy_context()
