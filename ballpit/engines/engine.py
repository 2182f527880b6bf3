class InteractionEngine:
    """
    One step of particle interaction, applied to a Simulation.

    Subclasses own the per-mode rules: how accelerations are accumulated, how
    particles are integrated and which pairwise effects run afterwards.
    """
    mass_model = "square"

    def __init__(self, config):
        self.config = config

    def step(self, simulation):
        raise NotImplementedError("Subclasses should implement this method.")

    def populate(self, simulation):
        """Create the initial particle set. Engines that start empty do nothing."""
        pass

    def on_pointer_press(self, simulation):
        pass

    def on_pointer_release(self, simulation):
        pass

    def on_resize(self, simulation):
        pass

    def reinitialize(self, simulation, particle):
        """Restore a particle whose state went non-finite."""
        raise NotImplementedError("Subclasses should implement this method.")

    def __repr__(self):
        return f"<{self.__class__.__name__} config={self.config}>"

    def __str__(self):
        return self.__repr__()
