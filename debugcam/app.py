from .world import World

STAGES = ('update', 'post_update')

class App:
    """
    A minimal frame scheduler.

    Systems are plain callables taking the `World`. Each frame runs every
    `update` system, then every `post_update` system, in insertion order,
    then drops the frame's input events.
    """
    def __init__(self, world: World = None):
        self.world = world if world is not None else World()
        self._systems = {stage: [] for stage in STAGES}

    def add_plugins(self, *plugins) -> 'App':
        for plugin in plugins:
            plugin.build(self)
        return self

    def add_systems(self, stage: str, *systems, run_if=None) -> 'App':
        if stage not in self._systems:
            raise ValueError(f"Unknown stage '{stage}'. Use one of {', '.join(STAGES)}.")
        conditions = () if run_if is None else (tuple(run_if) if isinstance(run_if, (list, tuple)) else (run_if,))
        for system in systems:
            self._systems[stage].append((system, conditions))
        return self

    def systems(self, stage: str) -> list:
        return [system for system, _ in self._systems[stage]]

    def update(self, delta_seconds: float):
        """Advances the clock by `delta_seconds` and runs one frame."""
        self.world.time.advance(delta_seconds)
        for stage in STAGES:
            for system, conditions in self._systems[stage]:
                if all(condition(self.world) for condition in conditions):
                    system(self.world)
        self.world.input.end_frame()
