import time
from typing import Optional

from particle import *

# Named configurations of the same particle: with or without aging, with or
# without a trail. Values are the keyword arguments of create_simulation().
PRESETS = {
    "basic": dict(
        lifespan=None,
        track_trail=False,
        dt=DT,
        max_steps=100,
    ),
    "aging": dict(
        lifespan=LIFESPAN,
        track_trail=False,
        dt=DT,
        max_steps=100,
    ),
    "short-lived": dict(
        lifespan=2.0,
        track_trail=False,
        dt=0.1,
        max_steps=None,
    ),
    "trail": dict(
        velocity=(4.0, 12.0),
        lifespan=2.5,
        track_trail=True,
        dt=0.1,
        max_steps=None,
        render=True,
        frame_delay=0.05,
    ),
}


class Simulation:
    """Loop principal: step, log y render de una sola partícula"""

    def __init__(
        self,
        particle: Particle,
        force=None,
        dt: float = DT,
        max_steps: Optional[int] = 100,
        renderer=None,
        frame_delay: float = 0.0,
        verbose: bool = True,
    ):
        if dt <= 0.0:
            raise ValueError(f"dt must be positive, got {dt}")
        if max_steps is not None and max_steps < 0:
            raise ValueError(f"max_steps must not be negative, got {max_steps}")
        if max_steps is None and not particle.has_lifecycle:
            # Without aging nothing would ever stop the loop
            raise ValueError("max_steps is required for a particle without lifespan")

        self.particle = particle
        # Gravity acting on the particle mass
        self.force = tuple(force) if force is not None else (0.0, GRAVITY * particle.mass)
        self.dt = dt
        self.max_steps = max_steps
        self.renderer = renderer
        self.frame_delay = frame_delay
        self.verbose = verbose
        self.steps_taken = 0

    @property
    def finished(self) -> bool:
        if self.particle.is_dead:
            return True
        return self.max_steps is not None and self.steps_taken >= self.max_steps

    def step(self):
        if self.particle.is_dead:
            return

        self.particle.step(self.force[0], self.force[1], self.dt)
        self.steps_taken += 1

        if self.verbose:
            print(format_state(self.particle.position, self.particle.velocity))

        if self.renderer is not None:
            self.renderer.render(self.particle.snapshot())

            # Solo para que la animación se vea a velocidad humana
            if self.frame_delay > 0:
                time.sleep(self.frame_delay)

    def run(self) -> int:
        """Ejecutar hasta que la partícula muera o se agoten los pasos"""
        start = self.steps_taken
        while not self.finished:
            self.step()
        return self.steps_taken - start


def create_simulation(name: str = "basic", renderer=None, verbose: bool = True, **overrides):
    """Crear una simulación a partir de un preset

    Any preset value can be overridden by keyword (position, velocity, mass,
    lifespan, color, track_trail, dt, max_steps, frame_delay, force). A
    renderer is only attached when one is given.
    """
    if name not in PRESETS:
        raise ValueError(f"Unknown preset '{name}'. Choose from: {', '.join(PRESETS)}")

    config = dict(PRESETS[name])
    config.update(overrides)

    particle = Particle(
        position=config.get("position"),
        velocity=config.get("velocity"),
        mass=config.get("mass", MASS),
        lifespan=config.get("lifespan"),
        color=config.get("color", COLOR),
        track_trail=config.get("track_trail", False),
    )

    return Simulation(
        particle,
        force=config.get("force"),
        dt=config.get("dt", DT),
        max_steps=config.get("max_steps"),
        renderer=renderer,
        frame_delay=config.get("frame_delay", 0.0) if renderer is not None else 0.0,
        verbose=verbose,
    )
