from collections import deque
from dataclasses import dataclass
from typing import Optional, Tuple

import numpy as np

from utils import *

# CONSTANTS
# Gravedad en m/s² (eje y hacia arriba)
GRAVITY = -9.81
# Physics time step (10 ms)
DT = 0.01
# Particle Default Mass
MASS = 1.0
# Particle Default Life (seconds)
LIFESPAN = 20.0
# Max number of past positions kept for the trail
TRAIL_LENGTH = 50
# Default Color (red)
COLOR = (255, 0, 0)


class InvalidMassError(ValueError):
    """La masa de la partícula debe ser finita y mayor que cero"""

    def __init__(self, mass):
        super().__init__(f"Mass must be finite and greater than zero, got {mass!r}")
        self.mass = mass


@dataclass(frozen=True)
class ParticleSnapshot:
    """Vista de solo lectura del estado de una partícula"""

    position: Tuple[float, float]
    velocity: Tuple[float, float]
    trail: Tuple[Tuple[float, float], ...]
    color: Tuple[int, int, int]
    age: float
    lifespan: Optional[float]
    is_dead: bool

    @property
    def remaining_life(self) -> Optional[float]:
        if self.lifespan is None:
            return None
        return max(self.lifespan - self.age, 0.0)


def check_mass(mass) -> float:
    try:
        mass = float(mass)
    except (TypeError, ValueError):
        raise InvalidMassError(mass) from None

    if not np.isfinite(mass) or mass <= 0.0:
        raise InvalidMassError(mass)

    return mass


class Particle:
    """Estructura de una partícula

    A single point mass integrated with semi-implicit Euler. Aging and the
    trail of past positions are optional: ``lifespan=None`` gives a particle
    that never dies, ``track_trail=False`` one that keeps no history.
    """

    def __init__(
        self,
        position: np.ndarray = None,
        velocity: np.ndarray = None,
        mass: float = MASS,
        lifespan: Optional[float] = LIFESPAN,
        color: Tuple[int, int, int] = None,
        track_trail: bool = False,
        trail_length: int = TRAIL_LENGTH,
    ):
        self.position = as_vector(position) if position is not None else default_position()
        self.velocity = as_vector(velocity) if velocity is not None else default_velocity()
        self.mass = check_mass(mass)
        self.lifespan = float(lifespan) if lifespan is not None else None
        self.age = 0.0
        self.is_dead = False
        self._color = check_color(color) if color is not None else default_color()

        if trail_length < 1:
            raise ValueError(f"trail_length must be at least 1, got {trail_length}")
        self.track_trail = track_trail
        self.trail = deque(maxlen=trail_length)

    @property
    def color(self) -> Tuple[int, int, int]:
        return self._color

    @property
    def has_lifecycle(self) -> bool:
        return self.lifespan is not None

    @property
    def has_trail(self) -> bool:
        return self.track_trail

    @property
    def is_alive(self) -> bool:
        return not self.is_dead

    @property
    def remaining_life(self) -> Optional[float]:
        if self.lifespan is None:
            return None
        return max(self.lifespan - self.age, 0.0)

    def step(self, force_x: float, force_y: float, dt: float):
        """Avanzar la simulación un paso de tiempo fijo"""
        check_mass(self.mass)

        if self.has_lifecycle:
            # Dead particles are frozen
            if self.is_dead:
                return

            # Update age, death is checked after the time advance
            self.age += dt
            if self.age >= self.lifespan:
                # No motion on the step where death is detected
                self.is_dead = True
                return

        if self.track_trail:
            # deque(maxlen) drops the oldest entry
            self.trail.append((float(self.position[0]), float(self.position[1])))

        # Compute acceleration (F = m*a)
        acceleration = np.array([force_x, force_y], dtype=np.float64) / self.mass

        # Update velocity first, then position with the new velocity
        self.velocity += acceleration * dt
        self.position += self.velocity * dt

    def snapshot(self) -> ParticleSnapshot:
        return ParticleSnapshot(
            position=(float(self.position[0]), float(self.position[1])),
            velocity=(float(self.velocity[0]), float(self.velocity[1])),
            trail=tuple(self.trail),
            color=self.color,
            age=self.age,
            lifespan=self.lifespan,
            is_dead=self.is_dead,
        )

    def __repr__(self):
        return (
            f"Particle(position={format_vector(self.position)}, "
            f"velocity={format_vector(self.velocity)}, mass={self.mass}, "
            f"age={self.age:.2f}, is_dead={self.is_dead})"
        )
