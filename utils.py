import numpy as np
import random


def get_random_color():
    return (
        random.randint(128, 255),
        random.randint(128, 255),
        random.randint(128, 255),
    )


def check_color(color):
    """Validar un color RGB (0-255 por canal)"""
    channels = tuple(color)
    if len(channels) != 3:
        raise ValueError(f"Color must have 3 channels (r, g, b), got {color!r}")

    for channel in channels:
        if int(channel) != channel or not 0 <= channel <= 255:
            raise ValueError(f"Color channels must be integers in 0..255, got {color!r}")

    return tuple(int(channel) for channel in channels)


def as_vector(values):
    a = np.array(values, dtype=np.float64)
    if a.shape != (2,):
        raise ValueError(f"Expected an (x, y) pair, got {values!r}")
    return a


def default_position():
    return np.array([0.0, 0.0], dtype=np.float64)


def default_velocity():
    return np.array([0.0, 0.0], dtype=np.float64)


def default_color():
    return get_random_color()


def format_vector(vector):
    return f"({vector[0]:.2f}, {vector[1]:.2f})"


def format_state(position, velocity):
    """Position: (x, y), Velocity: (vx, vy) con 2 decimales"""
    return f"Position: {format_vector(position)}, Velocity: {format_vector(velocity)}"
