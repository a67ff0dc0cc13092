import os
from typing import List, Optional, Tuple

import imageio
import numpy as np
import pygame
import pyrr

from particle import ParticleSnapshot

# Canvas size in pixels
WIDTH, HEIGHT = 800, 600
# World coordinate range drawn on the canvas (left, right, bottom, top)
BOUNDS = (-1.0, 11.0, -1.0, 8.0)
BACKGROUND = (20, 20, 30)
# Particle radius in pixels
RADIUS = 8
OUTPUT_DIR = "frames"


def blend(color, background, t):
    """Mezclar un color con el fondo (t=1 color puro, t=0 fondo)"""
    t = min(max(t, 0.0), 1.0)
    return tuple(int(round(b + (c - b) * t)) for c, b in zip(color, background))


class FrameRenderer:
    """Dibuja una partícula y su estela en imágenes PNG numeradas"""

    def __init__(
        self,
        output_dir: str = OUTPUT_DIR,
        width: int = WIDTH,
        height: int = HEIGHT,
        bounds: Tuple[float, float, float, float] = BOUNDS,
        background: Tuple[int, int, int] = BACKGROUND,
        radius: int = RADIUS,
        prefix: str = "frame",
        keep_frames: bool = False,
    ):
        if width <= 0 or height <= 0:
            raise ValueError(f"Canvas size must be positive, got {width}x{height}")

        left, right, bottom, top = bounds
        if left == right or bottom == top:
            raise ValueError(f"Coordinate range must not be empty, got {bounds}")

        self.output_dir = output_dir
        self.width = width
        self.height = height
        self.bounds = bounds
        self.background = background
        self.radius = radius
        self.prefix = prefix
        self.keep_frames = keep_frames

        self.frame_index = 0
        self.frame_paths: List[str] = []
        self.frames: List[np.ndarray] = []

        NEAR = -1.0
        FAR = 1.0

        # Matriz de proyección ortográfica
        self.projection = pyrr.matrix44.create_orthogonal_projection_matrix(
            left, right, bottom, top, NEAR, FAR, dtype=np.float64
        )

    def to_pixel(self, x: float, y: float) -> Tuple[float, float]:
        """Convertir coordenadas del mundo a píxeles (y hacia abajo)"""
        ndc = pyrr.matrix44.apply_to_vector(
            self.projection, np.array([x, y, 0.0], dtype=np.float64)
        )
        px = (ndc[0] + 1.0) * 0.5 * self.width
        py = (1.0 - ndc[1]) * 0.5 * self.height
        return float(px), float(py)

    def frame_path(self, index: int) -> str:
        return os.path.join(self.output_dir, f"{self.prefix}_{index:05d}.png")

    def draw(self, snapshot: ParticleSnapshot) -> pygame.Surface:
        surface = pygame.Surface((self.width, self.height))
        surface.fill(self.background)

        # Trail: oldest segments fade into the background
        points = [self.to_pixel(x, y) for x, y in snapshot.trail]
        points.append(self.to_pixel(*snapshot.position))
        segments = len(points) - 1
        for i in range(segments):
            color = blend(snapshot.color, self.background, (i + 1) / segments)
            pygame.draw.line(surface, color, points[i], points[i + 1], 2)

        # Particle fades as it ages
        if snapshot.is_dead:
            strength = 0.3
        elif snapshot.lifespan:
            strength = 0.3 + 0.7 * snapshot.remaining_life / snapshot.lifespan
        else:
            strength = 1.0

        pygame.draw.circle(
            surface,
            blend(snapshot.color, self.background, strength),
            points[-1],
            self.radius,
        )
        return surface

    def render(self, snapshot: ParticleSnapshot) -> str:
        """Dibujar y guardar un frame, devuelve la ruta del archivo"""
        surface = self.draw(snapshot)

        os.makedirs(self.output_dir, exist_ok=True)
        path = self.frame_path(self.frame_index)
        pygame.image.save(surface, path)

        if self.keep_frames:
            # Pygame uses (width,height), GIF needs (height,width)
            frame = np.transpose(pygame.surfarray.array3d(surface), (1, 0, 2))
            self.frames.append(frame)

        self.frame_paths.append(path)
        self.frame_index += 1
        return path

    def save_animation(self, path: str, fps: float = 30) -> Optional[str]:
        """Guardar los frames acumulados como GIF animado"""
        if not self.keep_frames:
            raise RuntimeError("FrameRenderer was created with keep_frames=False")

        if not self.frames:
            return None

        directory = os.path.dirname(path)
        if directory:
            os.makedirs(directory, exist_ok=True)

        imageio.mimsave(path, self.frames, duration=1000.0 / fps, loop=0)
        return path
