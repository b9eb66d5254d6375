"""Terrain mesh built from a grid of heights."""

from __future__ import annotations

from PIL import Image

from .mesh import Mesh
from .vectors import Vector2, Vector3

_VERTEX_SCALE = Vector3(16.0, 1.0, 16.0)
_TEXTURE_SCALE = Vector2(1.0 / 16.0, 1.0 / 16.0)


class HeightMap(Mesh):
    """Indexed triangle grid whose vertex heights come from 0-255 samples."""

    def __init__(self, heights, width: int, height: int):
        super().__init__()
        heights = [float(h) for h in heights]
        if width < 1 or height < 1 or len(heights) != width * height:
            raise ValueError("heights must hold width * height samples")

        self.vertices = [
            Vector3(x, heights[z * width + x], z) * _VERTEX_SCALE
            for z in range(height)
            for x in range(width)
        ]
        self.texture_coords = [
            Vector2(x, z) * _TEXTURE_SCALE
            for z in range(height)
            for x in range(width)
        ]

        indices = []
        for z in range(height - 1):
            for x in range(width - 1):
                a = z * width + x
                b = a + 1
                c = a + width + 1
                d = a + width
                indices.extend((a, c, b, c, a, d))
        self.indices = indices

        self.generate_normals()
        self.generate_tangents()

        self.heightmap_size = Vector3(
            _VERTEX_SCALE.x * (width - 1),
            _VERTEX_SCALE.y * 255.0,
            _VERTEX_SCALE.z * (height - 1),
        )

    @staticmethod
    def from_image(path) -> HeightMap:
        """Build a height map from an image, using its grey levels as heights."""
        with Image.open(path) as image:
            grey = image.convert("L")
            width, height = grey.size
            data = list(grey.tobytes())
        return HeightMap(data, width, height)