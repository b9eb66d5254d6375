"""Mesh material descriptions read from MeshMat text files."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

from .mesh import MeshFormatError, _Reader


@dataclass
class MeshMaterialEntry:
    """Channel-to-file mapping for one material, e.g. Diffuse -> bark.png."""

    entries: dict[str, str] = field(default_factory=dict)

    def entry(self, name: str) -> str | None:
        """File for a channel, or None if the material has no such channel."""
        return self.entries.get(name)


@dataclass
class MeshMaterial:
    """Materials and the material used by each mesh layer."""

    material_layers: list[MeshMaterialEntry] = field(default_factory=list)
    mesh_layers: list[MeshMaterialEntry] = field(default_factory=list)

    @staticmethod
    def load(path) -> MeshMaterial:
        """Read a MeshMat text file."""
        reader = _Reader(Path(path).read_text())

        if reader.token() != "MeshMat":
            raise MeshFormatError(f"file {path} is not a MeshMaterial")
        version = reader.int()
        if version != 1:
            raise MeshFormatError(f"file {path} has incompatible version {version}")

        mat_count = reader.int()
        mesh_count = reader.int()
        reader.line()

        materials = []
        for _ in range(mat_count):
            reader.line()  # material name
            count = reader.int()
            reader.line()
            material = MeshMaterialEntry()
            for _ in range(count):
                line = reader.line()
                channel, sep, filename = line.partition(":")
                if not sep:
                    filename = line
                material.entries.setdefault(channel, filename)
            materials.append(material)

        layers = []
        for _ in range(mesh_count):
            index = reader.int()
            if not 0 <= index < len(materials):
                raise MeshFormatError(f"material index {index} out of range")
            layers.append(materials[index])
        return MeshMaterial(materials, layers)

    def material_for_layer(self, index: int) -> MeshMaterialEntry:
        """Material of a mesh layer; raises IndexError if out of range."""
        if not 0 <= index < len(self.mesh_layers):
            raise IndexError("mesh layer out of range")
        return self.mesh_layers[index]