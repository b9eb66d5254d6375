"""Triangle mesh geometry and the MeshGeometry text file format."""

from __future__ import annotations

import enum
from dataclasses import dataclass
from pathlib import Path

from .matrix2 import Matrix2
from .matrix4 import Matrix4
from .vectors import Vector2, Vector3, Vector4


class MeshFormatError(ValueError):
    """Raised when a mesh file is malformed."""


class PrimitiveType(enum.Enum):
    POINTS = "points"
    TRIANGLES = "triangles"
    TRIANGLE_STRIP = "triangle_strip"


class GeometryChunk(enum.IntEnum):
    V_POSITIONS = 1
    V_NORMALS = 2
    V_TANGENTS = 4
    V_COLORS = 8
    V_TEX0 = 16
    V_TEX1 = 32
    V_WEIGHT_VALUES = 64
    V_WEIGHT_INDICES = 128
    INDICES = 256
    JOINT_NAMES = 512
    JOINT_PARENTS = 1024
    BIND_POSE = 2048
    BIND_POSE_INV = 4096
    SUB_MESHES = 1 << 14
    SUB_MESH_NAMES = 1 << 15
    MATERIAL = 65536


@dataclass(frozen=True)
class SubMesh:
    """A run of indices (or vertices) drawn as one layer."""

    start: int
    count: int


class _Reader:
    """Whitespace token reader that can also consume whole lines."""

    def __init__(self, text: str):
        self._text = text
        self._pos = 0

    def token(self) -> str:
        text, pos = self._text, self._pos
        while pos < len(text) and text[pos].isspace():
            pos += 1
        if pos >= len(text):
            raise MeshFormatError("unexpected end of file")
        end = pos
        while end < len(text) and not text[end].isspace():
            end += 1
        self._pos = end
        return text[pos:end]

    def int(self) -> int:
        tok = self.token()
        try:
            return int(tok)
        except ValueError:
            raise MeshFormatError(f"expected an integer, found {tok!r}") from None

    def float(self) -> float:
        tok = self.token()
        try:
            return float(tok)
        except ValueError:
            raise MeshFormatError(f"expected a number, found {tok!r}") from None

    def floats(self, count: int) -> list[float]:
        return [self.float() for _ in range(count)]

    def line(self) -> str:
        end = self._text.find("\n", self._pos)
        if end == -1:
            line = self._text[self._pos:]
            self._pos = len(self._text)
        else:
            line = self._text[self._pos:end]
            self._pos = end + 1
        return line.rstrip("\r")


class Mesh:
    """Vertex data for a mesh, with optional skinning and sub-mesh layers."""

    def __init__(self):
        self.type = PrimitiveType.TRIANGLES
        self.vertices: list[Vector3] = []
        self.colours: list[Vector4] = []
        self.texture_coords: list[Vector2] = []
        self.normals: list[Vector3] = []
        self.tangents: list[Vector4] = []
        self.weights: list[Vector4] = []
        self.weight_indices: list[tuple[int, int, int, int]] = []
        self.indices: list[int] = []
        self.bind_pose: list[Matrix4] = []
        self.inverse_bind_pose: list[Matrix4] = []
        self.joint_names: list[str] = []
        self.joint_parents: list[int] = []
        self.mesh_layers: list[SubMesh] = []
        self.layer_names: list[str] = []

    @property
    def num_vertices(self) -> int:
        return len(self.vertices)

    @property
    def num_indices(self) -> int:
        return len(self.indices)

    @staticmethod
    def generate_triangle() -> Mesh:
        m = Mesh()
        m.vertices = [
            Vector3(0.0, 0.5, 0.0),
            Vector3(0.5, -0.5, 0.0),
            Vector3(-0.5, -0.5, 0.0),
        ]
        m.texture_coords = [
            Vector2(0.5, 0.0),
            Vector2(1.0, 1.0),
            Vector2(0.0, 1.0),
        ]
        m.colours = [
            Vector4(1.0, 0.0, 0.0, 1.0),
            Vector4(0.0, 1.0, 0.0, 1.0),
            Vector4(0.0, 0.0, 1.0, 1.0),
        ]
        m.generate_normals()
        m.generate_tangents()
        return m

    @staticmethod
    def generate_quad() -> Mesh:
        m = Mesh()
        m.type = PrimitiveType.TRIANGLE_STRIP
        m.vertices = [
            Vector3(-1.0, 1.0, 0.0),
            Vector3(-1.0, -1.0, 0.0),
            Vector3(1.0, 1.0, 0.0),
            Vector3(1.0, -1.0, 0.0),
        ]
        m.texture_coords = [
            Vector2(0.0, 1.0),
            Vector2(0.0, 0.0),
            Vector2(1.0, 1.0),
            Vector2(1.0, 0.0),
        ]
        m.colours = [Vector4(1.0, 1.0, 1.0, 1.0) for _ in range(4)]
        m.normals = [Vector3(0.0, 0.0, -1.0) for _ in range(4)]
        m.tangents = [Vector4(1.0, 0.0, 0.0, 1.0) for _ in range(4)]
        return m

    @staticmethod
    def load(path) -> Mesh:
        """Read a MeshGeometry text file."""
        reader = _Reader(Path(path).read_text())

        if reader.token() != "MeshGeometry":
            raise MeshFormatError("file is not a MeshGeometry file")
        if reader.int() != 1:
            raise MeshFormatError("MeshGeometry file has incompatible version")

        num_meshes = reader.int()
        num_vertices = reader.int()
        num_indices = reader.int()
        num_chunks = reader.int()

        mesh = Mesh()

        def vec2s():
            return [Vector2(*reader.floats(2)) for _ in range(num_vertices)]

        def vec3s():
            return [Vector3(*reader.floats(3)) for _ in range(num_vertices)]

        def vec4s():
            return [Vector4(*reader.floats(4)) for _ in range(num_vertices)]

        def matrices():
            count = reader.int()
            return [Matrix4(reader.floats(16)) for _ in range(count)]

        for _ in range(num_chunks):
            chunk = reader.int()
            if chunk == GeometryChunk.V_POSITIONS:
                mesh.vertices.extend(vec3s())
            elif chunk == GeometryChunk.V_COLORS:
                mesh.colours.extend(vec4s())
            elif chunk == GeometryChunk.V_NORMALS:
                mesh.normals.extend(vec3s())
            elif chunk == GeometryChunk.V_TANGENTS:
                mesh.tangents.extend(vec4s())
            elif chunk == GeometryChunk.V_TEX0:
                mesh.texture_coords.extend(vec2s())
            elif chunk == GeometryChunk.INDICES:
                mesh.indices.extend(reader.int() for _ in range(num_indices))
            elif chunk == GeometryChunk.V_WEIGHT_VALUES:
                mesh.weights.extend(vec4s())
            elif chunk == GeometryChunk.V_WEIGHT_INDICES:
                mesh.weight_indices.extend(
                    tuple(reader.int() for _ in range(4)) for _ in range(num_vertices)
                )
            elif chunk == GeometryChunk.JOINT_NAMES:
                count = reader.int()
                reader.line()
                mesh.joint_names.extend(reader.line() for _ in range(count))
            elif chunk == GeometryChunk.JOINT_PARENTS:
                count = reader.int()
                mesh.joint_parents.extend(reader.int() for _ in range(count))
            elif chunk == GeometryChunk.BIND_POSE:
                mesh.bind_pose = matrices()
            elif chunk == GeometryChunk.BIND_POSE_INV:
                mesh.inverse_bind_pose = matrices()
            elif chunk == GeometryChunk.SUB_MESHES:
                mesh.mesh_layers.extend(
                    SubMesh(reader.int(), reader.int()) for _ in range(num_meshes)
                )
            elif chunk == GeometryChunk.SUB_MESH_NAMES:
                reader.line()
                mesh.layer_names.extend(reader.line() for _ in range(num_meshes))
        return mesh

    def tri_count(self) -> int:
        prims = len(self.indices) if self.indices else len(self.vertices)
        return prims // 3

    def vertex_indices_for_tri(self, index: int) -> tuple[int, int, int]:
        """Vertex indices of triangle `index`; raises IndexError if out of range."""
        if not 0 <= index < self.tri_count():
            raise IndexError("triangle index out of range")
        base = index * 3
        if self.indices:
            a, b, c = self.indices[base:base + 3]
            return a, b, c
        return base, base + 1, base + 2

    def _triangles(self):
        return (self.vertex_indices_for_tri(i) for i in range(self.tri_count()))

    def generate_normals(self) -> None:
        """Compute smooth per-vertex normals from the triangles."""
        normals = [Vector3() for _ in self.vertices]
        verts = self.vertices
        for a, b, c in self._triangles():
            normal = Vector3.cross(verts[b] - verts[a], verts[c] - verts[a])
            normals[a] += normal
            normals[b] += normal
            normals[c] += normal
        self.normals = [n.normalised() for n in normals]

    def generate_tangents(self) -> None:
        """Compute per-vertex tangents; needs texture coordinates."""
        if not self.texture_coords:
            return
        sums = [Vector4(0.0, 0.0, 0.0, 0.0) for _ in self.vertices]
        for a, b, c in self._triangles():
            tangent = self.generate_tangent(a, b, c)
            sums[a] += tangent
            sums[b] += tangent
            sums[c] += tangent
        tangents = []
        for t in sums:
            handedness = 1.0 if t.w > 0.0 else -1.0
            n = Vector4(t.x, t.y, t.z, 0.0).normalised()
            tangents.append(Vector4(n.x, n.y, n.z, handedness))
        self.tangents = tangents

    def generate_tangent(self, a: int, b: int, c: int) -> Vector4:
        """Tangent of one triangle, with handedness in w."""
        ba = self.vertices[b] - self.vertices[a]
        ca = self.vertices[c] - self.vertices[a]
        tba = self.texture_coords[b] - self.texture_coords[a]
        tca = self.texture_coords[c] - self.texture_coords[a]

        tex = Matrix2.from_columns(tba, tca).inverse().values

        tangent = ba * tex[0] + ca * tex[1]
        binormal = ba * tex[2] + ca * tex[3]

        normal = Vector3.cross(ba, ca)
        bi_cross = Vector3.cross(tangent, normal)
        handedness = -1.0 if Vector3.dot(bi_cross, binormal) < 0.0 else 1.0

        t = tangent.normalised()
        return Vector4(t.x, t.y, t.z, handedness)

    def joint_count(self) -> int:
        return len(self.joint_names)

    def index_for_joint(self, name: str) -> int:
        """Index of the named joint; raises KeyError if absent."""
        try:
            return self.joint_names.index(name)
        except ValueError:
            raise KeyError(name) from None

    def parent_for_joint(self, joint) -> int:
        """Parent index of a joint given by name or index; -1 means no parent."""
        if isinstance(joint, str):
            joint = self.index_for_joint(joint)
        if joint == -1:
            return -1
        if not 0 <= joint < len(self.joint_parents):
            raise IndexError("joint index out of range")
        return self.joint_parents[joint]

    def sub_mesh_count(self) -> int:
        return len(self.mesh_layers)

    def sub_mesh(self, key) -> SubMesh:
        """Sub-mesh by layer index or layer name."""
        if isinstance(key, str):
            try:
                key = self.layer_names.index(key)
            except ValueError:
                raise KeyError(key) from None
        if not 0 <= key < len(self.mesh_layers):
            raise IndexError("sub-mesh index out of range")
        return self.mesh_layers[key]