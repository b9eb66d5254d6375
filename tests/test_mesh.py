import math

import pytest

from islandgl.matrix4 import Matrix4
from islandgl.mesh import GeometryChunk, Mesh, MeshFormatError, PrimitiveType, SubMesh
from islandgl.vectors import Vector2, Vector3, Vector4

SAMPLE = """MeshGeometry
1
2 4 6 10
1
0 0 0
1 0 0
1 1 0
0 1 0
16
0 0
1 0
1 1
0 1
8
1 0 0 1
0 1 0 1
0 0 1 1
1 1 1 1
256
0 1 2 2 3 0
512
2
root bone
arm
1024
2 -1 0
2048
1
1 0 0 0 0 1 0 0 0 0 1 0 5 6 7 1
16384
0 3
3 3
32768
first layer
second
"""


@pytest.fixture
def sample_path(tmp_path):
    path = tmp_path / "sample.msh"
    path.write_text(SAMPLE)
    return path


def test_chunk_values_drive_loading(tmp_path):
    text = (
        "MeshGeometry 1 1 3 3 2\n"
        f"{GeometryChunk.V_POSITIONS.value}\n0 0 0\n1 0 0\n0 1 0\n"
        f"{GeometryChunk.INDICES.value}\n0 2 1\n"
    )
    path = tmp_path / "chunks.msh"
    path.write_text(text)
    mesh = Mesh.load(path)
    assert GeometryChunk.V_POSITIONS.value == 1
    assert GeometryChunk.INDICES.value == 256
    assert mesh.vertices[1] == Vector3(1.0, 0.0, 0.0)
    assert mesh.indices == [0, 2, 1]


def test_load_positions_and_uvs(sample_path):
    mesh = Mesh.load(sample_path)
    assert mesh.num_vertices == 4
    assert mesh.vertices[2] == Vector3(1.0, 1.0, 0.0)
    assert mesh.texture_coords[3] == Vector2(0.0, 1.0)
    assert mesh.colours[1] == Vector4(0.0, 1.0, 0.0, 1.0)


def test_load_indices_and_tris(sample_path):
    mesh = Mesh.load(sample_path)
    assert mesh.indices == [0, 1, 2, 2, 3, 0]
    assert mesh.tri_count() == 2
    assert mesh.vertex_indices_for_tri(1) == (2, 3, 0)


def test_load_joints(sample_path):
    mesh = Mesh.load(sample_path)
    assert mesh.joint_names == ["root bone", "arm"]
    assert mesh.joint_count() == 2
    assert mesh.index_for_joint("arm") == 1
    assert mesh.parent_for_joint("arm") == 0
    assert mesh.parent_for_joint("root bone") == -1
    assert mesh.parent_for_joint(-1) == -1


def test_unknown_joint_raises(sample_path):
    mesh = Mesh.load(sample_path)
    with pytest.raises(KeyError):
        mesh.index_for_joint("leg")
    with pytest.raises(IndexError):
        mesh.parent_for_joint(5)


def test_load_bind_pose(sample_path):
    mesh = Mesh.load(sample_path)
    assert len(mesh.bind_pose) == 1
    assert mesh.bind_pose[0].position_vector() == Vector3(5.0, 6.0, 7.0)
    assert isinstance(mesh.bind_pose[0], Matrix4)


def test_load_sub_meshes(sample_path):
    mesh = Mesh.load(sample_path)
    assert mesh.sub_mesh_count() == 2
    assert mesh.sub_mesh(1) == SubMesh(3, 3)
    assert mesh.sub_mesh("first layer") == SubMesh(0, 3)
    with pytest.raises(IndexError):
        mesh.sub_mesh(2)
    with pytest.raises(IndexError):
        mesh.sub_mesh(-1)
    with pytest.raises(KeyError):
        mesh.sub_mesh("missing")


def test_wrong_file_type(tmp_path):
    path = tmp_path / "bad.msh"
    path.write_text("MeshAnim 1 0 0 0 0\n")
    with pytest.raises(MeshFormatError):
        Mesh.load(path)


def test_wrong_version(tmp_path):
    path = tmp_path / "bad.msh"
    path.write_text("MeshGeometry 2 0 0 0 0\n")
    with pytest.raises(MeshFormatError):
        Mesh.load(path)


def test_truncated_file(tmp_path):
    path = tmp_path / "short.msh"
    path.write_text("MeshGeometry 1 1 3 0 1\n1\n0 0 0\n1 0\n")
    with pytest.raises(MeshFormatError):
        Mesh.load(path)


def test_quad_fixed_data():
    quad = Mesh.generate_quad()
    assert quad.type is PrimitiveType.TRIANGLE_STRIP
    assert quad.num_vertices == 4
    assert all(n == Vector3(0.0, 0.0, -1.0) for n in quad.normals)
    assert all(t == Vector4(1.0, 0.0, 0.0, 1.0) for t in quad.tangents)


def test_triangle_normals_are_unit_and_perpendicular():
    tri = Mesh.generate_triangle()
    edge1 = tri.vertices[1] - tri.vertices[0]
    edge2 = tri.vertices[2] - tri.vertices[0]
    for n in tri.normals:
        assert math.isclose(n.length(), 1.0)
        assert math.isclose(Vector3.dot(n, edge1), 0.0, abs_tol=1e-9)
        assert math.isclose(Vector3.dot(n, edge2), 0.0, abs_tol=1e-9)


def test_triangle_tangents_in_plane_with_handedness():
    tri = Mesh.generate_triangle()
    assert len(tri.tangents) == 3
    for t in tri.tangents:
        assert math.isclose(t.to_vector3().length(), 1.0)
        assert math.isclose(t.z, 0.0, abs_tol=1e-9)
        assert t.w in (1.0, -1.0)


def test_tangents_skipped_without_uvs():
    mesh = Mesh()
    mesh.vertices = [Vector3(0, 0, 0), Vector3(1, 0, 0), Vector3(0, 1, 0)]
    mesh.generate_tangents()
    assert mesh.tangents == []


def test_tri_count_without_indices():
    mesh = Mesh()
    mesh.vertices = [Vector3(float(i), 0.0, 0.0) for i in range(7)]
    assert mesh.tri_count() == 2
    assert mesh.vertex_indices_for_tri(1) == (3, 4, 5)
    with pytest.raises(IndexError):
        mesh.vertex_indices_for_tri(2)


def test_shared_vertex_normal_sums_faces():
    mesh = Mesh()
    mesh.vertices = [
        Vector3(0, 0, 0), Vector3(1, 0, 0), Vector3(0, 1, 0), Vector3(-1, 0, 0),
    ]
    mesh.indices = [0, 1, 2, 0, 2, 3]
    mesh.generate_normals()
    assert mesh.normals[0] == mesh.normals[1]
    assert math.isclose(mesh.normals[0].length(), 1.0)