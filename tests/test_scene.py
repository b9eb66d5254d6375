import pytest

from islandgl.matrix4 import Matrix4
from islandgl.scene import Light, SceneNode
from islandgl.vectors import Vector3, Vector4


def test_add_child_sets_parent_and_iterates():
    root = SceneNode()
    child = SceneNode()
    root.add_child(child)
    assert child.parent is root
    assert list(root) == [child]


def test_defaults():
    node = SceneNode()
    assert node.mesh is None
    assert node.colour == Vector4(1.0, 1.0, 1.0, 1.0)
    assert node.model_scale == Vector3(1.0, 1.0, 1.0)
    assert node.bounding_radius == 1.0
    assert node.texture == 0


def test_mesh_and_colour_are_kept():
    mesh = object()
    colour = Vector4(0.5, 0.25, 0.0, 1.0)
    node = SceneNode(mesh, colour)
    assert node.mesh is mesh
    assert node.colour == colour


def test_update_composes_world_transforms():
    root = SceneNode()
    child = SceneNode()
    grandchild = SceneNode()
    root.add_child(child)
    child.add_child(grandchild)
    a, b, c = Vector3(1.0, 2.0, 3.0), Vector3(4.0, 5.0, 6.0), Vector3(-1.0, 0.5, 2.0)
    root.transform = Matrix4.translation(a)
    child.transform = Matrix4.translation(b)
    grandchild.transform = Matrix4.translation(c)
    root.update(0.1)
    assert root.world_transform == root.transform
    assert child.world_transform.position_vector() == a + b
    expected = a + b + c
    got = grandchild.world_transform.position_vector()
    assert (got.x, got.y, got.z) == pytest.approx((expected.x, expected.y, expected.z))


def test_root_world_transform_is_a_copy():
    root = SceneNode()
    root.update(0.0)
    root.transform.set_position_vector(Vector3(1.0, 1.0, 1.0))
    assert root.world_transform.position_vector() == Vector3()


def test_sort_by_camera_distance():
    nodes = []
    for distance in (3.0, 1.0, 2.0):
        node = SceneNode()
        node.distance_from_camera = distance
        nodes.append(node)
    ordered = sorted(nodes, key=SceneNode.by_camera_distance)
    assert [n.distance_from_camera for n in ordered] == sorted(
        n.distance_from_camera for n in nodes
    )


def test_light_fields():
    position = Vector3(1.0, 2.0, 3.0)
    colour = Vector4(1.0, 0.6, 0.0, 1.0)
    light = Light(position, colour, 12.5)
    assert light.position == position
    assert light.colour == colour
    assert light.radius == 12.5