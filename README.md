# islandgl

islandgl is the CPU-side logic for a small 3D island scene, written in plain
Python. It covers vector and matrix maths, mesh geometry and the text file
formats that describe it, a scene graph, mouse state, a rain particle field
and a camera.

## Modules

- `islandgl.mathutil` provides `deg_to_rad`, `rad_to_deg`, `PI` and
  `PI_OVER_360`.
- `islandgl.vectors` provides `Vector2`, `Vector3` and `Vector4`.
  - They are frozen dataclasses that support `+`, `-` and `*`.
  - `Vector3` also supports unary `-` and `/`, plus `length`, `normalised`,
    `inverse`, and the static `dot` and `cross`.
  - `Vector4` has `length`, `normalised` and `to_vector3`. Its components
    default to 1.
- `islandgl.matrix2`, `islandgl.matrix3` and `islandgl.matrix4` provide
  column-major `Matrix2`, `Matrix3` and `Matrix4`. Each stores its floats in
  a `values` list.
  - `Matrix4` has the constructors `rotation`, `scale`, `translation`,
    `perspective`, `orthographic` and `build_view_matrix`.
  - `Matrix4` also has `invert`, `inverse`, `transposed_rotation`, the
    position and scaling vector accessors, and multiplication by
    `Matrix4`, `Vector3` (with the perspective divide) or `Vector4`.
  - `Matrix3` has `rotation`, `scale`, `from_euler` and `to_euler`, row,
    column and diagonal access, `transpose` and `absolute`. It can be built
    from a `Matrix2`, a `Matrix4` or a quaternion.
  - `Matrix2` has `rotation`, `from_columns`, `invert` and `inverse`.
  - `invert` raises `ValueError` for a singular matrix.
- `islandgl.quaternion` provides `Quaternion`.
  - Construction: `from_axis_angle`, `from_euler_angles`, `from_matrix3` and
    `from_matrix4`.
  - Other operations: `to_euler`, `conjugate`, `normalise`, `calculate_w`,
    `lerp` and `slerp`.
  - Operators: Hamilton product, rotating a `Vector3` with `*`, and indexing
    `q[0]` to `q[3]`.
- `islandgl.plane` provides `Plane`, which has `sphere_in_plane`.
- `islandgl.frustum` provides `Frustum`, which extracts six planes from a
  matrix with `from_matrix`. `inside_frustum` currently always returns
  `True`, so culling is switched off.
- `islandgl.mesh` provides `Mesh`, `SubMesh`, `GeometryChunk`,
  `PrimitiveType` and `MeshFormatError`.
  - `Mesh.generate_triangle()` and `Mesh.generate_quad()` build procedural
    meshes.
  - `generate_normals` and `generate_tangents` compute per-vertex normals
    and tangents.
  - Triangle queries: `tri_count` and `vertex_indices_for_tri`.
  - Joint queries: `joint_count`, `index_for_joint` and `parent_for_joint`.
  - Sub-mesh queries: `sub_mesh_count` and `sub_mesh`, by index or by name.
  - `Mesh.load(path)` reads a text `MeshGeometry` file (version 1).
- `islandgl.animation` provides `MeshAnimation`. `MeshAnimation.load(path)`
  reads a `MeshAnim` file, and `joint_data(frame)` returns the joint matrices
  of one frame.
- `islandgl.material` provides `MeshMaterial` and `MeshMaterialEntry`.
  `MeshMaterial.load(path)` reads a `MeshMat` file. `material_for_layer`
  returns a layer's entry. `MeshMaterialEntry.entry(name)` returns a
  channel's file name, or `None` when there is none.
- `islandgl.heightmap` provides `HeightMap`, an indexed terrain grid built
  from 0–255 height samples.
  - Build one directly with `HeightMap(heights, width, height)`, or from the
    grey levels of an image with `HeightMap.from_image(path)`. The image
    route uses Pillow.
  - `heightmap_size` holds the terrain's extent.
- `islandgl.scene` provides `SceneNode` and `Light`.
  - `SceneNode` covers the transform hierarchy: `add_child`, and `update`,
    which recomputes `world_transform`.
  - Iterating over a node yields its children.
  - `SceneNode.by_camera_distance` is a sort key.
- `islandgl.robot` provides `CubeRobot`, a spinning robot of cube parts.
- `islandgl.markers` provides `Markers`, a group of marker cubes placed
  relative to a height map size.
- `islandgl.particles` provides `ParticleControl`, `Particle` and
  `approx_equal`.
  - `ParticleControl` is a field of falling rain particles that respawn near
    the ground.
  - Pass `amount` and a `random.Random` as `rng` for reproducible runs.
  - `vertex_data()` returns the current positions and colours.
- `islandgl.mouse` provides `Mouse`, `MouseButton` and `MouseEvent`.
  - `Mouse` is fed `MouseEvent` objects through `update`.
  - It tracks buttons, holds, double clicks, wheel movement, and relative and
    absolute position.
  - `update_holds` starts a new frame, and `update_double_click(dt)` runs the
    double-click timers down.
- `islandgl.camera` provides `Camera` and `CameraControls`.
  - `Camera.update(auto_cam, dt, controls)` either moves freely from a
    `CameraControls` snapshot or follows the automatic fly-through path. It
    returns whether automatic movement should continue.
  - `build_view_matrix` gives the view matrix.
- `islandgl.timer` provides `GameTimer`, which tracks the time between
  `tick` calls and the total elapsed time. It takes an optional clock
  function.

## Example

```python
from islandgl.vectors import Vector3
from islandgl.matrix4 import Matrix4
from islandgl.mesh import Mesh
from islandgl.scene import SceneNode

quad = Mesh.generate_quad()

root = SceneNode()
child = SceneNode(quad)
child.transform = Matrix4.translation(Vector3(0, 10, 0))
root.add_child(child)
root.update(0.016)

print(child.world_transform.position_vector())  # Vector3(x=0.0, y=10.0, z=0.0)

view = Matrix4.build_view_matrix(Vector3(0, 0, 10), Vector3(0, 0, 0), Vector3(0, 1, 0))
proj = Matrix4.perspective(1.0, 15000.0, 16 / 9, 45.0)
mvp = proj * view
```

Matrices multiply in OpenGL order: `a * b` applies `b` first. Angles are in
degrees throughout. Malformed mesh, animation and material files raise
`MeshFormatError`.

## What it does not do

islandgl has no window, no rendering and no GPU code. It does not compile
shaders, upload buffers, load textures or draw anything. It provides no
keyboard handling and no command-line program. Meshes, particles and scene
nodes hold their data in Python lists, ready to be handed to a renderer of
your choice.

## Installing and testing

```
pip install islandgl
pip install "islandgl[test]"
pytest
```