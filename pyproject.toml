[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "islandgl"
version = "0.1.0"
description = "Vector and matrix maths, mesh files, scene graph, input state and camera logic for a small 3D island scene"
requires-python = ">=3.10"
dependencies = [
    "pillow",
]
keywords = ["graphics", "3d", "scene-graph", "matrix", "quaternion", "mesh", "heightmap", "camera"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Multimedia :: Graphics :: 3D Rendering",
    "Topic :: Scientific/Engineering :: Mathematics",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["islandgl"]

[tool.pytest.ini_options]
addopts = "-ra"
