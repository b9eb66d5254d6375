"""Vector and matrix maths, mesh files, scene graph, mouse, particle and camera logic for a small 3D island scene."""

__version__ = "0.1.0"