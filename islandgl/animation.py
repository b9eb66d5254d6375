"""Skeletal animation frames read from MeshAnim text files."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

from .matrix4 import Matrix4
from .mesh import MeshFormatError


@dataclass
class MeshAnimation:
    """Per-frame joint matrices for a skinned mesh."""

    joint_count: int = 0
    frame_count: int = 0
    frame_rate: float = 0.0
    joints: list[Matrix4] = field(default_factory=list)

    @staticmethod
    def load(path) -> MeshAnimation:
        """Read a MeshAnim text file."""
        tokens = iter(Path(path).read_text().split())

        def take(convert=str):
            try:
                token = next(tokens)
            except StopIteration:
                raise MeshFormatError("unexpected end of file") from None
            try:
                return convert(token)
            except ValueError:
                raise MeshFormatError(f"unexpected value {token!r}") from None

        if take() != "MeshAnim":
            raise MeshFormatError("file is not a MeshAnim file")
        take(int)  # file version, not checked
        frame_count = take(int)
        joint_count = take(int)
        frame_rate = take(float)

        joints = [
            Matrix4([take(float) for _ in range(16)])
            for _ in range(frame_count * joint_count)
        ]
        return MeshAnimation(joint_count, frame_count, frame_rate, joints)

    def joint_data(self, frame: int) -> list[Matrix4]:
        """Joint matrices of one frame; raises IndexError past the last frame."""
        if not 0 <= frame < self.frame_count:
            raise IndexError("frame out of range")
        start = frame * self.joint_count
        return self.joints[start:start + self.joint_count]