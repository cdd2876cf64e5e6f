# tests/utils.py
# Copyright (c) 2024 Brad Edwards
# Licensed under the MIT License - see LICENSE file for details


class Point:
    """Self-convertible element for collection tests."""

    def __init__(self, x: int, y: int) -> None:
        self.x = x
        self.y = y

    def to_array(self):
        return {"x": self.x, "y": self.y}


class Point3D(Point):
    def __init__(self, x: int, y: int, z: int) -> None:
        super().__init__(x, y)
        self.z = z

    def to_array(self):
        return {"x": self.x, "y": self.y, "z": self.z}


class Opaque:
    """Element without a to_array method."""
