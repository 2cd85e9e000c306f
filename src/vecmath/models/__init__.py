from vecmath.models.vector import Vector

__all__ = [
    "Vector",
]
