"""Prototype: create new objects by copying an existing one."""
import copy


class Shape:
    def __init__(self, kind: str, color: str, points: list):
        self.kind = kind
        self.color = color
        self.points = points

    def clone(self, **changes) -> "Shape":
        # Deep copy so the clone never shares mutable state with the prototype
        cloned = copy.deepcopy(self)
        for name, value in changes.items():
            setattr(cloned, name, value)
        return cloned

    def __str__(self) -> str:
        return f"{self.color} {self.kind} {self.points}"


def demo() -> None:
    original = Shape("triangle", "red", [(0, 0), (4, 0), (0, 3)])
    variant = original.clone(color="blue")
    variant.points.append((1, 1))
    print(original)
    print(variant)
    print(original.points is variant.points)
