"""Flyweight: share common state between many fine-grained objects."""


class TreeType:
    """Intrinsic state, shared by every tree of the same kind."""

    def __init__(self, name: str, color: str):
        self.name = name
        self.color = color


class TreeTypeFactory:
    def __init__(self):
        self._types = {}

    def get(self, name: str, color: str) -> TreeType:
        key = (name, color)
        if key not in self._types:
            self._types[key] = TreeType(name, color)
        return self._types[key]

    def count(self) -> int:
        return len(self._types)


class Tree:
    def __init__(self, x: int, y: int, tree_type: TreeType):
        self.x = x
        self.y = y
        self.tree_type = tree_type

    def describe(self) -> str:
        return f"{self.tree_type.color} {self.tree_type.name} at ({self.x}, {self.y})"


def demo() -> None:
    factory = TreeTypeFactory()
    forest = [Tree(x, x * 2, factory.get("oak", "green")) for x in range(3)]
    forest.append(Tree(9, 9, factory.get("birch", "white")))
    forest.append(Tree(5, 1, factory.get("oak", "green")))
    for tree in forest:
        print(tree.describe())
    print(f"{len(forest)} trees share {factory.count()} tree types")
