"""Composite: treat single objects and groups of objects the same way."""
from abc import ABC, abstractmethod
from typing import List


class Node(ABC):
    def __init__(self, name: str):
        self.name = name

    @abstractmethod
    def total_size(self) -> int:
        pass

    @abstractmethod
    def lines(self, depth: int = 0) -> List[str]:
        pass


class File(Node):
    def __init__(self, name: str, size: int):
        super().__init__(name)
        self.size = size

    def total_size(self) -> int:
        return self.size

    def lines(self, depth: int = 0) -> List[str]:
        return [f"{'  ' * depth}{self.name} ({self.size} KB)"]


class Folder(Node):
    def __init__(self, name: str):
        super().__init__(name)
        self.children: List[Node] = []

    def add(self, child: Node) -> "Folder":
        self.children.append(child)
        return self

    def total_size(self) -> int:
        return sum(child.total_size() for child in self.children)

    def lines(self, depth: int = 0) -> List[str]:
        result = [f"{'  ' * depth}{self.name}/ ({self.total_size()} KB)"]
        for child in self.children:
            result.extend(child.lines(depth + 1))
        return result


def demo() -> None:
    src = Folder("src").add(File("main.py", 4)).add(File("utils.py", 2))
    root = Folder("project").add(src).add(File("README.md", 1))
    for line in root.lines():
        print(line)
