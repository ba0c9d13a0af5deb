"""Proxy: a stand-in that controls access to another object (here, lazy loading)."""
from abc import ABC, abstractmethod


class Image(ABC):
    @abstractmethod
    def display(self) -> None:
        pass


class RealImage(Image):
    def __init__(self, filename: str):
        self.filename = filename
        print(f"Loading {filename} from disk")

    def display(self) -> None:
        print(f"Displaying {self.filename}")


class LazyImageProxy(Image):
    def __init__(self, filename: str):
        self.filename = filename
        self._image = None

    def display(self) -> None:
        if self._image is None:
            self._image = RealImage(self.filename)
        self._image.display()


def demo() -> None:
    image = LazyImageProxy("photo.png")
    print("Proxy created")
    image.display()
    image.display()
