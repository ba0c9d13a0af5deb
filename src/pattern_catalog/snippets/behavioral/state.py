"""State: an object changes its behavior when its internal state changes."""
from abc import ABC, abstractmethod


class LightState(ABC):
    name = ""

    @abstractmethod
    def next(self, light: "TrafficLight") -> None:
        pass


class Red(LightState):
    name = "red"

    def next(self, light: "TrafficLight") -> None:
        light.state = Green()


class Green(LightState):
    name = "green"

    def next(self, light: "TrafficLight") -> None:
        light.state = Yellow()


class Yellow(LightState):
    name = "yellow"

    def next(self, light: "TrafficLight") -> None:
        light.state = Red()


class TrafficLight:
    def __init__(self):
        self.state: LightState = Red()

    def change(self) -> None:
        self.state.next(self)
        print(f"Light turned {self.state.name}")


def demo() -> None:
    light = TrafficLight()
    print(f"Light is {light.state.name}")
    for _ in range(3):
        light.change()
