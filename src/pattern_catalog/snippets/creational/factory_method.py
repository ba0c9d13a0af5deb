"""Factory Method: let subclasses decide which class to instantiate."""
from abc import ABC, abstractmethod


class Transport(ABC):
    @abstractmethod
    def deliver(self) -> str:
        pass


class Truck(Transport):
    def deliver(self) -> str:
        return "by road in a box"


class Ship(Transport):
    def deliver(self) -> str:
        return "by sea in a container"


class Logistics(ABC):
    @abstractmethod
    def create_transport(self) -> Transport:
        """The factory method."""

    def plan_delivery(self, cargo: str) -> str:
        transport = self.create_transport()
        return f"{cargo} delivered {transport.deliver()}"


class RoadLogistics(Logistics):
    def create_transport(self) -> Transport:
        return Truck()


class SeaLogistics(Logistics):
    def create_transport(self) -> Transport:
        return Ship()


def demo() -> None:
    print(RoadLogistics().plan_delivery("Books"))
    print(SeaLogistics().plan_delivery("Cars"))
