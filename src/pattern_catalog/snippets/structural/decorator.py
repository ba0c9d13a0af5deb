"""Decorator: attach extra behavior to an object by wrapping it."""
from abc import ABC, abstractmethod


class Coffee(ABC):
    @abstractmethod
    def cost(self) -> float:
        pass

    @abstractmethod
    def description(self) -> str:
        pass


class Espresso(Coffee):
    def cost(self) -> float:
        return 2.0

    def description(self) -> str:
        return "Espresso"


class CoffeeDecorator(Coffee):
    def __init__(self, coffee: Coffee):
        self._coffee = coffee


class Milk(CoffeeDecorator):
    def cost(self) -> float:
        return self._coffee.cost() + 0.5

    def description(self) -> str:
        return f"{self._coffee.description()}, milk"


class Caramel(CoffeeDecorator):
    def cost(self) -> float:
        return self._coffee.cost() + 0.75

    def description(self) -> str:
        return f"{self._coffee.description()}, caramel"


def demo() -> None:
    for order in (Caramel(Milk(Espresso())), Milk(Milk(Espresso()))):
        print(f"{order.description()}: ${order.cost():.2f}")
