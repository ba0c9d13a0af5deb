"""Strategy: pick one of several interchangeable algorithms at runtime."""
from abc import ABC, abstractmethod
from typing import Dict, Optional


class Operation(ABC):
    @abstractmethod
    def apply(self, a: float, b: float) -> float:
        pass


class Add(Operation):
    def apply(self, a: float, b: float) -> float:
        return a + b


class Subtract(Operation):
    def apply(self, a: float, b: float) -> float:
        return a - b


class Multiply(Operation):
    def apply(self, a: float, b: float) -> float:
        return a * b


class Calculator:
    def __init__(self):
        self._strategies: Dict[str, Operation] = {
            "add": Add(),
            "subtract": Subtract(),
            "multiply": Multiply(),
        }

    def calculate(self, operation: str, a: float, b: float) -> Optional[float]:
        strategy = self._strategies.get(operation)
        if strategy is None:
            # Unknown operation: None instead of an exception
            return None
        return strategy.apply(a, b)


def demo() -> None:
    calculator = Calculator()
    for operation in ("add", "subtract", "multiply", "modulo"):
        print(calculator.calculate(operation, 6, 3))
