"""Interpreter: represent a small language's grammar as classes and evaluate it."""
from abc import ABC, abstractmethod
from typing import Dict, List


class Expression(ABC):
    @abstractmethod
    def interpret(self, context: Dict[str, int]) -> int:
        pass


class Number(Expression):
    def __init__(self, value: int):
        self.value = value

    def interpret(self, context: Dict[str, int]) -> int:
        return self.value

    def __str__(self) -> str:
        return str(self.value)


class Variable(Expression):
    def __init__(self, name: str):
        self.name = name

    def interpret(self, context: Dict[str, int]) -> int:
        return context[self.name]

    def __str__(self) -> str:
        return self.name


class Add(Expression):
    def __init__(self, left: Expression, right: Expression):
        self.left = left
        self.right = right

    def interpret(self, context: Dict[str, int]) -> int:
        return self.left.interpret(context) + self.right.interpret(context)

    def __str__(self) -> str:
        return f"({self.left} + {self.right})"


class Subtract(Expression):
    def __init__(self, left: Expression, right: Expression):
        self.left = left
        self.right = right

    def interpret(self, context: Dict[str, int]) -> int:
        return self.left.interpret(context) - self.right.interpret(context)

    def __str__(self) -> str:
        return f"({self.left} - {self.right})"


def parse(source: str) -> Expression:
    """Parse a postfix expression such as "x 3 + y -"."""
    stack: List[Expression] = []
    for token in source.split():
        if token in ("+", "-"):
            right = stack.pop()
            left = stack.pop()
            stack.append(Add(left, right) if token == "+" else Subtract(left, right))
        elif token.isdigit():
            stack.append(Number(int(token)))
        else:
            stack.append(Variable(token))
    return stack.pop()


def demo() -> None:
    expression = parse("x 3 + y -")
    print(expression)
    print(expression.interpret({"x": 10, "y": 4}))
    print(expression.interpret({"x": 1, "y": 7}))
