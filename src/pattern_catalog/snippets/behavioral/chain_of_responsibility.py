"""Chain of Responsibility: pass a request along a chain until someone handles it."""
from abc import ABC, abstractmethod
from typing import Optional


class Approver(ABC):
    title = ""

    def __init__(self, successor: Optional["Approver"] = None):
        self._successor = successor

    @abstractmethod
    def can_approve(self, amount: int) -> bool:
        pass

    def handle(self, amount: int) -> str:
        if self.can_approve(amount):
            return f"{self.title} approved ${amount}"
        if self._successor is not None:
            return self._successor.handle(amount)
        return f"Nobody can approve ${amount}"


class TeamLead(Approver):
    title = "Team lead"

    def can_approve(self, amount: int) -> bool:
        return amount <= 1000


class Manager(Approver):
    title = "Manager"

    def can_approve(self, amount: int) -> bool:
        return amount <= 5000


class Director(Approver):
    title = "Director"

    def can_approve(self, amount: int) -> bool:
        return amount <= 20000


def demo() -> None:
    chain = TeamLead(Manager(Director()))
    for amount in (500, 3000, 15000, 50000):
        print(chain.handle(amount))
