"""Mediator: objects talk through a central hub instead of referring to each other."""
from typing import Dict, Optional


class ChatRoom:
    def __init__(self):
        self._members: Dict[str, "User"] = {}

    def join(self, user: "User") -> None:
        self._members[user.name] = user
        user.room = self

    def send(self, sender: "User", message: str, to: Optional[str] = None) -> None:
        for name, member in self._members.items():
            if name == sender.name:
                continue
            if to is None or name == to:
                member.receive(sender.name, message)


class User:
    def __init__(self, name: str):
        self.name = name
        self.room: Optional[ChatRoom] = None

    def send(self, message: str, to: Optional[str] = None) -> None:
        self.room.send(self, message, to)

    def receive(self, sender: str, message: str) -> None:
        print(f"{self.name} <- {sender}: {message}")


def demo() -> None:
    room = ChatRoom()
    alice, bob, carol = User("Alice"), User("Bob"), User("Carol")
    for user in (alice, bob, carol):
        room.join(user)
    alice.send("Hi all")
    bob.send("Hi Alice", to="Alice")
