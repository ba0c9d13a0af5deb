"""Command: wrap a request in an object so it can be queued, logged or undone."""
from abc import ABC, abstractmethod
from typing import List


class Light:
    def __init__(self):
        self.is_on = False

    def turn_on(self) -> None:
        self.is_on = True
        print("Light is on")

    def turn_off(self) -> None:
        self.is_on = False
        print("Light is off")


class Command(ABC):
    @abstractmethod
    def execute(self) -> None:
        pass

    @abstractmethod
    def undo(self) -> None:
        pass


class TurnOnCommand(Command):
    def __init__(self, light: Light):
        self._light = light

    def execute(self) -> None:
        self._light.turn_on()

    def undo(self) -> None:
        self._light.turn_off()


class TurnOffCommand(Command):
    def __init__(self, light: Light):
        self._light = light

    def execute(self) -> None:
        self._light.turn_off()

    def undo(self) -> None:
        self._light.turn_on()


class RemoteControl:
    """The invoker: runs commands and remembers them for undo."""

    def __init__(self):
        self._history: List[Command] = []

    def press(self, command: Command) -> None:
        command.execute()
        self._history.append(command)

    def undo(self) -> None:
        if not self._history:
            print("Nothing to undo")
            return
        self._history.pop().undo()


def demo() -> None:
    light = Light()
    remote = RemoteControl()
    remote.press(TurnOnCommand(light))
    remote.press(TurnOffCommand(light))
    remote.undo()
    remote.undo()
    remote.undo()
