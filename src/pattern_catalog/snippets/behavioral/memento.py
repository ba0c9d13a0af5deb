"""Memento: capture and restore an object's state without exposing its internals."""
from typing import List


class EditorMemento:
    def __init__(self, content: str):
        self._content = content

    @property
    def content(self) -> str:
        return self._content


class Editor:
    def __init__(self):
        self.content = ""

    def write(self, text: str) -> None:
        self.content += text

    def save(self) -> EditorMemento:
        return EditorMemento(self.content)

    def restore(self, memento: EditorMemento) -> None:
        self.content = memento.content


class History:
    """The caretaker: stores mementos but never looks inside them."""

    def __init__(self):
        self._states: List[EditorMemento] = []

    def push(self, memento: EditorMemento) -> None:
        self._states.append(memento)

    def pop(self) -> EditorMemento:
        return self._states.pop()


def demo() -> None:
    editor = Editor()
    history = History()
    editor.write("Hello")
    history.push(editor.save())
    editor.write(", world")
    history.push(editor.save())
    editor.write("!!!")
    print(editor.content)
    editor.restore(history.pop())
    print(editor.content)
    editor.restore(history.pop())
    print(editor.content)
