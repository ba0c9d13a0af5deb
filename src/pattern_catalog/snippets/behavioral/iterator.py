"""Iterator: walk a collection without exposing how it is stored."""
from typing import List


class BookShelfIterator:
    def __init__(self, books: List[str], reverse: bool = False):
        self._books = books
        self._step = -1 if reverse else 1
        self._index = len(books) - 1 if reverse else 0

    def __iter__(self) -> "BookShelfIterator":
        return self

    def __next__(self) -> str:
        if not 0 <= self._index < len(self._books):
            raise StopIteration
        book = self._books[self._index]
        self._index += self._step
        return book


class BookShelf:
    def __init__(self):
        self._books: List[str] = []

    def add(self, title: str) -> None:
        self._books.append(title)

    def __iter__(self) -> BookShelfIterator:
        return BookShelfIterator(self._books)

    def reverse(self) -> BookShelfIterator:
        return BookShelfIterator(self._books, reverse=True)


def demo() -> None:
    shelf = BookShelf()
    for title in ("Dune", "Emma", "Ulysses"):
        shelf.add(title)
    print(", ".join(shelf))
    print(", ".join(shelf.reverse()))
