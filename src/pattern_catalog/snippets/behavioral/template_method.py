"""Template Method: fix an algorithm's skeleton and let subclasses fill in steps."""
from abc import ABC, abstractmethod
from typing import List, Tuple

Row = Tuple[str, int]


class Exporter(ABC):
    def export(self, rows: List[Row]) -> str:
        lines = []
        header = self.header()
        if header:
            lines.append(header)
        lines.extend(self.format_row(row) for row in rows)
        return "\n".join(lines)

    def header(self) -> str:
        """Hook: subclasses may override, the default adds no header."""
        return ""

    @abstractmethod
    def format_row(self, row: Row) -> str:
        pass


class CSVExporter(Exporter):
    def header(self) -> str:
        return "name,qty"

    def format_row(self, row: Row) -> str:
        return f"{row[0]},{row[1]}"


class TextExporter(Exporter):
    def format_row(self, row: Row) -> str:
        return f"{row[0]:<8}{row[1]:>3}"


def demo() -> None:
    rows = [("apples", 3), ("pears", 12)]
    print(CSVExporter().export(rows))
    print(TextExporter().export(rows))
