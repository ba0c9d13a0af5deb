"""Adapter: make an existing class usable through the interface a client expects."""


class EuropeanSocket:
    """The adaptee: an interface the kettle cannot use directly."""

    def supply_230v(self) -> int:
        return 230


class USSocket:
    def supply_120v(self) -> int:
        return 120


class SocketAdapter(USSocket):
    def __init__(self, socket: EuropeanSocket):
        self._socket = socket

    def supply_120v(self) -> int:
        return self._socket.supply_230v() * 120 // 230


class Kettle:
    def __init__(self, socket: USSocket):
        self._socket = socket

    def boil(self) -> str:
        return f"Kettle boiling at {self._socket.supply_120v()}V"


def demo() -> None:
    print(Kettle(USSocket()).boil())
    print(Kettle(SocketAdapter(EuropeanSocket())).boil())
