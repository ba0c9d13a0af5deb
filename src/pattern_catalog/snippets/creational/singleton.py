"""Singleton: a class with exactly one shared instance."""


class Configuration:
    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
            cls._instance.settings = {}
        return cls._instance


def demo() -> None:
    first = Configuration()
    first.settings["theme"] = "dark"
    second = Configuration()
    print(first is second)
    print(second.settings["theme"])
