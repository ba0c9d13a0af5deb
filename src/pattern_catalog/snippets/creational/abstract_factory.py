"""Abstract Factory: create families of related objects without naming their classes."""
from abc import ABC, abstractmethod


class Button(ABC):
    @abstractmethod
    def render(self) -> str:
        pass


class Checkbox(ABC):
    @abstractmethod
    def render(self) -> str:
        pass


class LightButton(Button):
    def render(self) -> str:
        return "light button"


class LightCheckbox(Checkbox):
    def render(self) -> str:
        return "light checkbox"


class DarkButton(Button):
    def render(self) -> str:
        return "dark button"


class DarkCheckbox(Checkbox):
    def render(self) -> str:
        return "dark checkbox"


class WidgetFactory(ABC):
    """Creates one matching family of widgets."""

    @abstractmethod
    def create_button(self) -> Button:
        pass

    @abstractmethod
    def create_checkbox(self) -> Checkbox:
        pass


class LightThemeFactory(WidgetFactory):
    def create_button(self) -> Button:
        return LightButton()

    def create_checkbox(self) -> Checkbox:
        return LightCheckbox()


class DarkThemeFactory(WidgetFactory):
    def create_button(self) -> Button:
        return DarkButton()

    def create_checkbox(self) -> Checkbox:
        return DarkCheckbox()


def render_form(factory: WidgetFactory) -> str:
    # Client code only knows the abstract factory and products
    return f"{factory.create_button().render()} + {factory.create_checkbox().render()}"


def demo() -> None:
    for factory in (LightThemeFactory(), DarkThemeFactory()):
        print(render_form(factory))
