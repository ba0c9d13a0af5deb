"""Builder: construct a complex object step by step."""


class Pizza:
    def __init__(self):
        self.size = "medium"
        self.crust = "regular"
        self.toppings = []

    def __str__(self) -> str:
        toppings = ", ".join(self.toppings) if self.toppings else "no toppings"
        return f"{self.size} {self.crust}-crust pizza with {toppings}"


class PizzaBuilder:
    """Fluent builder; build() hands over the product and starts a fresh one."""

    def __init__(self):
        self._pizza = Pizza()

    def size(self, size: str) -> "PizzaBuilder":
        self._pizza.size = size
        return self

    def crust(self, crust: str) -> "PizzaBuilder":
        self._pizza.crust = crust
        return self

    def topping(self, topping: str) -> "PizzaBuilder":
        self._pizza.toppings.append(topping)
        return self

    def build(self) -> Pizza:
        pizza, self._pizza = self._pizza, Pizza()
        return pizza


class PizzaDirector:
    def __init__(self, builder: PizzaBuilder):
        self._builder = builder

    def margherita(self) -> Pizza:
        return (
            self._builder.size("medium")
            .crust("thin")
            .topping("tomato")
            .topping("mozzarella")
            .topping("basil")
            .build()
        )


def demo() -> None:
    builder = PizzaBuilder()
    print(PizzaDirector(builder).margherita())
    print(builder.size("large").topping("mushrooms").topping("olives").build())
    print(builder.build())
