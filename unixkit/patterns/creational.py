"""Creational patterns: a step-by-step house builder and a product factory."""

from __future__ import annotations

import sys
from abc import ABC, abstractmethod
from dataclasses import dataclass


@dataclass
class House:
    """The object the builder assembles."""

    floor: str = ""
    walls: str = ""
    roof: str = ""


class Builder(ABC):
    """Builds a house one part at a time."""

    @abstractmethod
    def build_floor(self, floor: str) -> None:
        """Lay the floor."""

    @abstractmethod
    def build_walls(self, walls: str) -> None:
        """Put up the walls."""

    @abstractmethod
    def build_roof(self, roof: str) -> None:
        """Put on the roof."""

    @abstractmethod
    def reset(self) -> None:
        """Start over with an empty house."""

    @property
    @abstractmethod
    def house(self) -> House:
        """The house built so far."""


class ConcreteBuilder(Builder):
    """A builder that fills in the fields of a :class:`House`."""

    def __init__(self) -> None:
        self._house = House()

    @property
    def house(self) -> House:
        return self._house

    def build_floor(self, floor: str) -> None:
        self._house.floor = floor

    def build_walls(self, walls: str) -> None:
        self._house.walls = walls

    def build_roof(self, roof: str) -> None:
        self._house.roof = roof

    def reset(self) -> None:
        self._house = House()


class Director:
    """Drives a builder through the usual construction order."""

    def __init__(self, builder: Builder) -> None:
        self.builder = builder

    def build(self, floor: str, walls: str, roof: str) -> House:
        self.builder.build_floor(floor)
        self.builder.build_walls(walls)
        self.builder.build_roof(roof)
        return self.builder.house


class Product(ABC):
    """Something the factory makes."""

    @abstractmethod
    def use(self) -> str:
        """Use the product and describe what happened."""


class ProductA(Product):
    def use(self) -> str:
        return "Used first product"


class ProductB(Product):
    def use(self) -> str:
        return "Used second product"


class ProductC(Product):
    def use(self) -> str:
        return "Used third product"


class Creator:
    """Makes products by number: 1, 2 or 3."""

    _PRODUCTS: dict[int, type[Product]] = {1: ProductA, 2: ProductB, 3: ProductC}

    def create_product(self, kind: int) -> Product:
        """Return a new product of ``kind``; raise ``ValueError`` for an unknown kind."""
        try:
            return self._PRODUCTS[kind]()
        except KeyError:
            raise ValueError("Create product fail") from None


def _print_house(house: House) -> None:
    print(house.floor)
    print(house.walls)
    print(house.roof)


def main(argv: list[str] | None = None) -> int:
    builder = ConcreteBuilder()
    director = Director(builder)
    _print_house(director.build("Wood floor", "Brick Walls", "Tile roof"))

    builder.reset()
    builder.build_floor("Brick floor")
    builder.build_walls("Wood floor")
    builder.build_roof("Tile roof")
    _print_house(builder.house)

    factory = Creator()
    for kind in (1, 3, 2):
        print(factory.create_product(kind).use())
    return 0


if __name__ == "__main__":
    sys.exit(main())