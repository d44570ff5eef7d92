"""Behavioural patterns: visitor, command, chain of responsibility, strategy and state."""

from __future__ import annotations

import sys
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Protocol


# Visitor


class Visitor(ABC):
    """An operation applied to each kind of place."""

    @abstractmethod
    def visit_garage(self, place: Garage) -> str: ...

    @abstractmethod
    def visit_hospital(self, place: Hospital) -> str: ...

    @abstractmethod
    def visit_fabric(self, place: Fabric) -> str: ...


class TownVisitor(Visitor):
    """Visits places in a town and remembers where it has been."""

    def __init__(self) -> None:
        self.visited: list[Place] = []

    def _visit(self, place: Place, kind: str) -> str:
        self.visited.append(place)
        return f"I'm visit {kind}"

    def visit_garage(self, place: Garage) -> str:
        return self._visit(place, "garage")

    def visit_hospital(self, place: Hospital) -> str:
        return self._visit(place, "hospital")

    def visit_fabric(self, place: Fabric) -> str:
        return self._visit(place, "fabric")


class Place(ABC):
    """Something a visitor can visit."""

    @abstractmethod
    def accept(self, visitor: Visitor) -> str:
        """Dispatch to the visitor method for this kind of place."""


class Garage(Place):
    def accept(self, visitor: Visitor) -> str:
        return visitor.visit_garage(self)


class Hospital(Place):
    def accept(self, visitor: Visitor) -> str:
        return visitor.visit_hospital(self)


class Fabric(Place):
    def accept(self, visitor: Visitor) -> str:
        return visitor.visit_fabric(self)


# Command


class Receiver:
    """The light the commands act on."""

    def light_on(self) -> str:
        return "Light is on"

    def light_off(self) -> str:
        return "Light is off"


class _Command(Protocol):
    def execute(self) -> str: ...


@dataclass
class ButtonOn:
    receiver: Receiver

    def execute(self) -> str:
        return self.receiver.light_on()


@dataclass
class ButtonOff:
    receiver: Receiver

    def execute(self) -> str:
        return self.receiver.light_off()


@dataclass
class Invoker:
    """Keeps a stack of commands and runs them in order."""

    commands: list[_Command] = field(default_factory=list)

    def add_command(self, command: _Command) -> None:
        self.commands.append(command)

    def delete_command(self) -> None:
        """Drop the most recently added command, if any."""
        if self.commands:
            self.commands.pop()

    def execute(self) -> list[str]:
        return [command.execute() for command in self.commands]


# Chain of responsibility


class Handler:
    """A link in a chain; handles its own request number and passes on the rest."""

    request: int = 0
    name: str = ""

    def __init__(self, next_handler: Handler | None = None) -> None:
        self.next = next_handler

    def handle(self, request: int) -> str | None:
        """Return the name of the handler that took ``request``, or ``None`` if none did."""
        if request == self.request:
            return self.name
        if self.next is not None:
            return self.next.handle(request)
        return None


class HandlerA(Handler):
    request = 1
    name = "ConcreteHandlerA"


class HandlerB(Handler):
    request = 2
    name = "ConcreteHandlerB"


class HandlerC(Handler):
    request = 3
    name = "ConcreteHandlerC"


def new_chain() -> Handler:
    """Return the chain A -> B -> C."""
    return HandlerA(HandlerB(HandlerC()))


# Strategy


class _Operation(Protocol):
    def calculate(self, x: int, y: int) -> int: ...


class Addition:
    def calculate(self, x: int, y: int) -> int:
        return x + y


class Subtraction:
    def calculate(self, x: int, y: int) -> int:
        return x - y


class Multiplication:
    def calculate(self, x: int, y: int) -> int:
        return x * y


class Division:
    def calculate(self, x: int, y: int) -> int:
        """Integer division truncating towards zero."""
        quotient = abs(x) // abs(y)
        return quotient if (x < 0) == (y < 0) else -quotient


@dataclass
class Calculator:
    """Applies whichever operation it currently holds."""

    operation: _Operation

    def calculate(self, x: int, y: int) -> int:
        return self.operation.calculate(x, y)


# State


class SilentMode:
    def alert(self) -> str:
        return "Phone in silent mode"


class LoudMode:
    def alert(self) -> str:
        return "Phone in loud mode"


class _AlertState(Protocol):
    def alert(self) -> str: ...


@dataclass
class MobileAlert:
    """A phone whose alert depends on its current mode."""

    state: _AlertState = field(default_factory=SilentMode)

    def alert(self) -> str:
        return self.state.alert()


def main(argv: list[str] | None = None) -> int:
    visitor = TownVisitor()
    for place in (Fabric(), Garage(), Hospital()):
        print(place.accept(visitor))

    receiver = Receiver()
    invoker = Invoker()
    invoker.add_command(ButtonOn(receiver))
    invoker.add_command(ButtonOff(receiver))
    for line in invoker.execute():
        print(line)

    handled = new_chain().handle(3)
    if handled is not None:
        print(handled)

    calculator = Calculator(Addition())
    for operation in (Addition(), Subtraction(), Multiplication(), Division()):
        calculator.operation = operation
        print(calculator.calculate(5, 2))

    phone = MobileAlert()
    print(phone.alert())
    phone.state = LoudMode()
    print(phone.alert())
    return 0


if __name__ == "__main__":
    sys.exit(main())