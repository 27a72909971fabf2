"""Quickstart: bind identifiers to factories and resolve them.

Factories receive an ``inject`` callable and ask it for whatever they need.
Bindings can be registered in any order because nothing runs until resolve.
"""

from __future__ import annotations

from dataclasses import dataclass

from regwire import Identifier, Registry, RegwireBindingNotFoundError


@dataclass
class NumberCarrier:
    num2: int


class Adder:
    def __init__(self, carrier: NumberCarrier) -> None:
        self.carrier = carrier

    def add(self, number: int) -> int:
        return number + self.carrier.num2


ADDER: Identifier[Adder] = Identifier("adder")
NUMBER_CARRIER: Identifier[NumberCarrier] = Identifier("number_carrier")


def main() -> None:
    registry = Registry()
    registry.register(ADDER, lambda inject: Adder(inject(NUMBER_CARRIER)))
    registry.register(NUMBER_CARRIER, lambda _: NumberCarrier(num2=5))

    print(f"add(7)={registry.resolve(ADDER).add(7)}")  # => add(7)=12

    fresh = registry.resolve(ADDER) is not registry.resolve(ADDER)
    print(f"fresh_per_resolve={fresh}")  # => fresh_per_resolve=True

    try:
        registry.resolve("missing")
    except RegwireBindingNotFoundError as error:
        print(error)  # => Binding "missing" not found!


if __name__ == "__main__":
    main()
