"""Circular factories: defer dereference until after construction.

Each factory asks for a ``Deferred`` handle instead of the other value, so
neither needs the other's result before returning. Resolving either side
eagerly inside its own factory would recurse without end.
"""

from __future__ import annotations

from regwire import Deferred, Registry, ResolutionContext


class Adder:
    base_value = 3

    def __init__(self, carrier: Deferred[NumberCarrier]) -> None:
        self._carrier = carrier

    def add(self, number: int) -> int:
        return number + self._carrier.get().num2()


class NumberCarrier:
    def __init__(self, adder: Deferred[Adder]) -> None:
        self._adder = adder

    def num2(self) -> int:
        return self._adder.get().base_value + 1


def make_adder(context: ResolutionContext) -> Adder:
    return Adder(context.defer("carrier"))


def make_carrier(context: ResolutionContext) -> NumberCarrier:
    return NumberCarrier(context.defer("adder"))


def main() -> None:
    registry = Registry()
    registry.register("adder", make_adder)
    registry.register("carrier", make_carrier)

    print(f"add(7)={registry.resolve('adder').add(7)}")  # => add(7)=11


if __name__ == "__main__":
    main()
