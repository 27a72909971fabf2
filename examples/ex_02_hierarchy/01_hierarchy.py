"""Hierarchies: children, extension and merging.

A child falls back to its parent. ``extend`` adds more ancestors, searched in
the order they were added. ``Registry.merge`` flattens local bindings into a
standalone registry where later inputs win.
"""

from __future__ import annotations

from regwire import Registry


def main() -> None:
    messages = Registry(name="messages").register("welcome", lambda _: "Hello")
    numbers = Registry(name="numbers").register("pi", lambda _: 3.14)
    overrides = Registry(name="overrides").register("welcome", lambda _: "Hi")

    app = Registry(name="app").extend(messages, numbers, overrides)
    print(f"welcome={app.resolve('welcome')}")  # => welcome=Hello
    print(f"pi={app.resolve('pi')}")  # => pi=3.14

    child = app.create_child()
    child.register("welcome", lambda _: "Hey")
    print(f"child_welcome={child.resolve('welcome')}")  # => child_welcome=Hey
    print(f"app_welcome={app.resolve('welcome')}")  # => app_welcome=Hello

    merged = Registry.merge(messages, overrides)
    print(f"merged_welcome={merged.resolve('welcome')}")  # => merged_welcome=Hi
    print(f"merged_parents={len(merged.parents)}")  # => merged_parents=0


if __name__ == "__main__":
    main()
