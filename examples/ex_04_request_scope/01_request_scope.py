"""Request scope: one child registry per request.

Application-wide factories live on the root. Each request gets a child that
binds request data; parent factories see it because the resolution context
is bound to the registry resolution started on. ``singleton`` and
``request_scoped`` wrappers control how long produced values are reused.
"""

from __future__ import annotations

from regwire import Registry, ResolutionContext, request_scoped, singleton


class Settings:
    greeting = "hello"


class Handler:
    def __init__(self, settings: Settings, user: str) -> None:
        self.settings = settings
        self.user = user

    def respond(self) -> str:
        return f"{self.settings.greeting} {self.user}"


def make_handler(inject: ResolutionContext) -> Handler:
    return Handler(inject("settings"), inject("user"))


def main() -> None:
    app = Registry(name="app")
    app.register("settings", singleton(lambda _: Settings()))
    app.register("handler", request_scoped(make_handler))

    first_request = app.create_child(name="request:ada")
    first_request.register("user", lambda _: "ada")
    first = first_request.resolve("handler")
    print(first.respond())  # => hello ada
    print(f"same_within_request={first is first_request.resolve('handler')}")  # => same_within_request=True

    second_request = app.create_child(name="request:alan")
    second_request.register("user", lambda _: "alan")
    second = second_request.resolve("handler")
    print(second.respond())  # => hello alan
    print(f"same_across_requests={first is second}")  # => same_across_requests=False
    print(f"same_settings={first.settings is second.settings}")  # => same_settings=True


if __name__ == "__main__":
    main()
