"""Generic hook / event system used to announce application-wide changes."""

from collections.abc import Callable

LOCALE_CHANGED = "locale.changed"
DID_MOUNT = "app.did_mount"


class HookRegistry:
    """Named events with handlers called in registration order.

    Handlers receive the event payload as keyword arguments. A handler
    registered with :meth:`once` is removed right before it runs.
    """

    def __init__(self):
        self._handlers: dict[str, list[Callable]] = {}
        self._once: set[tuple[str, Callable]] = set()

    def on(self, event: str, handler: Callable) -> None:
        """Register a handler for an event."""
        self._handlers.setdefault(event, []).append(handler)

    def once(self, event: str, handler: Callable) -> None:
        """Register a handler that runs on the next emission only."""
        self.on(event, handler)
        self._once.add((event, handler))

    def off(self, event: str, handler: Callable) -> None:
        """Remove a handler for an event."""
        handlers = self._handlers.get(event, [])
        if handler in handlers:
            handlers.remove(handler)
        self._once.discard((event, handler))

    def emit(self, event: str, **kwargs) -> None:
        """Emit an event, calling all registered handlers."""
        for handler in list(self._handlers.get(event, [])):
            if (event, handler) in self._once:
                self.off(event, handler)
            handler(**kwargs)

    def handlers(self, event: str) -> list[Callable]:
        return list(self._handlers.get(event, []))

    def clear(self) -> None:
        """Remove all handlers. Useful for testing."""
        self._handlers.clear()
        self._once.clear()


registry = HookRegistry()

on = registry.on
once = registry.once
off = registry.off
emit = registry.emit
clear = registry.clear
