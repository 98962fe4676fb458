"""Notifier that turns locale notifications into Reflex toasts."""

import uuid

import reflex as rx
from reflex.event import EventSpec


class ToastNotifier:
    """Queue toast events until the current event handler returns them.

    Create one per event handler call so toasts never reach another session.
    """

    def __init__(self):
        self._pending: list[EventSpec] = []

    def show_loading(self, text: str) -> str:
        handle = f"intl-{uuid.uuid4().hex}"
        self._pending.append(rx.toast.info(text, id=handle, duration=60_000))
        return handle

    def dismiss(self, handle: str) -> None:
        self._pending.append(rx.toast.dismiss(handle))

    def show_success(self, text: str) -> None:
        self._pending.append(rx.toast.success(text))

    def show_failure(self, text: str) -> None:
        self._pending.append(rx.toast.error(text))

    def drain(self) -> list[EventSpec]:
        pending, self._pending = self._pending, []
        return pending

