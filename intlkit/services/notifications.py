"""Fire-and-forget user notifications for locale changes."""

import logging
import uuid
from typing import Protocol

_log = logging.getLogger(__name__)


class Notifier(Protocol):
    def show_loading(self, text: str) -> str: ...

    def dismiss(self, handle: str) -> None: ...

    def show_success(self, text: str) -> None: ...

    def show_failure(self, text: str) -> None: ...


class LogNotifier:
    """Render notifications as log records."""

    def show_loading(self, text: str) -> str:
        handle = uuid.uuid4().hex
        _log.info("%s... (%s)", text, handle)
        return handle

    def dismiss(self, handle: str) -> None:
        _log.debug("Dismissed notification %s", handle)

    def show_success(self, text: str) -> None:
        _log.info(text)

    def show_failure(self, text: str) -> None:
        _log.warning(text)
