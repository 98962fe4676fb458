"""Message lookup, template interpolation and case transforms."""

import logging
from collections.abc import Callable, Mapping

from intlkit.config import settings
from intlkit.i18n import ID_AS_MESSAGE, LocaleEntry, LocaleRegistry, get_registry
from intlkit.services.template_cache import get_template

_log = logging.getLogger(__name__)


class Formatter:
    """Format messages of the locale returned by ``get_locale``.

    The active locale is read on every call, so a locale switch applies to
    the next message formatted.
    """

    def __init__(
        self,
        get_locale: Callable[[], str],
        registry: LocaleRegistry | None = None,
        debug: bool | None = None,
    ):
        self._get_locale = get_locale
        self.registry = registry or get_registry()
        self.debug = settings.debug if debug is None else debug

    @property
    def locale(self) -> str:
        return self._get_locale()

    def _entry(self) -> LocaleEntry:
        return self.registry[self._get_locale()]

    def format(self, key: str, values: Mapping | None = None) -> str:
        entry = self._entry()
        message = entry.data.get(key)
        if message is None:
            if self.debug:
                _log.error("[intl] Get '%s' locale text of '%s' failed.", entry.name, key)
            return key
        if message is ID_AS_MESSAGE:
            message = key
        if values is not None:
            message = get_template(entry, key, message)(values)
        return message

    __call__ = format

    def upper(self, key: str, values: Mapping | None = None) -> str:
        """Format and capitalize the first character where the locale has case."""
        entry = self._entry()
        message = self.format(key, values)
        if not entry.upper_case or not isinstance(message, str) or not message:
            return message
        return message[0].upper() + message[1:]

    def upper_all(self, key: str, values: Mapping | None = None) -> str:
        """Format and uppercase the whole message where the locale has case."""
        entry = self._entry()
        message = self.format(key, values)
        if not entry.upper_case or not isinstance(message, str):
            return message
        return message.upper()
