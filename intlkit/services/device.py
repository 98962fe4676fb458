"""Best-effort detection of the platform locale."""

import locale
import logging
import os

_log = logging.getLogger(__name__)

_ENV_VARS = ("LC_ALL", "LC_MESSAGES", "LANG")


def _strip(value: str) -> str:
    # "en_US.UTF-8" / "de_DE@euro" -> "en_US" / "de_DE"
    return value.split(".", 1)[0].split("@", 1)[0]


def primary_device_locale() -> str | None:
    """Return the raw primary locale of the device, e.g. ``"en_US"``.

    The value is not validated; callers match it against supported locales.
    """
    try:
        name = locale.getlocale()[0]
    except ValueError:
        _log.debug("Unparseable process locale", exc_info=True)
        name = None
    if name and name not in ("C", "POSIX"):
        return _strip(name)

    for var in _ENV_VARS:
        value = os.environ.get(var)
        if value and value not in ("C", "POSIX"):
            return _strip(value)
    return None
