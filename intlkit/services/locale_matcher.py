"""Resolve arbitrary locale candidates to a supported locale identifier."""

from intlkit.i18n import PRIMARY_LOCALE, LocaleRegistry, get_registry
from intlkit.services.device import primary_device_locale


def match_locale(
    candidate: object,
    fallback: str = PRIMARY_LOCALE,
    registry: LocaleRegistry | None = None,
) -> str:
    """Return the first registered locale whose matcher accepts ``candidate``.

    Non-string candidates and candidates no locale accepts resolve to ``fallback``.
    """
    if not isinstance(candidate, str):
        return fallback
    registry = registry or get_registry()
    for entry in registry:
        if entry.match(candidate):
            return entry.name
    return fallback


def get_device_locale(
    fallback: str = PRIMARY_LOCALE,
    registry: LocaleRegistry | None = None,
) -> str:
    """Match the device locale, falling back to ``fallback``."""
    return match_locale(primary_device_locale(), fallback, registry)
