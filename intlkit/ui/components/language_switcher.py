"""Compact language switcher labelled with each language's own name."""

import reflex as rx

from intlkit import intl
from intlkit.i18n import LANGUAGE_NAMES, SUPPORTED_LOCALES
from intlkit.ui.state.i18n_state import I18nState


def language_options() -> list[tuple[str, str]]:
    """(label, locale tag) pairs in registry order."""
    return [(intl.format(LANGUAGE_NAMES[tag]), tag) for tag in SUPPORTED_LOCALES]


def language_switcher() -> rx.Component:
    return rx.select.root(
        rx.select.trigger(width="100%"),
        rx.select.content(
            *[rx.select.item(label, value=tag) for label, tag in language_options()],
        ),
        value=I18nState.locale,
        on_change=I18nState.set_locale,
        size="1",
    )
