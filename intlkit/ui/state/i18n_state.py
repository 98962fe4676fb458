"""i18n state: mirrors the active locale and its resolved translations."""

import reflex as rx

from intlkit import hooks, intl
from intlkit.i18n import LANGUAGE_NAMES, get_translations
from intlkit.services.route_params import build_url
from intlkit.ui.notifier import ToastNotifier
from intlkit.ui.state.tip_state import TipState


def _current_language(locale: str) -> str:
    return intl.format("当前语言", {"name": intl.format(LANGUAGE_NAMES[locale])})


def _sync(state) -> None:
    state.locale = intl.get_locale()
    state.translations = get_translations(state.locale)
    state.current_language = _current_language(state.locale)
    state.home_url = build_url("/")


class I18nState(rx.State):
    locale: str = intl.get_locale()
    translations: dict[str, str] = get_translations(intl.get_locale())
    current_language: str = _current_language(intl.get_locale())
    home_url: str = "/"

    async def did_mount(self):
        intl.controller.hooks.emit(hooks.DID_MOUNT)
        task = intl.controller.reconcile_task
        if task is not None:
            await task
        _sync(self)

    async def set_locale(self, locale: str):
        notifier = ToastNotifier()
        task = intl.set_locale(locale, notifier=notifier)
        yield notifier.drain()
        if task is not None:
            await task
        _sync(self)
        yield [*notifier.drain(), TipState.load_tip]
