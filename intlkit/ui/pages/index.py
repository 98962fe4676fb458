"""Index page: language switcher and locale-aware refresh tip."""

import reflex as rx

from intlkit.ui.components.language_switcher import language_switcher
from intlkit.ui.state.i18n_state import I18nState
from intlkit.ui.state.tip_state import TipState

_t = I18nState.translations


def tip_card() -> rx.Component:
    return rx.card(
        rx.vstack(
            rx.text(TipState.update_text, size="3"),
            rx.button(
                _t["正在刷新"],
                on_click=TipState.refresh,
                size="2",
            ),
            spacing="3",
            width="100%",
        ),
        width="100%",
    )


def index_page() -> rx.Component:
    return rx.container(
        rx.vstack(
            rx.hstack(
                rx.text(_t["语言"], size="2", weight="medium"),
                rx.box(language_switcher(), width="160px"),
                spacing="3",
                align="center",
            ),
            tip_card(),
            rx.link(I18nState.current_language, href=I18nState.home_url),
            spacing="4",
            width="100%",
        ),
        padding="24px",
    )
