import reflex as rx

from intlkit.ui.pages.index import index_page
from intlkit.ui.state.i18n_state import I18nState
from intlkit.ui.state.tip_state import TipState

app = rx.App()

app.add_page(
    index_page,
    route="/",
    title="intlkit",
    on_load=[I18nState.did_mount, TipState.load_tip],
)
