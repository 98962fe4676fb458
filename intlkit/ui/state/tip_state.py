"""Refresh tip: last update time formatted in the active locale."""

from datetime import datetime

import reflex as rx

from intlkit import intl


def _update_text(refreshed_at: str) -> str:
    if refreshed_at:
        return intl.upper("更新时间", {"time": refreshed_at})
    return intl.upper("更新时间未知")


class TipState(rx.State):
    refreshing: bool = False
    refreshed_at: str = ""
    update_text: str = ""

    def load_tip(self):
        self.update_text = _update_text(self.refreshed_at)

    def refresh(self):
        self.refreshed_at = datetime.now().strftime("%H:%M:%S")
        self.update_text = _update_text(self.refreshed_at)
