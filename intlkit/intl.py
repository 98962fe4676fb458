"""Application-wide locale controller, initialized on import before any page renders."""

from intlkit import hooks
from intlkit.services.locale_controller import LocaleController
from intlkit.services.route_params import set_common_params


def _update_route_params(locale: str, **kwargs) -> None:
    set_common_params(locale=locale)


controller = LocaleController()
hooks.on(hooks.LOCALE_CHANGED, _update_route_params)
controller.start()

format = controller.formatter
upper = controller.formatter.upper
upper_all = controller.formatter.upper_all
get_locale = controller.get_locale
set_locale = controller.set_locale
