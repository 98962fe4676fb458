from unittest.mock import MagicMock

import pytest

from intlkit.hooks import HookRegistry
from intlkit.i18n import load_registry
from intlkit.services.locale_controller import LocaleController
from intlkit.services.storage import MemoryStorage


@pytest.fixture
def registry():
    """Fresh registry so template caches never leak between tests."""
    return load_registry()


@pytest.fixture
def hook_registry():
    return HookRegistry()


@pytest.fixture
def storage():
    return MemoryStorage()


@pytest.fixture
def notifier():
    mock = MagicMock()
    mock.show_loading.return_value = "toast-1"
    return mock


@pytest.fixture
def make_controller(registry, hook_registry, storage, notifier):
    def _make(**kwargs):
        options = {
            "registry": registry,
            "storage": storage,
            "notifier": notifier,
            "hook_registry": hook_registry,
            "device_locale": lambda: None,
            "default_locale": "zh-CN",
            "use_device_locale": False,
            "storage_key": "locale",
            "debug": False,
        }
        options.update(kwargs)
        return LocaleController(**options)

    return _make
