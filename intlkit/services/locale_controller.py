"""Active locale ownership: startup resolution, persistence and change announcements.

Startup order is configured default, then device locale (when enabled), then the
persisted locale once the application has mounted (when persistence is enabled).
A persisted value is applied asynchronously and never blocks startup.

The deferred reconciliation and :meth:`LocaleController.set_locale` are not
serialized against each other: whichever completes last decides the active locale.
"""

import asyncio
import enum
import logging
from collections.abc import Callable
from typing import Literal

from intlkit import hooks
from intlkit.config import settings
from intlkit.i18n import PRIMARY_LOCALE, LocaleRegistry, get_registry
from intlkit.services.device import primary_device_locale
from intlkit.services.formatter import Formatter
from intlkit.services.locale_matcher import match_locale
from intlkit.services.notifications import LogNotifier, Notifier
from intlkit.services.storage import LocaleStorage, StorageError, build_storage

_log = logging.getLogger(__name__)


class ControllerState(enum.StrEnum):
    UNINITIALIZED = "uninitialized"
    RESOLVING = "resolving"
    ACTIVE = "active"


class LocaleController:
    def __init__(
        self,
        registry: LocaleRegistry | None = None,
        storage: LocaleStorage | None = None,
        notifier: Notifier | None = None,
        hook_registry: hooks.HookRegistry | None = None,
        device_locale: Callable[[], str | None] = primary_device_locale,
        default_locale: str = "",
        use_device_locale: bool | None = None,
        storage_key: str | Literal[False] | None = None,
        debug: bool | None = None,
    ):
        self.registry = registry or get_registry()
        self.hooks = hook_registry or hooks.registry
        self.notifier = notifier or LogNotifier()
        self.device_locale = device_locale
        self.default_locale = default_locale or settings.intl_default_locale
        self.use_device_locale = (
            settings.intl_device_info if use_device_locale is None else use_device_locale
        )
        self.storage_key = settings.intl_storage_key if storage_key is None else storage_key
        if self.storage_key is not False and storage is None:
            storage = build_storage()
        self.storage = storage

        self.state = ControllerState.UNINITIALIZED
        self._locale = PRIMARY_LOCALE
        self.reconcile_task: asyncio.Task | None = None
        self._pending: set[asyncio.Task] = set()
        self.formatter = Formatter(self.get_locale, self.registry, debug)

    @property
    def persistence_enabled(self) -> bool:
        return self.storage_key is not False

    @property
    def locale(self) -> str:
        return self._locale

    def get_locale(self) -> str:
        return self._locale

    def _match(self, candidate: object, fallback: str) -> str:
        return match_locale(candidate, fallback, self.registry)

    def start(self) -> str:
        """Resolve the initial locale synchronously and return it."""
        if self.state is not ControllerState.UNINITIALIZED:
            return self._locale
        self.state = ControllerState.RESOLVING

        matched = self._match(self.default_locale, "")
        if not matched:
            _log.warning(
                "Default locale %r is not supported, using %s", self.default_locale, PRIMARY_LOCALE
            )
        self._locale = matched or PRIMARY_LOCALE
        if self.use_device_locale:
            self._locale = self._match(self.device_locale(), self._locale)

        self.state = ControllerState.ACTIVE
        if self.persistence_enabled:
            self.hooks.once(hooks.DID_MOUNT, self._schedule_reconcile)
        _log.info("Active locale: %s", self._locale)
        return self._locale

    def _schedule_reconcile(self, **kwargs) -> None:
        self.reconcile_task = asyncio.get_running_loop().create_task(self.reconcile())

    async def reconcile(self) -> None:
        """Apply the persisted locale if it differs from the active one."""
        try:
            value = await self.storage.get(self.storage_key)
        except StorageError:
            _log.debug("Could not read persisted locale", exc_info=True)
            return
        new_locale = self._match(value, self._locale)
        if new_locale == self._locale:
            return
        self._locale = new_locale
        _log.info("Restored persisted locale: %s", new_locale)
        self.hooks.emit(hooks.LOCALE_CHANGED, locale=new_locale)

    def set_locale(
        self, requested: object, notifier: Notifier | None = None
    ) -> asyncio.Task | None:
        """Switch the active locale.

        With persistence enabled the write runs in the background and the
        returned task completes once the change is committed or rejected.
        The controller keeps a reference to the task until it finishes.
        ``notifier`` overrides the controller notifier for this call only.
        """
        if self.state is not ControllerState.ACTIVE:
            raise RuntimeError("LocaleController.start() must run before set_locale()")
        new_locale = self._match(requested, self._locale)
        if new_locale == self._locale:
            return None

        loop = None
        if self.persistence_enabled:
            try:
                loop = asyncio.get_running_loop()
            except RuntimeError as exc:
                raise RuntimeError(
                    "set_locale() needs a running event loop when persistence is enabled"
                ) from exc

        notifier = notifier or self.notifier
        handle = notifier.show_loading(self.formatter.upper("正在设置语言"))
        if loop is None:
            notifier.dismiss(handle)
            self._locale = new_locale
            self.hooks.emit(hooks.LOCALE_CHANGED, locale=new_locale)
            return None

        task = loop.create_task(self._commit(new_locale, handle, notifier))
        self._pending.add(task)
        task.add_done_callback(self._pending.discard)
        return task

    async def _commit(self, new_locale: str, handle: str, notifier: Notifier) -> None:
        try:
            await self.storage.set(self.storage_key, new_locale)
        except StorageError:
            _log.exception("Failed to persist locale %s", new_locale)
            notifier.dismiss(handle)
            notifier.show_failure(self.formatter.upper("设置语言失败"))
            return
        notifier.dismiss(handle)
        self._locale = new_locale
        notifier.show_success(self.formatter.upper("设置语言成功"))
        self.hooks.emit(hooks.LOCALE_CHANGED, locale=new_locale)
