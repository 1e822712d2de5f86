from __future__ import annotations

import asyncio
import logging
import uuid
from typing import Any, Awaitable, Callable, List, Optional, Set

from models import Widget
from settings import Settings
from .api import TransportError, WidgetsApi

logger = logging.getLogger(__name__)

Listener = Callable[["WidgetsState"], None]


class WidgetsState:
    """
    Client-side copy of the widget list with optimistic mutations.

    Every mutation changes `widgets` before its request is sent, then:
      - add / delete: revert to the snapshot taken before the change if the request fails
      - update: keep the optimistic text (unless revert_failed_updates is set)
    `widgets` is always replaced, never mutated in place, so snapshots stay valid.
    """

    def __init__(
        self,
        api: WidgetsApi,
        *,
        revert_failed_updates: bool = False,
        id_factory: Optional[Callable[[], str]] = None,
    ):
        self.api = api
        self.widgets: List[Widget] = []
        self.loading = True
        self.revert_failed_updates = revert_failed_updates
        self.pending: Set[asyncio.Task] = set()
        self._id_factory = id_factory or (lambda: str(uuid.uuid4()))
        self._load_started = False
        self._listeners: List[Listener] = []

    @classmethod
    def from_settings(cls, settings: Settings, session: Any = None) -> "WidgetsState":
        api = WidgetsApi(settings.api_base_url, session=session, timeout=settings.request_timeout)
        return cls(api, revert_failed_updates=settings.revert_failed_updates)

    # --- change notifications ------------------
    def subscribe(self, listener: Listener) -> Callable[[], None]:
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def _notify(self) -> None:
        for listener in list(self._listeners):
            listener(self)

    def _set_widgets(self, widgets: List[Widget]) -> None:
        self.widgets = list(widgets)
        self._notify()

    def find(self, widget_id: str) -> Optional[Widget]:
        return next((w for w in self.widgets if w.id == widget_id), None)

    # --- fire-and-forget helpers ------
    def fire(self, action: Awaitable[Any]) -> asyncio.Task:
        """Schedule a mutation without waiting for it; must be called inside a running loop."""
        task = asyncio.ensure_future(action)
        self.pending.add(task)
        task.add_done_callback(self.pending.discard)
        return task

    async def drain(self) -> None:
        while self.pending:
            await asyncio.gather(*list(self.pending))

    async def _call(self, fn: Callable[..., Any], *args: Any) -> Any:
        # requests blocks, keep it off the loop
        return await asyncio.to_thread(fn, *args)

    # --- operations ------
    async def load(self) -> None:
        if self._load_started:
            return
        self._load_started = True

        try:
            data = await self._call(self.api.get_widgets)
            self.widgets = list(data)
        except TransportError as e:
            logger.error("Failed to load widgets: %s", e)
        finally:
            self.loading = False
            self._notify()

    async def add_widget(self) -> Widget:
        previous = self.widgets
        widget = Widget(id=self._id_factory(), text="")
        self._set_widgets([*previous, widget])

        try:
            await self._call(self.api.save_widget, widget)
        except TransportError as e:
            logger.error("Failed to create widget: %s", e)
            self._set_widgets(previous)
        return widget

    async def update_widget(self, updated: Widget) -> None:
        previous = self.widgets
        self._set_widgets([updated if w.id == updated.id else w for w in previous])

        try:
            await self._call(self.api.save_widget, updated)
        except TransportError as e:
            logger.error("Failed to update widget: %s", e)
            if self.revert_failed_updates:
                self._set_widgets(previous)

    async def delete_widget(self, widget_id: str) -> None:
        previous = self.widgets
        self._set_widgets([w for w in previous if w.id != widget_id])

        try:
            await self._call(self.api.delete_widget, widget_id)
        except TransportError as e:
            logger.error("Failed to delete widget: %s", e)
            self._set_widgets(previous)
