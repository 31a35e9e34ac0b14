"""Async event bus — ``asyncio.Queue``-based pub/sub.

Host calls arrive from the NiceGUI page as events and are dispatched, in
order, on the NiceGUI / asyncio event loop.  Dispatch is strictly
sequential, so the countdown timer never sees interleaved calls.

Key behaviours:
* Handlers may be sync or async.
* A handler that raises is **auto-unsubscribed** (logged + removed).
* Bounded queue — on overflow the oldest event is dropped with a warning.
  Host updates carry absolute values, so a dropped tick is harmless.
"""

from __future__ import annotations

import asyncio
import logging
import uuid
from dataclasses import dataclass
from typing import Any, Callable

from countdown_hud.core.models.event import Event

_log = logging.getLogger(__name__)


@dataclass
class _Subscription:
    sub_id: str
    event_type: str
    handler: Callable[..., Any]


class EventBus:
    """Async event bus backed by an :class:`asyncio.Queue`.

    Args:
        queue_size: Maximum number of events queued before overflow handling.
    """

    def __init__(self, queue_size: int = 1000) -> None:
        self._queue_size = queue_size
        self._queue: asyncio.Queue[Event] | None = None
        self._subscriptions: dict[str, _Subscription] = {}
        # event_type → [sub_id, …]  for fast dispatch lookup
        self._type_index: dict[str, list[str]] = {}
        self._consumer_task: asyncio.Task[None] | None = None

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------

    @property
    def is_running(self) -> bool:
        return self._consumer_task is not None

    async def start(self) -> None:
        """Start the background consumer task on the running loop."""
        self._queue = asyncio.Queue(maxsize=self._queue_size)
        self._consumer_task = asyncio.create_task(self._consume(), name="event-bus-consumer")
        _log.info("Event bus started (queue_size=%d)", self._queue_size)

    async def stop(self) -> None:
        """Cancel the consumer task and forget all subscriptions."""
        if self._consumer_task is not None:
            self._consumer_task.cancel()
            try:
                await self._consumer_task
            except asyncio.CancelledError:
                pass
            self._consumer_task = None
        self._subscriptions.clear()
        self._type_index.clear()
        _log.info("Event bus stopped")

    async def drain(self) -> None:
        """Wait until every queued event has been dispatched."""
        assert self._queue is not None, "EventBus.start() has not been called"
        await self._queue.join()

    # ------------------------------------------------------------------
    # Publish
    # ------------------------------------------------------------------

    async def publish(self, event_type: str, payload: dict[str, Any] | None = None) -> None:
        """Enqueue an event (call from async code on the event loop)."""
        event = Event(event_type=event_type, payload=payload or {})
        assert self._queue is not None, "EventBus.start() has not been called"
        try:
            self._queue.put_nowait(event)
        except asyncio.QueueFull:
            try:
                self._queue.get_nowait()
                self._queue.task_done()
            except asyncio.QueueEmpty:
                pass
            _log.warning("Event bus queue overflow — dropped oldest event")
            self._queue.put_nowait(event)

    # ------------------------------------------------------------------
    # Subscribe / unsubscribe
    # ------------------------------------------------------------------

    def subscribe(self, event_type: str, handler: Callable[..., Any]) -> str:
        """Register *handler* for *event_type*, returning a subscription id."""
        sub_id = uuid.uuid4().hex
        self._subscriptions[sub_id] = _Subscription(
            sub_id=sub_id,
            event_type=event_type,
            handler=handler,
        )
        self._type_index.setdefault(event_type, []).append(sub_id)
        return sub_id

    def unsubscribe(self, sub_id: str) -> None:
        """Remove the subscription identified by *sub_id*."""
        sub = self._subscriptions.pop(sub_id, None)
        if sub is None:
            return
        ids = self._type_index.get(sub.event_type)
        if ids and sub_id in ids:
            ids.remove(sub_id)

    # ------------------------------------------------------------------
    # Consumer loop
    # ------------------------------------------------------------------

    async def _consume(self) -> None:
        assert self._queue is not None
        while True:
            event = await self._queue.get()
            try:
                await self._dispatch(event)
            finally:
                self._queue.task_done()

    async def _dispatch(self, event: Event) -> None:
        for sub_id in list(self._type_index.get(event.event_type, [])):
            sub = self._subscriptions.get(sub_id)
            if sub is None:
                continue
            try:
                result = sub.handler(event)
                if asyncio.iscoroutine(result):
                    await result
            except Exception:
                _log.exception(
                    "Handler %s for '%s' raised — auto-unsubscribing",
                    sub.handler,
                    event.event_type,
                )
                self.unsubscribe(sub_id)

