"""Base aggregate store.

A store is the in-memory cache and mutation surface for one entity
collection. UI code reads its attributes and subscribes for changes; it
never mutates store state directly.

Failure semantics shared by every store:
- fetches record a user-facing message in `error` and never raise on
  request failure;
- mutations leave state untouched on failure and re-raise to the caller;
- nothing is retried.

List fetches are fenced: each fetch on a channel takes a sequence number
and a response is applied only if no newer fetch was issued on that
channel meanwhile. Stale responses are discarded.
"""

from collections.abc import Awaitable, Callable
from typing import Optional, TypeVar

import logfire

from hub.adapter.error import AdapterError, error_message

T = TypeVar("T")

Listener = Callable[["Store"], None]


class Store:
    """Base class for all aggregate stores."""

    name = "store"

    def __init__(self) -> None:
        self.error: Optional[str] = None
        self._saving = 0
        self._listeners: list[Listener] = []
        self._fetch_seq: dict[str, int] = {}
        self._in_flight: set[str] = set()

    @property
    def is_loading(self) -> bool:
        """Whether the latest fetch of any channel is still pending."""
        return bool(self._in_flight)

    @property
    def is_saving(self) -> bool:
        """Whether any mutation is still pending."""
        return self._saving > 0

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """Register a change listener.

        Listeners are called once per completed operation, after all of its
        state changes are applied.

        Returns:
            Callable that removes the listener
        """
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def clear_error(self) -> None:
        self.error = None
        self._notify()

    def reset(self) -> None:
        """Drop all held data and invalidate in-flight fetches."""
        for channel in self._fetch_seq:
            self._fetch_seq[channel] += 1
        self._in_flight.clear()
        self.error = None
        self._saving = 0
        self._reset_state()
        self._notify()

    def _reset_state(self) -> None:
        """Restore subclass state to its initial values."""
        pass

    def _notify(self) -> None:
        for listener in list(self._listeners):
            listener(self)

    async def _fetch(
        self,
        channel: str,
        load: Callable[[], Awaitable[T]],
        apply: Callable[[T], None],
    ) -> bool:
        """Run a fenced fetch.

        Args:
            channel: Fencing channel (fetches on different channels don't race)
            load: Coroutine factory issuing the request
            apply: Applies a successful result to store state

        Returns:
            True if the result was applied, False on failure or staleness
        """
        seq = self._fetch_seq.get(channel, 0) + 1
        self._fetch_seq[channel] = seq
        self._in_flight.add(channel)
        self.error = None
        self._notify()

        try:
            with logfire.span(f"{self.name}.{channel}", seq=seq):
                try:
                    result = await load()
                except AdapterError as e:
                    if self._fetch_seq.get(channel) != seq:
                        logfire.info(
                            "Stale fetch failure discarded",
                            store=self.name,
                            channel=channel,
                        )
                        return False
                    logfire.warn(
                        "Fetch failed", store=self.name, channel=channel, error=str(e)
                    )
                    self.error = error_message(e)
                    return False

                if self._fetch_seq.get(channel) != seq:
                    logfire.info(
                        "Stale fetch result discarded",
                        store=self.name,
                        channel=channel,
                        seq=seq,
                        latest=self._fetch_seq.get(channel),
                    )
                    return False

                apply(result)
                return True
        finally:
            # Only the latest fetch on a channel owns its loading flag
            if self._fetch_seq.get(channel) == seq:
                self._in_flight.discard(channel)
                self._notify()

    async def _mutate(
        self,
        action: str,
        call: Callable[[], Awaitable[T]],
        apply: Callable[[T], None],
    ) -> T:
        """Run a mutation; apply its result only on success.

        Overlapping mutations are counted, so `is_saving` stays set until
        the last one settles.

        Raises:
            AdapterError: Whatever the repository raised, unchanged
        """
        self._saving += 1
        self._notify()
        with logfire.span(f"{self.name}.{action}"):
            try:
                result = await call()
                apply(result)
            except AdapterError as e:
                logfire.warn("Mutation failed", store=self.name, action=action, error=str(e))
                raise
            finally:
                self._saving = max(self._saving - 1, 0)
                self._notify()
        return result
