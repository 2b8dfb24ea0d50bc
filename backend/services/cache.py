"""Single-entry in-memory cache for the place summary. No Redis needed.

Note: The cache lives in module state, so it survives between invocations
only while the execution context stays warm. Each Lambda execution context
(and each uvicorn worker when running locally) has its own copy, and data
may be fetched once per context. There is no coherency between them.

Invocations inside one context never overlap, so reads and writes are not
locked. Revisit that if the handler is ever served from a threaded or async
server that interleaves requests.
"""

from typing import Any


class PlaceCache:
    def __init__(self):
        self._timestamp: int = 0
        self._data: Any | None = None

    @property
    def timestamp(self) -> int:
        return self._timestamp

    @property
    def data(self) -> Any | None:
        return self._data

    def get_fresh(self, now: int, max_age: int) -> Any | None:
        """Return the cached data if it is younger than max_age seconds."""
        if self._data is not None and (now - self._timestamp) < max_age:
            return self._data
        return None

    def store(self, now: int, data: Any) -> None:
        self._timestamp = now
        self._data = data

    def clear(self) -> None:
        self._timestamp = 0
        self._data = None


cache = PlaceCache()
