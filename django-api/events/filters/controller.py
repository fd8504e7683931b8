"""Search/filter controller for the dashboard event list.

Text input is debounced before it reaches the URL; the sport selector
navigates straight away. Both preserve the other query parameters.
"""

import logging
from collections.abc import Callable, Mapping
from urllib.parse import urlencode

from django.conf import settings

from events.domain import ALL_SPORTS
from events.filters.scheduler import Scheduler, TimerHandle

logger = logging.getLogger(__name__)

SEARCH_PARAM = "search"
SPORT_TYPE_PARAM = "sport_type"

Navigate = Callable[..., None]


def with_param(params: Mapping[str, str], name: str, value: str | None) -> dict[str, str]:
    """Return a copy of params with name set, or removed when value is empty or "all"."""
    updated = dict(params)
    if value and value != ALL_SPORTS:
        updated[name] = value
    else:
        updated.pop(name, None)
    return updated


def build_query_string(params: Mapping[str, str], name: str, value: str | None) -> str:
    return urlencode(with_param(params, name, value))


class SearchFilterController:
    """Turns search and sport input into list-view navigations.

    navigate is called as navigate(url, scroll=False). The controller owns
    at most one pending timer and cancels it on close().
    """

    def __init__(
        self,
        params: Mapping[str, str],
        navigate: Navigate,
        scheduler: Scheduler,
        delay: float | None = None,
        path: str = "/dashboard",
    ) -> None:
        self._params = dict(params)
        self._navigate = navigate
        self._scheduler = scheduler
        self._delay = settings.SEARCH_DEBOUNCE_SECONDS if delay is None else delay
        self._path = path
        self._pending: TimerHandle | None = None
        self._closed = False
        self.search = self._params.get(SEARCH_PARAM, "")
        self.debounced_search = self.search

    @property
    def params(self) -> dict[str, str]:
        return dict(self._params)

    @property
    def sport_type(self) -> str:
        return self._params.get(SPORT_TYPE_PARAM, ALL_SPORTS)

    def on_search_change(self, value: str) -> None:
        if self._closed:
            return
        self.search = value
        self._cancel_pending()
        self._pending = self._scheduler.call_later(self._delay, self._flush_search)

    def on_sport_change(self, value: str) -> None:
        if self._closed:
            return
        self._push(SPORT_TYPE_PARAM, value)

    def close(self) -> None:
        """Tear down: drop any pending navigation."""
        self._cancel_pending()
        self._closed = True

    def _cancel_pending(self) -> None:
        if self._pending is not None:
            self._pending.cancel()
            self._pending = None

    def _flush_search(self) -> None:
        self._pending = None
        if self._closed:
            return
        self.debounced_search = self.search
        if self.debounced_search != self._params.get(SEARCH_PARAM, ""):
            self._push(SEARCH_PARAM, self.debounced_search)

    def _push(self, name: str, value: str | None) -> None:
        self._params = with_param(self._params, name, value)
        url = f"{self._path}?{urlencode(self._params)}"
        logger.debug("navigating to %s", url)
        self._navigate(url, scroll=False)
