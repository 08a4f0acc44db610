from __future__ import annotations

import asyncio
import logging
from enum import Enum

from config.settings import app_settings
from weather_map.contracts import LookupStatus, SearchOutcome, WeatherResult
from weather_map.display import AlertArea, HistoryDisplay
from weather_map.errors import (
    LocationNotFound,
    LookupTransportError,
    SearchError,
)
from weather_map.history import SearchLog
from weather_map.lookup import WeatherLookup
from weather_map.map_view import MapView, weather_popup


logger = logging.getLogger(__name__)


class SearchState(str, Enum):
    IDLE = 'idle'
    SUBMITTING = 'submitting'
    SUCCESS = 'success'
    FAILED = 'failed'


class SearchController:
    def __init__(
        self,
        weather_lookup: WeatherLookup,
        search_log: SearchLog,
        map_view: MapView,
        alert: AlertArea | None = None,
        history_display: HistoryDisplay | None = None,
        result_zoom: int = app_settings.result_zoom,
        icon_url_template: str = app_settings.icon_url_template,
    ) -> None:
        self.weather_lookup = weather_lookup
        self.search_log = search_log
        self.map_view = map_view
        self.alert = alert or AlertArea()
        self.history_display = history_display or HistoryDisplay()
        self.result_zoom = result_zoom
        self.icon_url_template = icon_url_template
        self.state = SearchState.IDLE
        self.last_outcome: SearchState | None = None

    def start(self) -> None:
        self.history_display.refresh(self.search_log)

    def submit(self, location: str) -> asyncio.Task:
        self.state = SearchState.SUBMITTING
        task = asyncio.create_task(self._search(location))
        self.store_search(location)
        return task

    def store_search(self, location: str) -> None:
        self.search_log.append(location)
        self.history_display.refresh(self.search_log)

    async def _search(self, location: str) -> SearchState:
        try:
            result = await self.weather_lookup.lookup(location)
            if result.status is LookupStatus.ERROR:
                raise LocationNotFound(location)
            self._update_map(result)
        except SearchError as exc:
            self._report(exc)
            return self._settle(SearchState.FAILED)
        except Exception as exc:
            logger.exception('Search for %r failed', location)
            error = LookupTransportError(str(exc) or type(exc).__name__)
            self.alert.show(error.user_message)
            return self._settle(SearchState.FAILED)
        return self._settle(SearchState.SUCCESS)

    def _update_map(self, result: WeatherResult) -> None:
        self.map_view.recenter(
            result.latitude, result.longitude, self.result_zoom
        )
        self.map_view.add_marker(
            result.latitude,
            result.longitude,
            weather_popup(result, self.icon_url_template),
        )
        logger.info(
            'Added marker for %r at (%s, %s)',
            result.name,
            result.latitude,
            result.longitude,
        )

    def _report(self, error: SearchError) -> None:
        if isinstance(error, LookupTransportError):
            logger.log(error.log_level, 'Fetch error: %s', error.detail)
        else:
            logger.log(error.log_level, '%s', error)
        self.alert.show(error.user_message)

    def _settle(self, outcome: SearchState) -> SearchState:
        self.last_outcome = outcome
        self.state = SearchState.IDLE
        return outcome

    def snapshot(self, outcome: SearchState | None = None) -> SearchOutcome:
        outcome = outcome or self.last_outcome or SearchState.IDLE
        return SearchOutcome(
            outcome=outcome.value,
            alert=self.alert.text,
            history=self.search_log.list(),
            map=self.map_view.state(),
        )
