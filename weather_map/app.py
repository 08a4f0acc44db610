from __future__ import annotations

import copy
import logging.config

from fastapi import FastAPI

from config.settings import app_settings
from weather_map.api.search import page_router, router as search_router
from weather_map.controller import SearchController
from weather_map.display import AlertArea, HistoryDisplay
from weather_map.history import JSONFileStore, KeyValueStore, SearchLog
from weather_map.lookup import RemoteWeatherLookup, WeatherLookup
from weather_map.map_view import MapView

logger = logging.getLogger(__name__)

logging_config = {
    "version": 1,
    "disable_existing_loggers": False,
    "formatters": {
        "default": {
            "format": "%(asctime)s %(levelname)s %(name)s: %(message)s",
        },
    },
    "handlers": {
        "console": {
            "class": "logging.StreamHandler",
            "level": app_settings.log_level,
            "formatter": "default",
        },
    },
    "root": {
        "handlers": ["console"],
        "level": app_settings.log_level,
    },
}


class AppBuilder:
    def __init__(self):
        self._app = FastAPI(title="Weather Map")
        self._api_prefix = "/api"
        self._log_to_file = False
        self._log_file_path = None
        self._file_log_level = None
        self._store: KeyValueStore | None = None
        self._weather_lookup: WeatherLookup | None = None

    def set_api_prefix(self, prefix: str) -> AppBuilder:
        self._api_prefix = prefix
        return self

    def enable_file_logging(self, filename: str, log_level: str) -> AppBuilder:
        self._log_to_file = True
        self._log_file_path = filename
        self._file_log_level = log_level
        return self

    def set_store(self, store: KeyValueStore) -> AppBuilder:
        self._store = store
        return self

    def set_weather_lookup(self, weather_lookup: WeatherLookup) -> AppBuilder:
        self._weather_lookup = weather_lookup
        return self

    def _configure_file_logging(self):
        config = copy.deepcopy(logging_config)
        config['handlers']['file'] = {
            "class": "logging.FileHandler",
            "level": self._file_log_level,
            "filename": self._log_file_path,
            "formatter": "default",
        }
        config['root']['handlers'].append('file')
        logging.config.dictConfig(config)

    def _build_controller(self) -> SearchController:
        store = self._store or JSONFileStore(app_settings.storage_path)
        weather_lookup = self._weather_lookup or RemoteWeatherLookup(
            app_settings.lookup_url
        )
        map_view = MapView.initialize(
            center=(app_settings.map_center_lat, app_settings.map_center_long),
            zoom=app_settings.map_zoom,
            tile_url=app_settings.tile_url,
            max_zoom=app_settings.tile_max_zoom,
        )
        controller = SearchController(
            weather_lookup=weather_lookup,
            search_log=SearchLog(store, app_settings.history_key),
            map_view=map_view,
            alert=AlertArea(),
            history_display=HistoryDisplay(),
            result_zoom=app_settings.result_zoom,
            icon_url_template=app_settings.icon_url_template,
        )
        try:
            controller.start()
        except Exception:
            logger.exception('Failed to load search history')
        return controller

    def build(self) -> FastAPI:
        if self._log_to_file:
            self._configure_file_logging()
        self._app.state.controller = self._build_controller()
        self._app.include_router(
            search_router, prefix=self._api_prefix, tags=['WeatherSearch']
        )
        self._app.include_router(page_router, tags=['Page'])
        return self._app


def create_app() -> FastAPI:
    logging.config.dictConfig(logging_config)
    builder = AppBuilder().set_api_prefix(app_settings.api_prefix)
    if app_settings.enable_file_logging:
        builder.enable_file_logging(
            filename=app_settings.log_file_path,
            log_level=app_settings.log_level,
        )
    app = builder.build()
    return app
