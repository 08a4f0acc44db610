from __future__ import annotations

import logging
from abc import ABC, abstractmethod

import httpx

from weather_map.contracts import WeatherResult
from weather_map.errors import LookupTransportError


logger = logging.getLogger(__name__)


class WeatherLookup(ABC):
    @abstractmethod
    async def lookup(self, location: str) -> WeatherResult:
        pass  # pragma: no cover


class RemoteWeatherLookup(WeatherLookup):
    def __init__(self, url: str) -> None:
        self.url = url

    async def lookup(self, location: str) -> WeatherResult:
        logger.debug('Looking up weather for %r', location)
        try:
            async with httpx.AsyncClient(
                timeout=None, follow_redirects=True
            ) as client:
                response = await client.post(
                    self.url, json={'location': location}
                )
                data = response.json()
            return WeatherResult.model_validate(data)
        except httpx.HTTPError as exc:
            raise LookupTransportError(str(exc) or type(exc).__name__) from exc
        except ValueError as exc:
            raise LookupTransportError(str(exc)) from exc
