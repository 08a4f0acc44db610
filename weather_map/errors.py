from __future__ import annotations

import logging
from abc import ABC, abstractmethod


class SearchError(Exception, ABC):
    log_level = logging.ERROR

    @property
    @abstractmethod
    def user_message(self) -> str:
        pass  # pragma: no cover


class LookupTransportError(SearchError):
    def __init__(self, detail: str) -> None:
        super().__init__(detail)
        self.detail = detail

    @property
    def user_message(self) -> str:
        return f'Error: {self.detail}'


class LocationNotFound(SearchError):
    log_level = logging.WARNING

    def __init__(self, location: str) -> None:
        super().__init__(f'location not found: {location!r}')
        self.location = location

    @property
    def user_message(self) -> str:
        return 'Location not found'
