from __future__ import annotations

from weather_map.history import SearchLog


class AlertArea:
    def __init__(self) -> None:
        self.text = ''

    def show(self, message: str) -> None:
        self.text = message


class HistoryDisplay:
    def __init__(self) -> None:
        self.text = ''

    def refresh(self, search_log: SearchLog) -> str:
        self.text = ', '.join(search_log.list())
        return self.text
