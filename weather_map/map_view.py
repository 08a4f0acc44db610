from __future__ import annotations

import json
from dataclasses import dataclass, field

from weather_map.contracts import MapState, MarkerState, WeatherResult


MAP_ELEMENT_ID = 'map'
LEAFLET_VERSION = '1.9.4'


@dataclass(frozen=True)
class TileLayer:
    url: str
    max_zoom: int


@dataclass
class Marker:
    lat: float
    long: float
    popup_html: str
    popup_open: bool = True


@dataclass
class MapView:
    center: tuple[float, float]
    zoom: int
    tile_layer: TileLayer
    element_id: str = MAP_ELEMENT_ID
    markers: list[Marker] = field(default_factory=list)

    @classmethod
    def initialize(
        cls,
        center: tuple[float, float],
        zoom: int,
        tile_url: str,
        max_zoom: int,
    ) -> MapView:
        return cls(
            center=center, zoom=zoom, tile_layer=TileLayer(tile_url, max_zoom)
        )

    def recenter(self, lat: float, long: float, zoom: int) -> None:
        self.center = (lat, long)
        self.zoom = zoom

    def add_marker(self, lat: float, long: float, popup_html: str) -> Marker:
        for marker in self.markers:
            marker.popup_open = False
        marker = Marker(lat, long, popup_html)
        self.markers.append(marker)
        return marker

    def state(self) -> MapState:
        return MapState(
            center=self.center,
            zoom=self.zoom,
            markers=[
                MarkerState(
                    lat=marker.lat,
                    long=marker.long,
                    popup_html=marker.popup_html,
                    popup_open=marker.popup_open,
                )
                for marker in self.markers
            ],
        )

    def render(self) -> str:
        markers = [
            {
                'lat': marker.lat,
                'long': marker.long,
                'popup': marker.popup_html,
                'open': marker.popup_open,
            }
            for marker in self.markers
        ]
        return f"""
<link rel="stylesheet" href="https://unpkg.com/leaflet@{LEAFLET_VERSION}/dist/leaflet.css"/>
<script src="https://unpkg.com/leaflet@{LEAFLET_VERSION}/dist/leaflet.js"></script>
<script>
  var map = L.map({_script_json(self.element_id)}).setView({_script_json(list(self.center))}, {self.zoom});
  L.tileLayer({_script_json(self.tile_layer.url)}, {{ maxZoom: {self.tile_layer.max_zoom} }}).addTo(map);
  var markers = {_script_json(markers)};
  markers.forEach(function(m) {{
    var marker = L.marker([m.lat, m.long]).addTo(map).bindPopup(m.popup);
    if (m.open) {{ marker.openPopup(); }}
  }});
</script>
"""


def _script_json(value) -> str:
    return json.dumps(value).replace('</', '<\\/')


def _format_number(value: float | None) -> str:
    if value is None:
        return ''
    if value.is_integer():
        return str(int(value))
    return repr(value)


def weather_popup(result: WeatherResult, icon_url_template: str) -> str:
    icon_url = icon_url_template.format(icon=result.icon or '')
    return f"""
<div>
  <h4> {result.name or ''} </h4>
  <img src="{icon_url}">
  <p>Temperature: {_format_number(result.temperature)}°F</p>
  <p>Wind Speed: {_format_number(result.wind_speed)} mph</p>
  <p>Description: {result.description or ''}</p>
</div>
"""
