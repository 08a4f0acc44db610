from __future__ import annotations

import html

from weather_map.controller import SearchController


PAGE_TEMPLATE = """<!DOCTYPE html>
<html>
<head>
  <meta charset="utf-8">
  <title>Weather Map</title>
  <style>
    #map {{ height: 480px; }}
    #alert {{ color: #b00020; min-height: 1.2em; }}
  </style>
</head>
<body>
  <form method="post" action="/search">
    <input type="text" id="areaInput" name="areaInput" placeholder="Search a location">
    <button type="submit" id="submit">Search</button>
  </form>
  <p id="alert">{alert}</p>
  <p>Previous searches: <span id="previousSearches">{history}</span></p>
  <div id="{map_element}"></div>
  {map_script}
</body>
</html>
"""


def render_page(controller: SearchController) -> str:
    return PAGE_TEMPLATE.format(
        alert=html.escape(controller.alert.text),
        history=html.escape(controller.history_display.text),
        map_element=controller.map_view.element_id,
        map_script=controller.map_view.render(),
    )
