from __future__ import annotations

from fastapi import APIRouter, Depends, Form, Request
from fastapi.responses import HTMLResponse, RedirectResponse

from weather_map import contracts
from weather_map.controller import SearchController
from weather_map.page import render_page


router = APIRouter()
page_router = APIRouter()


def get_controller(request: Request) -> SearchController:
    return request.app.state.controller


@router.post("/search")
async def search(
    search_request: contracts.SearchRequest,
    controller: SearchController = Depends(get_controller),
) -> contracts.SearchOutcome:
    outcome = await controller.submit(search_request.location)
    return controller.snapshot(outcome)


@router.get("/history")
async def search_history(
    controller: SearchController = Depends(get_controller),
) -> contracts.SearchHistory:
    return contracts.SearchHistory(searches=controller.search_log.list())


@router.get("/map")
async def map_state(
    controller: SearchController = Depends(get_controller),
) -> contracts.MapState:
    return controller.map_view.state()


@page_router.get("/", response_class=HTMLResponse)
async def index(
    controller: SearchController = Depends(get_controller),
) -> str:
    return render_page(controller)


@page_router.post("/search")
async def submit_form(
    location: str = Form('', alias='areaInput'),
    controller: SearchController = Depends(get_controller),
) -> RedirectResponse:
    await controller.submit(location)
    return RedirectResponse("/", status_code=303)
