"""
API routes for railway queries.

Each route only parses query parameters and calls the service layer;
no graph logic lives here.
"""
from typing import Optional

from fastapi import APIRouter, Depends, Query, Request

from kiwiland.domain.errors import InvalidArgumentError
from kiwiland.services import RailwayQueryService

NO_SUCH_ROUTE = "NO SUCH ROUTE"

router = APIRouter()


def get_service(request: Request) -> RailwayQueryService:
    return request.app.state.service


@router.get("/health")
async def health():
    return {"ok": True}


@router.get("/distance")
def route_distance(
    path: str = "",
    service: RailwayQueryService = Depends(get_service),
):
    """
    Distance along an exact route.

    GET /distance?path=A-B-C -> { "distance": 9 } or { "error": "NO SUCH ROUTE" }
    """
    if not path.strip():
        raise InvalidArgumentError(
            "path query param required, e.g. A-B-C", argument="path"
        )
    result = service.distance(path)
    if not result.found:
        return {"error": NO_SUCH_ROUTE}
    return {"distance": result.distance}


@router.get("/trips/stops")
def trips_by_stops(
    start: str = "",
    end: str = "",
    exact_stops: Optional[int] = Query(None, alias="exactStops"),
    max_stops: Optional[int] = Query(None, alias="maxStops"),
    service: RailwayQueryService = Depends(get_service),
):
    """
    Number of trips constrained by stops.

    GET /trips/stops?start=C&end=C&maxStops=3
    GET /trips/stops?start=A&end=C&exactStops=4
    """
    if not start.strip() or not end.strip():
        raise InvalidArgumentError("start and end are required", argument="start/end")
    result = service.trips_by_stops(
        start, end, exact_stops=exact_stops, max_stops=max_stops
    )
    return {"count": result.count}


@router.get("/shortest")
def shortest_route(
    start: str = "",
    end: str = "",
    service: RailwayQueryService = Depends(get_service),
):
    """
    Length of the shortest route (shortest cycle when start == end).

    GET /shortest?start=A&end=C
    """
    if not start.strip() or not end.strip():
        raise InvalidArgumentError("start and end are required", argument="start/end")
    result = service.shortest(start, end)
    if not result.found:
        return {"error": NO_SUCH_ROUTE}
    return {"distance": result.distance}


@router.get("/routes/max-distance")
def routes_by_max_distance(
    start: str = "",
    end: str = "",
    threshold: Optional[float] = None,
    service: RailwayQueryService = Depends(get_service),
):
    """
    Number of routes shorter than a threshold.

    GET /routes/max-distance?start=C&end=C&threshold=30
    """
    if not start.strip() or not end.strip() or threshold is None:
        raise InvalidArgumentError(
            "start, end, threshold are required", argument="start/end/threshold"
        )
    result = service.routes_within(start, end, threshold)
    return {"count": result.count}
