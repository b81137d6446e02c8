"""Pydantic schemas for the navigator."""

from pydantic import BaseModel

from domain.services.navigation import ScreenLayout


class RouteResponse(BaseModel):
    name: str
    title: str
    header_shown: bool


class NavigationResponse(BaseModel):
    """Screen tree the client should render right now."""

    screen: str
    initial_route: str
    routes: list[RouteResponse]

    @classmethod
    def from_layout(cls, layout: ScreenLayout) -> "NavigationResponse":
        return cls(
            screen=layout.tree.value,
            initial_route=layout.initial_route,
            routes=[
                RouteResponse(name=r.name, title=r.title, header_shown=r.header_shown)
                for r in layout.routes
            ],
        )
