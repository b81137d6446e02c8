"""Screen routing as a pure function of the session state."""

from dataclasses import dataclass
from enum import StrEnum

from domain.entities.session import SessionSnapshot
from domain.entities.user import UserRecord


class ScreenTree(StrEnum):
    """Top-level screen trees the app can show."""

    SPLASH = "splash"
    AUTH_STACK = "auth"
    APP_TABS = "app"


@dataclass(frozen=True, slots=True)
class Route:
    name: str
    title: str
    header_shown: bool = True


@dataclass(frozen=True, slots=True)
class ScreenLayout:
    tree: ScreenTree
    routes: tuple[Route, ...]

    @property
    def initial_route(self) -> str:
        return self.routes[0].name


LAYOUTS: dict[ScreenTree, ScreenLayout] = {
    ScreenTree.SPLASH: ScreenLayout(
        tree=ScreenTree.SPLASH,
        routes=(Route("Splash", "", header_shown=False),),
    ),
    ScreenTree.AUTH_STACK: ScreenLayout(
        tree=ScreenTree.AUTH_STACK,
        routes=(
            Route("Login", "Login", header_shown=False),
            Route("Register", "User Registration"),
        ),
    ),
    ScreenTree.APP_TABS: ScreenLayout(
        tree=ScreenTree.APP_TABS,
        routes=(
            Route("Home", "Home"),
            Route("Profile", "My Profile"),
        ),
    ),
}


def resolve_screen(user: UserRecord | None, show_splash: bool) -> ScreenTree:
    """Splash first, then the app tabs for a logged-in user, else the auth stack."""
    if show_splash:
        return ScreenTree.SPLASH
    return ScreenTree.APP_TABS if user is not None else ScreenTree.AUTH_STACK


def layout_for(snapshot: SessionSnapshot) -> ScreenLayout:
    return LAYOUTS[resolve_screen(snapshot.user, snapshot.show_splash)]
