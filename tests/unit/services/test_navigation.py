"""Unit tests for the navigator."""

import pytest

from domain.entities.session import SessionSnapshot
from domain.entities.user import UserRecord
from domain.services.navigation import ScreenTree, layout_for, resolve_screen


@pytest.fixture
def user() -> UserRecord:
    return UserRecord(
        id="u-1",
        name="Ana",
        email="ana@x.com",
        password="secret1",
        age=22,
        specialty="software",
    )


class TestResolveScreen:
    def test_splash_wins_over_everything(self, user: UserRecord):
        assert resolve_screen(None, show_splash=True) is ScreenTree.SPLASH
        assert resolve_screen(user, show_splash=True) is ScreenTree.SPLASH

    def test_auth_stack_without_user(self):
        assert resolve_screen(None, show_splash=False) is ScreenTree.AUTH_STACK

    def test_app_tabs_with_user(self, user: UserRecord):
        assert resolve_screen(user, show_splash=False) is ScreenTree.APP_TABS


class TestLayoutFor:
    def test_auth_stack_starts_at_login(self):
        layout = layout_for(SessionSnapshot(user=None, is_loading=False, show_splash=False))

        assert layout.tree is ScreenTree.AUTH_STACK
        assert layout.initial_route == "Login"
        assert [r.name for r in layout.routes] == ["Login", "Register"]
        assert layout.routes[0].header_shown is False

    def test_app_tabs_start_at_home(self, user: UserRecord):
        layout = layout_for(SessionSnapshot(user=user, is_loading=False, show_splash=False))

        assert layout.tree is ScreenTree.APP_TABS
        assert layout.initial_route == "Home"
        assert [r.title for r in layout.routes] == ["Home", "My Profile"]
