"""Unit tests for the application factory."""

from dishka import AsyncContainer

from forum.interface.api.app import create_app
from forum.util.di import PersistenceProvider, ProdPersistenceProvider, get_provider
from tests.di import build_test_container


class TestCreateApp:
    """Tests for create_app."""

    def test_default_container_is_production(self):
        """Without a container the app wires the production providers."""
        app_instance = create_app()

        assert isinstance(app_instance.state.dishka_container, AsyncContainer)
        assert (
            get_provider(PersistenceProvider, use_mock=False) is ProdPersistenceProvider
        )

    def test_given_container_is_used(self):
        container = build_test_container()

        app_instance = create_app(container)

        assert app_instance.state.dishka_container is container

    def test_routes_registered(self):
        app_instance = create_app(build_test_container())

        paths = {route.path for route in app_instance.routes}

        assert {
            "/health",
            "/threads",
            "/threads/{thread_id}",
            "/threads/{thread_id}/comments",
            "/threads/{thread_id}/comments/{comment_id}",
            "/threads/{thread_id}/comments/{comment_id}/replies",
            "/threads/{thread_id}/comments/{comment_id}/replies/{reply_id}",
            "/threads/{thread_id}/comments/{comment_id}/likes",
        } <= paths
