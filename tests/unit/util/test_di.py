"""Unit tests for provider selection and the production container."""

import pytest

from hub.application.store import CommentStore
from hub.domain.repository import CommentRepository
from hub.adapter.http.repository import HttpCommentRepository
from hub.util.di import ApiProvider, ProdApiProvider, ProdConfigProvider, get_provider
from hub.util.di.container import create_container
from tests.di import MockApiProvider


class TestGetProvider:
    """Tests for get_provider."""

    def test_concrete_provider_used_as_is(self):
        assert get_provider(ProdConfigProvider) is ProdConfigProvider

    def test_selects_by_mock_flag(self):
        assert get_provider(ApiProvider, use_mock=False) is ProdApiProvider
        assert get_provider(ApiProvider, use_mock=True) is MockApiProvider


class TestCreateContainer:
    """Tests for the production container."""

    @pytest.mark.asyncio
    async def test_wires_http_repositories(self, monkeypatch: pytest.MonkeyPatch):
        """Stores resolve against HTTP repositories; nothing is sent until used."""
        monkeypatch.setenv("API__BASE_URL", "http://hub.test/api")
        container = create_container()
        try:
            repository = await container.get(CommentRepository)
            store = await container.get(CommentStore)
        finally:
            await container.close()

        assert isinstance(repository, HttpCommentRepository)
        assert store.comment_repository is repository
