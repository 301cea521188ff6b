"""Unit tests for the DI container wiring."""

import pytest

from coves.adapter.coves import CovesCommentSource, MockCommentSource
from coves.application.session import ThreadSessionCache
from coves.application.usecase.thread import (
    FocusThreadUseCase,
    GetThreadRequest,
    GetThreadUseCase,
)
from coves.domain.repository import CommentSource
from coves.domain.service import ThreadRenderService
from coves.util.di import CovesProvider, ProdCovesProvider, get_provider
from tests.conftest import POST_URI, make_comment
from tests.di import MockCovesProvider, build_test_container
from tests.harness import create_env_fixture

unit_env = create_env_fixture()
e2e_env = create_env_fixture(unmock={"coves"})


class TestContainer:
    """Tests for test container assembly."""

    @pytest.mark.asyncio
    async def test_mock_comment_source_by_default(self, unit_env):
        source = await unit_env.get(CommentSource)

        assert isinstance(source, MockCommentSource)

    @pytest.mark.asyncio
    async def test_unmocked_comment_source(self, e2e_env):
        source = await e2e_env.get(CommentSource)

        assert isinstance(source, CovesCommentSource)

    @pytest.mark.asyncio
    async def test_use_cases_share_app_scoped_source(self, unit_env):
        # Arrange
        source = await unit_env.get(CommentSource)
        source.seed(POST_URI, [make_comment("c0")])
        use_case = await unit_env.get(GetThreadUseCase)

        # Act
        response = await use_case.execute(GetThreadRequest(post_uri=POST_URI))

        # Assert
        assert [row.comment.comment_id for row in response.rows] == ["c0"]

    @pytest.mark.asyncio
    async def test_resolves_services(self, unit_env):
        render_service = await unit_env.get(ThreadRenderService)
        cache = await unit_env.get(ThreadSessionCache)
        focus_use_case = await unit_env.get(FocusThreadUseCase)

        assert render_service.max_depth == 6
        assert cache.max_size == 15
        assert focus_use_case.render_service is render_service

    @pytest.mark.asyncio
    async def test_cache_sessions_use_container_source(self, unit_env):
        source = await unit_env.get(CommentSource)
        source.seed(POST_URI, [make_comment("c0")])
        cache = await unit_env.get(ThreadSessionCache)

        session = cache.acquire(POST_URI)
        await session.refresh()

        assert [c.id for c in session.comments] == ["c0"]

    def test_unknown_component_rejected(self):
        with pytest.raises(ValueError, match="Unknown components"):
            build_test_container(unmock={"database"})


class TestGetProvider:
    """Tests for provider selection."""

    def test_selects_mock_or_prod(self):
        assert get_provider(CovesProvider, use_mock=True) is MockCovesProvider
        assert get_provider(CovesProvider, use_mock=False) is ProdCovesProvider
