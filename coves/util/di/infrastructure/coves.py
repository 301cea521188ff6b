"""Coves AppView infrastructure providers."""

from dishka import Scope, provide

from coves.adapter.coves import CovesCommentSource
from coves.config import Settings
from coves.domain.repository import CommentSource
from coves.util.di.base import ProviderBase


class CovesProvider(ProviderBase):
    """Coves AppView component base."""

    __mock_component__ = "coves"


class ProdCovesProvider(CovesProvider):
    """Production Coves provider."""

    __is_mock__ = False

    @provide(scope=Scope.APP)
    def get_comment_source(self, settings: Settings) -> CommentSource:
        """Provide AppView comment source."""
        return CovesCommentSource(
            base_url=settings.coves.base_url,
            timeout=settings.coves.timeout,
        )
