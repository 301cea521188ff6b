"""Application layer DI providers."""

from dishka import Scope, provide

from coves.application.session import ThreadSession, ThreadSessionCache
from coves.application.usecase.thread import FocusThreadUseCase, GetThreadUseCase
from coves.config import ThreadingSettings
from coves.domain.repository import CommentSource
from coves.domain.service import ThreadRenderService
from coves.util.di.base import ProviderBase


class ProdApplicationProvider(ProviderBase):
    """Production application provider - concrete, no mocks needed."""

    @provide(scope=Scope.REQUEST)
    def get_get_thread_use_case(
        self,
        comment_source: CommentSource,
        render_service: ThreadRenderService,
        threading: ThreadingSettings,
    ) -> GetThreadUseCase:
        """Provide get thread use case."""
        return GetThreadUseCase(
            comment_source=comment_source,
            render_service=render_service,
            settings=threading,
        )

    @provide(scope=Scope.REQUEST)
    def get_focus_thread_use_case(
        self,
        comment_source: CommentSource,
        render_service: ThreadRenderService,
        threading: ThreadingSettings,
    ) -> FocusThreadUseCase:
        """Provide focus thread use case."""
        return FocusThreadUseCase(
            comment_source=comment_source,
            render_service=render_service,
            settings=threading,
        )

    @provide(scope=Scope.APP)
    def get_thread_session_cache(
        self,
        comment_source: CommentSource,
        render_service: ThreadRenderService,
        threading: ThreadingSettings,
    ) -> ThreadSessionCache:
        """Provide the app-wide thread session cache."""
        return ThreadSessionCache(
            session_factory=lambda post_uri: ThreadSession(
                post_uri=post_uri,
                comment_source=comment_source,
                render_service=render_service,
                settings=threading,
            ),
            max_size=threading.cache_size,
        )
