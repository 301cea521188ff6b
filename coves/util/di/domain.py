"""Domain layer DI providers."""

from dishka import Scope, provide

from coves.config import ThreadingSettings
from coves.domain.service import ThreadRenderService
from coves.util.di.base import ProviderBase


class ProdDomainProvider(ProviderBase):
    """Production domain services provider - concrete, no mocks needed.

    Domain services hold no per-request state, so they live for the app.
    """

    scope = Scope.APP

    @provide
    def get_thread_render_service(
        self, threading: ThreadingSettings
    ) -> ThreadRenderService:
        """Provide thread render service with configured depth limits."""
        return ThreadRenderService(
            max_depth=threading.max_depth,
            focused_max_depth=threading.focused_max_depth,
        )
