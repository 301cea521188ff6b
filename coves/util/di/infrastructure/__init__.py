"""Infrastructure providers."""

# Import bases
from .coves import CovesProvider

# Import implementations (needed for __subclasses__())
from .coves import ProdCovesProvider  # noqa: F401

__all__ = [
    "CovesProvider",
    "ProdCovesProvider",
]
