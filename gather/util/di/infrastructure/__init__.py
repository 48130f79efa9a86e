"""Infrastructure providers."""

# Import bases
from .gemini import GeminiProvider
from .persistence import PersistenceProvider

# Import implementations (needed for __subclasses__())
from .gemini import ProdGeminiProvider  # noqa: F401
from .persistence import ProdPersistenceProvider  # noqa: F401

__all__ = [
    "GeminiProvider",
    "PersistenceProvider",
    "ProdGeminiProvider",
    "ProdPersistenceProvider",
]
