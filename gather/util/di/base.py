"""Provider base with swap-in metadata for infrastructure components."""

from typing import ClassVar, Literal

from dishka import Provider

Component = Literal["gemini", "persistence"]


class ProviderBase(Provider):
    """Base for all gather providers.

    Infrastructure providers declare ``__mock_component__`` on an abstract
    base and ship one production and one mock subclass that differ in
    ``__is_mock__``. Core providers set neither and are used as-is.
    """

    __mock_component__: ClassVar[Component | None] = None
    __is_mock__: ClassVar[bool] = False

    @classmethod
    def is_swappable(cls) -> bool:
        return cls.__mock_component__ is not None and bool(cls.__subclasses__())

    @classmethod
    def variant(cls, mock: bool) -> type["ProviderBase"]:
        """Pick the production or mock subclass of a swappable provider."""
        if not cls.is_swappable():
            return cls
        for subclass in cls.__subclasses__():
            if subclass.__is_mock__ == mock:
                return subclass
        kind = "mock" if mock else "production"
        raise ValueError(f"No {kind} provider registered for {cls.__mock_component__}")
