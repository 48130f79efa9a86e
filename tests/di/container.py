"""Test container: mock infrastructure unless a component is unmocked."""

from dishka import AsyncContainer, make_async_container
from dishka.integrations.fastapi import FastapiProvider

from gather.util.di import PROVIDERS, Component, get_provider, swappable_components


def build_test_container(unmock: set[Component] | None = None) -> AsyncContainer:
    """Build a container for tests.

    Swappable components (Gemini, persistence) use their mock providers
    unless named in ``unmock``. ``build_test_container(unmock={"persistence"})``
    talks to the database configured in the environment.

    Raises:
        ValueError: If ``unmock`` names an unknown component
    """
    unmock = unmock or set()
    unknown = unmock - swappable_components()
    if unknown:
        raise ValueError(f"Unknown components: {sorted(unknown)}")

    providers = []
    for base in PROVIDERS:
        use_mock = base.is_swappable() and base.__mock_component__ not in unmock
        providers.append(get_provider(base, use_mock=use_mock)())

    # FastapiProvider lets the same container back TestClient requests
    return make_async_container(*providers, FastapiProvider())
