from __future__ import annotations

from typing import Any, Dict, Optional

from config.settings import Settings


_REGISTRY: Dict[str, Any] = {}


def register(name: str, factory) -> None:
    _REGISTRY[name] = factory


def get_provider(name: str, settings: Optional[Settings] = None, kind: Optional[str] = None):
    """Instantiate the provider registered under ``name``.

    When ``kind`` is given the provider must declare that kind, so a news
    provider cannot be wired in where person lookups are expected.
    """
    if name not in _REGISTRY:
        raise KeyError(f"Unknown lookup provider: {name}")
    factory = _REGISTRY[name]
    declared = getattr(factory, "kind", None)
    if kind is not None and declared != kind:
        raise RuntimeError(f"Lookup provider {name} is a {declared} provider, expected {kind}")
    return factory(settings)


def available_providers() -> Dict[str, Any]:
    return dict(_REGISTRY)
