"""Typed wrappers that let provider instances live in a generic resource pool.

The pool itself only sees :class:`Resource`; the wrapper keeps the concrete
provider type (an STT client, a TTS engine, an LLM client ...) so callers get
it back without casts.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from collections.abc import Callable, Mapping
from typing import Any, Generic, TypeVar

from sentencekit.errors import ResourceCreationError

logger = logging.getLogger("sentencekit.pool.adapter")

T = TypeVar("T")

CreatorFn = Callable[[str, str, Mapping[str, Any]], T]


class Resource(ABC):
    """Anything a resource pool can hand out."""

    @abstractmethod
    def close(self) -> None:
        """Release the underlying provider."""

    @abstractmethod
    def is_valid(self) -> bool:
        """Return True if the resource can still be used."""

    def reset(self) -> None:  # noqa: B027
        """Clear per-session state before the resource is reused."""


class ResourceWrapper(Resource, Generic[T]):
    """Pool entry holding a provider of type *T* and its lifecycle hooks."""

    def __init__(
        self,
        provider: T,
        *,
        config_key: str,
        resource_type: str,
        close_fn: Callable[[T], None] | None = None,
        is_valid_fn: Callable[[T], bool] | None = None,
        reset_fn: Callable[[T], None] | None = None,
    ) -> None:
        self._provider = provider
        self._config_key = config_key
        self._resource_type = resource_type
        self._close_fn = close_fn
        self._is_valid_fn = is_valid_fn
        self._reset_fn = reset_fn

    @property
    def provider(self) -> T:
        return self._provider

    @property
    def config_key(self) -> str:
        """Key identifying the pool this resource belongs to."""
        return self._config_key

    @property
    def resource_type(self) -> str:
        return self._resource_type

    def close(self) -> None:
        if self._close_fn is not None:
            self._close_fn(self._provider)

    def is_valid(self) -> bool:
        if self._is_valid_fn is not None:
            return self._is_valid_fn(self._provider)
        return self._provider is not None

    def reset(self) -> None:
        if self._reset_fn is not None:
            self._reset_fn(self._provider)

    def __repr__(self) -> str:
        return f"ResourceWrapper(type={self._resource_type!r}, key={self._config_key!r})"


class ResourceFactory(Generic[T]):
    """Create, validate and reset :class:`ResourceWrapper` instances for one pool.

    Args:
        resource_type: Kind of resource (``"vad"``, ``"asr"``, ``"llm"``, ``"tts"``).
        provider: Provider name passed through to *creator*.
        config: Provider configuration passed through to *creator*.
        config_key: Key identifying the pool.
        creator: ``creator(resource_type, provider, config) -> T``.
        close_fn: Optional hook used by :meth:`ResourceWrapper.close`.
        is_valid_fn: Optional validity check; defaults to "provider is not None".
        reset_fn: Optional hook clearing provider state between sessions.
    """

    def __init__(
        self,
        resource_type: str,
        provider: str,
        config: Mapping[str, Any],
        config_key: str,
        creator: CreatorFn[T],
        *,
        close_fn: Callable[[T], None] | None = None,
        is_valid_fn: Callable[[T], bool] | None = None,
        reset_fn: Callable[[T], None] | None = None,
    ) -> None:
        self._resource_type = resource_type
        self._provider = provider
        self._config = dict(config)
        self._config_key = config_key
        self._creator = creator
        self._close_fn = close_fn
        self._is_valid_fn = is_valid_fn
        self._reset_fn = reset_fn

    @property
    def config_key(self) -> str:
        return self._config_key

    def create(self) -> ResourceWrapper[T]:
        """Build a new provider and wrap it."""
        try:
            instance = self._creator(self._resource_type, self._provider, self._config)
        except Exception as exc:
            logger.exception(
                "Failed to create %s resource with provider %s",
                self._resource_type,
                self._provider,
            )
            raise ResourceCreationError(
                f"Failed to create {self._resource_type} resource ({self._provider}): {exc}",
                resource_type=self._resource_type,
                provider=self._provider,
            ) from exc

        return ResourceWrapper(
            instance,
            config_key=self._config_key,
            resource_type=self._resource_type,
            close_fn=self._close_fn,
            is_valid_fn=self._is_valid_fn,
            reset_fn=self._reset_fn,
        )

    def validate(self, resource: Resource | None) -> bool:
        """Return True if *resource* may be handed out again."""
        if isinstance(resource, ResourceWrapper):
            if self._is_valid_fn is not None:
                return self._is_valid_fn(resource.provider)
            return resource.is_valid()
        return resource is not None and resource.is_valid()

    def reset(self, resource: Resource) -> None:
        """Clear session state on a wrapped provider; other resources are left as-is."""
        if isinstance(resource, ResourceWrapper):
            resource.reset()
