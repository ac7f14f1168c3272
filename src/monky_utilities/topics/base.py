"""Topic identity.

A topic is addressed by ``kind.domain.dataset``, optionally under the
process namespace: ``{namespace}.kind.domain.dataset``.  Concrete topics
only provide the three parts and, where needed, a broker config map.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from .namespace import namespace_prefix


def compose_topic_name(kind: str, domain: str, dataset: str, prefix: str = "") -> str:
    """Pure name composition; ``prefix`` is ``""`` or ``"<namespace>."``."""
    return f"{prefix}{kind}.{domain}.{dataset}"


class Topic(ABC):
    """A named stream on the broker.

    Equality and hashing use the canonical name and the config map, so two
    topics built by the same factory are interchangeable.
    """

    __slots__ = ()

    @property
    @abstractmethod
    def kind(self) -> str: ...

    @property
    @abstractmethod
    def domain(self) -> str: ...

    @property
    @abstractmethod
    def dataset(self) -> str: ...

    def config(self) -> dict[str, str]:
        """Broker-level options; a fresh snapshot on every call."""
        return {}

    @property
    def name(self) -> str:
        return compose_topic_name(self.kind, self.domain, self.dataset, namespace_prefix())

    def __str__(self) -> str:
        return self.name

    def __repr__(self) -> str:
        return f"{type(self).__name__}(name={self.name!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Topic):
            return NotImplemented
        return self.name == other.name and self.config() == other.config()

    def __hash__(self) -> int:
        return hash((self.name, tuple(sorted(self.config().items()))))
