"""Application-communication topics (``application.communication.*``).

These carry state shared between applications (channels, contacts,
messages, ...) and default to a compacted log so the latest value per key
survives.
"""

from __future__ import annotations

from monky_utilities.core.enums import TopicDomain, TopicKind

from .base import Topic
from .broker_config import DEFAULT_COMPACT_CONFIG


class ApplicationCommunication(Topic):
    """Kind and domain of the application-communication family."""

    __slots__ = ()

    @property
    def kind(self) -> str:
        return TopicKind.APPLICATION.value

    @property
    def domain(self) -> str:
        return TopicDomain.COMMUNICATION.value


class AppTopic(ApplicationCommunication):
    """One application-communication dataset.

    ``use_default_config=False`` opts out of the compacted defaults and
    yields an empty config (see :meth:`with_custom_config`).
    """

    __slots__ = ("_dataset", "_use_default_config")

    def __init__(self, dataset: str, use_default_config: bool = True) -> None:
        self._dataset = dataset
        self._use_default_config = use_default_config

    @classmethod
    def with_custom_config(cls, dataset: str) -> AppTopic:
        return cls(dataset, use_default_config=False)

    @property
    def dataset(self) -> str:
        return self._dataset

    @property
    def use_default_config(self) -> bool:
        return self._use_default_config

    def config(self) -> dict[str, str]:
        if self._use_default_config:
            return dict(DEFAULT_COMPACT_CONFIG)
        return {}


def app_channels() -> AppTopic:
    return AppTopic("channels")


def app_contacts() -> AppTopic:
    return AppTopic("contacts")


def app_messages() -> AppTopic:
    return AppTopic("messages")


def app_metadata() -> AppTopic:
    return AppTopic("metadata")


def app_read_receipts() -> AppTopic:
    return AppTopic("read-receipt")


def app_sources() -> AppTopic:
    return AppTopic("sources")


def app_tags() -> AppTopic:
    return AppTopic("tags")


def app_templates() -> AppTopic:
    return AppTopic("templates")


def app_users() -> AppTopic:
    return AppTopic("users")


def app_webhooks() -> AppTopic:
    return AppTopic("webhooks")
