"""Source-event topics (``source.<provider>.events``).

Raw inbound events from messaging providers.  No broker overrides.
"""

from __future__ import annotations

from monky_utilities.core.enums import TopicDomain, TopicKind

from .base import Topic


class SourceTopic(Topic):
    __slots__ = ("_domain", "_dataset")

    def __init__(self, domain: str, dataset: str = "events") -> None:
        self._domain = domain
        self._dataset = dataset

    @property
    def kind(self) -> str:
        return TopicKind.SOURCE.value

    @property
    def domain(self) -> str:
        return self._domain

    @property
    def dataset(self) -> str:
        return self._dataset


def source_facebook_events() -> SourceTopic:
    return SourceTopic(TopicDomain.FACEBOOK.value)


def source_whatsapp_events() -> SourceTopic:
    return SourceTopic(TopicDomain.WHATSAPP.value)


def source_viber_events() -> SourceTopic:
    return SourceTopic(TopicDomain.VIBER.value)


def source_twilio_events() -> SourceTopic:
    return SourceTopic(TopicDomain.TWILIO.value)


def source_google_events() -> SourceTopic:
    return SourceTopic(TopicDomain.GOOGLE.value)
