"""Catalog of well-known topics.

Maps a short catalog key to the factory that builds the topic.  Every
factory returns a fresh value; values from the same factory compare equal.
"""

from __future__ import annotations

from collections.abc import Callable

from monky_utilities.core.enums import TopicKind

from .application import (
    app_channels,
    app_contacts,
    app_messages,
    app_metadata,
    app_read_receipts,
    app_sources,
    app_tags,
    app_templates,
    app_users,
    app_webhooks,
)
from .base import Topic
from .ops import ops_components, ops_logs
from .source import (
    source_facebook_events,
    source_google_events,
    source_twilio_events,
    source_viber_events,
    source_whatsapp_events,
)

# Catalog key → topic factory
TOPIC_CATALOG: dict[str, Callable[[], Topic]] = {
    "app.channels": app_channels,
    "app.contacts": app_contacts,
    "app.messages": app_messages,
    "app.metadata": app_metadata,
    "app.read_receipts": app_read_receipts,
    "app.sources": app_sources,
    "app.tags": app_tags,
    "app.templates": app_templates,
    "app.users": app_users,
    "app.webhooks": app_webhooks,
    "source.facebook": source_facebook_events,
    "source.whatsapp": source_whatsapp_events,
    "source.viber": source_viber_events,
    "source.twilio": source_twilio_events,
    "source.google": source_google_events,
    "ops.components": ops_components,
    "ops.logs": ops_logs,
}


def get_topic(key: str) -> Topic | None:
    """Build the topic registered under ``key``, or ``None``."""
    factory = TOPIC_CATALOG.get(key)
    return factory() if factory is not None else None


def all_topics() -> list[Topic]:
    """Fresh instances of every well-known topic, in catalog order."""
    return [factory() for factory in TOPIC_CATALOG.values()]


def topics_by_kind(kind: TopicKind | str) -> list[Topic]:
    kind_value = kind.value if isinstance(kind, TopicKind) else kind
    return [topic for topic in all_topics() if topic.kind == kind_value]


def find_topic_by_name(name: str) -> Topic | None:
    """Find the well-known topic whose canonical name is ``name``."""
    for topic in all_topics():
        if topic.name == name:
            return topic
    return None
