"""Topic identity, broker configuration and the well-known topic catalog."""

from monky_utilities.topics.application import AppTopic, ApplicationCommunication
from monky_utilities.topics.base import Topic, compose_topic_name
from monky_utilities.topics.broker_config import (
    DEFAULT_COMPACT_CONFIG,
    with_specific_avro_enabled,
)
from monky_utilities.topics.catalog import TOPIC_CATALOG, all_topics, get_topic
from monky_utilities.topics.namespace import namespace_prefix, reset_namespace_cache
from monky_utilities.topics.ops import OpsApplication, OpsTopic
from monky_utilities.topics.source import SourceTopic

__all__ = [
    "DEFAULT_COMPACT_CONFIG",
    "TOPIC_CATALOG",
    "AppTopic",
    "ApplicationCommunication",
    "OpsApplication",
    "OpsTopic",
    "SourceTopic",
    "Topic",
    "all_topics",
    "compose_topic_name",
    "get_topic",
    "namespace_prefix",
    "reset_namespace_cache",
    "with_specific_avro_enabled",
]
