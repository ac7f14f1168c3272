"""Operational topics (``ops.application.*``)."""

from __future__ import annotations

from monky_utilities.core.enums import TopicDomain, TopicKind

from .base import Topic


class OpsApplication(Topic):
    __slots__ = ()

    @property
    def kind(self) -> str:
        return TopicKind.OPS.value

    @property
    def domain(self) -> str:
        return TopicDomain.APPLICATION.value


class OpsTopic(OpsApplication):
    __slots__ = ("_dataset",)

    def __init__(self, dataset: str) -> None:
        self._dataset = dataset

    @property
    def dataset(self) -> str:
        return self._dataset


def ops_components() -> OpsTopic:
    return OpsTopic("components")


def ops_logs() -> OpsTopic:
    return OpsTopic("logs")
