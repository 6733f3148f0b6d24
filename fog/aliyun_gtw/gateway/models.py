#!/usr/bin/env python3
# -*- coding: utf-8 -*-

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional, Tuple

from ..lib.constants import TOPIC_SEPARATOR, TOPIC_WILDCARD


@dataclass(frozen=True)
class TopicTemplate:
    """
    Parsed MQTT topic template.

    A segment equal to "+" is a single-level wildcard, every other segment
    is a literal compared byte-exact. A "+" inside a longer segment stays
    literal.

    Fields:
      - text: template string exactly as registered, also used as its id
      - segments: "/"-separated parts of text

    Example (output):
        TopicTemplate.parse("fog/+/+/thing/down/property/set")
        -> TopicTemplate(
             text="fog/+/+/thing/down/property/set",
             segments=("fog", "+", "+", "thing", "down", "property", "set"),
           )
    """

    text: str
    segments: Tuple[str, ...]

    @classmethod
    def parse(cls, text: str) -> "TopicTemplate":
        return cls(text=text, segments=tuple(text.split(TOPIC_SEPARATOR)))

    @property
    def wildcard_count(self) -> int:
        return sum(1 for s in self.segments if s == TOPIC_WILDCARD)

    def __str__(self) -> str:
        return self.text


@dataclass(frozen=True)
class MatchResult:
    """
    Result of TopicMatcher.match().

    Fields:
      - matched: whether any registered template matched
      - template: matched template (None when matched is False)
      - params: captured wildcard values, left-to-right

    Example (output):
        match("fog/pk1/dev1/thing/down/service/reboot")
        -> MatchResult(
             matched=True,
             template=<fog/+/+/thing/down/service/+>,
             params=("pk1", "dev1", "reboot"),
           )
    """

    matched: bool
    template: Optional[TopicTemplate] = None
    params: Tuple[str, ...] = ()

    @property
    def template_id(self) -> Optional[str]:
        return self.template.text if self.template is not None else None


@dataclass(frozen=True)
class Identity:
    """Device identity derived from the gateway username"""

    product_key: str
    device_name: str


@dataclass(frozen=True)
class TopicRoute:
    """
    Destination of a translated downlink.

    Fields:
      - topic: filled Aliyun topic
      - method: alink method put into the Aliyun envelope
    """

    topic: str
    method: str


@dataclass(frozen=True)
class DownlinkResult:
    """
    Output of one downlink translation, ready for the transport.

    Fields:
      - raw_topic: Aliyun topic to publish to
      - raw_payload: base64 of the Aliyun JSON envelope
      - identity: device identity parsed from the username, not compared
    """

    raw_topic: str
    raw_payload: str
    identity: Optional[Identity] = field(default=None, compare=False)
