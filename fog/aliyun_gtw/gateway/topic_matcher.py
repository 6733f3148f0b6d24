#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
topic_matcher.py - MQTT topic templates with anonymous "+" parameters

Templates are registered once at startup, in order. match() walks them in
registration order and returns the first template whose segments all
agree with the topic, together with the values found under its "+"
segments.

Typical usage:
    from fog.aliyun_gtw.gateway.topic_matcher import DOWNLINK_MATCHER, fill_topic

    res = DOWNLINK_MATCHER.match("fog/pk1/dev1/thing/down/service/reboot")
    print(res.template_id)  # fog/+/+/thing/down/service/+
    print(res.params)       # ('pk1', 'dev1', 'reboot')

    fill_topic("/sys/+/+/thing/service/+", "pk1", "dev1", "reboot")
    # /sys/pk1/dev1/thing/service/reboot
"""

from __future__ import annotations

import logging
from typing import Iterable, List, Optional, Tuple, Union

from ..lib.constants import DOWNLINK_TOPIC_TEMPLATES, TOPIC_SEPARATOR, TOPIC_WILDCARD
from .models import MatchResult, TopicTemplate

logger = logging.getLogger(__name__)

TemplateLike = Union[str, TopicTemplate]

NO_MATCH = MatchResult(matched=False)


def _as_template(template: TemplateLike) -> TopicTemplate:
    if isinstance(template, TopicTemplate):
        return template
    if isinstance(template, str):
        return TopicTemplate.parse(template)
    raise TypeError(f"Unsupported template type: {type(template).__name__}")


class TopicMatcher:
    """
    Ordered registry of topic templates.

    The registry is mutable only until freeze() is called. After that it is
    shared read-only, so concurrent match() calls need no locking.
    """

    def __init__(self) -> None:
        self._templates: List[TopicTemplate] = []
        self._frozen = False

    @classmethod
    def from_templates(cls, templates: Iterable[TemplateLike]) -> "TopicMatcher":
        """Build and freeze a matcher from templates in registration order"""
        matcher = cls()
        for t in templates:
            matcher.register(t)
        matcher.freeze()
        return matcher

    @property
    def templates(self) -> Tuple[TopicTemplate, ...]:
        return tuple(self._templates)

    @property
    def frozen(self) -> bool:
        return self._frozen

    def register(self, template: TemplateLike) -> TopicTemplate:
        if self._frozen:
            raise RuntimeError("TopicMatcher is frozen; register templates during initialization only")

        tpl = _as_template(template)
        for existing in self._templates:
            if existing.text == tpl.text:
                logger.debug("Template %r already registered", tpl.text)
                return existing

        self._templates.append(tpl)
        logger.debug("Registered topic template #%d: %r", len(self._templates), tpl.text)
        return tpl

    def freeze(self) -> None:
        self._frozen = True

    def match(self, topic: str) -> MatchResult:
        segments = topic.split(TOPIC_SEPARATOR)
        for tpl in self._templates:
            params = _match_segments(tpl.segments, segments)
            if params is not None:
                return MatchResult(matched=True, template=tpl, params=params)
        return NO_MATCH


def _match_segments(pattern: Tuple[str, ...], segments: List[str]) -> Optional[Tuple[str, ...]]:
    # Returns captured values, or None if the pattern does not apply
    if len(pattern) != len(segments):
        return None

    params: List[str] = []
    for p, s in zip(pattern, segments):
        if p == TOPIC_WILDCARD:
            params.append(s)
        elif p != s:
            return None
    return tuple(params)


def fill_topic(template: TemplateLike, *values: str) -> str:
    """
    Replace "+" segments of template with values, left to right.

    Exactly one value per wildcard is required; any other count means the
    caller built a wrong route and raises ValueError.

    Example:
      fill_topic("/sys/+/+/thing/service/property/set", "pk1", "dev1")
      -> "/sys/pk1/dev1/thing/service/property/set"
    """
    tpl = _as_template(template)
    if len(values) != tpl.wildcard_count:
        raise ValueError(
            f"Template {tpl.text!r} needs {tpl.wildcard_count} values, got {len(values)}"
        )

    it = iter(values)
    return TOPIC_SEPARATOR.join(next(it) if s == TOPIC_WILDCARD else s for s in tpl.segments)


def build_downlink_matcher() -> TopicMatcher:
    return TopicMatcher.from_templates(DOWNLINK_TOPIC_TEMPLATES)


# Process-wide registry, built once at import
DOWNLINK_MATCHER = build_downlink_matcher()
