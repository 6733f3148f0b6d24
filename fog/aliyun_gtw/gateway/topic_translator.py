#!/usr/bin/env python3
# -*- coding: utf-8 -*-

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Dict, Optional, Sequence

from ..lib.constants import (
    ALIYUN_METHOD_PROP_SET,
    ALIYUN_METHOD_SVC_PREFIX,
    ALIYUN_TOPIC_THING_MODEL_PROP_SET,
    ALIYUN_TOPIC_THING_MODEL_SVC_REQ,
    FOG_TOPIC_THING_MODEL_PROP_SET,
    FOG_TOPIC_THING_MODEL_SVC_REQ,
)
from .errors import UnmatchedTopicError
from .models import Identity, TopicRoute
from .topic_matcher import fill_topic

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class TopicRule:
    """
    One row of the Fog -> Aliyun mapping table.

    Fields:
      - source: Fog template id
      - destination: Aliyun template to fill
      - service_param: index of the captured value holding the service
          name, or None when the route carries no service

    Fill order is always product_key, device_name, then the service name
    when service_param is set.
    """

    source: str
    destination: str
    service_param: Optional[int] = None

    def method(self, service: Optional[str]) -> str:
        if self.service_param is None:
            return ALIYUN_METHOD_PROP_SET
        return ALIYUN_METHOD_SVC_PREFIX + service


DOWNLINK_RULES = (
    TopicRule(
        source=FOG_TOPIC_THING_MODEL_PROP_SET,
        destination=ALIYUN_TOPIC_THING_MODEL_PROP_SET,
    ),
    TopicRule(
        source=FOG_TOPIC_THING_MODEL_SVC_REQ,
        destination=ALIYUN_TOPIC_THING_MODEL_SVC_REQ,
        service_param=2,
    ),
)


class TopicTranslator:
    """
    Maps a matched Fog template to the Aliyun topic and alink method.

    Identity comes from the username, not from the Fog topic: the product
    key and device name captured from the Fog topic are ignored.
    """

    def __init__(self, rules: Sequence[TopicRule] = DOWNLINK_RULES) -> None:
        self._rules: Dict[str, TopicRule] = {r.source: r for r in rules}

    def translate(self, template_id: str, params: Sequence[str], identity: Identity) -> TopicRoute:
        rule = self._rules.get(template_id)
        if rule is None:
            raise UnmatchedTopicError(f"unmatched topic: no downlink route for {template_id!r}")

        values = [identity.product_key, identity.device_name]
        service = None
        if rule.service_param is not None:
            if len(params) <= rule.service_param:
                raise UnmatchedTopicError(
                    f"unmatched topic: {template_id!r} route needs "
                    f"{rule.service_param + 1} params, got {len(params)}"
                )
            service = params[rule.service_param]
            values.append(service)

        topic = fill_topic(rule.destination, *values)
        return TopicRoute(topic=topic, method=rule.method(service))
