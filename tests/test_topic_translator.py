#!/usr/bin/env python3
# -*- coding: utf-8 -*-

from __future__ import annotations

import pytest

from fog.aliyun_gtw.gateway.errors import UnmatchedTopicError
from fog.aliyun_gtw.gateway.models import Identity, TopicRoute
from fog.aliyun_gtw.gateway.topic_translator import TopicRule, TopicTranslator
from fog.aliyun_gtw.lib.constants import (
    ALIYUN_TOPIC_THING_MODEL_PROP_SET,
    ALIYUN_TOPIC_THING_MODEL_SVC_REQ,
    FOG_TOPIC_THING_MODEL_PROP_SET,
    FOG_TOPIC_THING_MODEL_SVC_REQ,
)

IDENT = Identity(product_key="pk1", device_name="dev1")


def test_property_set_route_uses_identity_not_topic_params():
    tr = TopicTranslator()
    route = tr.translate(FOG_TOPIC_THING_MODEL_PROP_SET, ("x", "y"), IDENT)
    assert route == TopicRoute(
        topic="/sys/pk1/dev1/thing/service/property/set",
        method="thing.service.property.set",
    )


def test_service_route_takes_service_from_third_param():
    tr = TopicTranslator()
    route = tr.translate(FOG_TOPIC_THING_MODEL_SVC_REQ, ("x", "y", "reboot"), IDENT)
    assert route.topic == "/sys/pk1/dev1/thing/service/reboot"
    assert route.method == "thing.service.reboot"


def test_service_route_without_service_param():
    tr = TopicTranslator()
    with pytest.raises(UnmatchedTopicError, match="needs 3 params, got 2"):
        tr.translate(FOG_TOPIC_THING_MODEL_SVC_REQ, ("x", "y"), IDENT)


@pytest.mark.parametrize(
    "template_id",
    [ALIYUN_TOPIC_THING_MODEL_PROP_SET, ALIYUN_TOPIC_THING_MODEL_SVC_REQ, "no/such/+", None],
)
def test_templates_without_downlink_route(template_id):
    tr = TopicTranslator()
    with pytest.raises(UnmatchedTopicError, match="no downlink route"):
        tr.translate(template_id, ("pk1", "dev1", "x"), IDENT)


def test_custom_rule_with_wrong_fill_count_is_invariant_failure():
    # destination has one wildcard but the rule always fills two
    tr = TopicTranslator([TopicRule(source="in/+", destination="out/+")])
    with pytest.raises(ValueError, match="needs 1 values, got 2"):
        tr.translate("in/+", ("a",), IDENT)
