#!/usr/bin/env python3
# -*- coding: utf-8 -*-

from __future__ import annotations

import logging
from typing import Optional

from .errors import UnmatchedTopicError
from .identity import parse_username
from .models import DownlinkResult
from .payload_codec import RawPayload, fog_to_aliyun
from .topic_matcher import DOWNLINK_MATCHER, TopicMatcher
from .topic_translator import TopicTranslator

logger = logging.getLogger(__name__)


class DownlinkHandler:
    """
    Translates one Fog downlink into its Aliyun form

    Pipeline (each step may end the call with a GatewayError):
      1) parse username       -> Identity          (InvalidUsernameError)
      2) match Fog topic      -> template + params (UnmatchedTopicError)
      3) translate topic      -> Aliyun topic/method (UnmatchedTopicError)
      4) translate payload    -> base64 Aliyun JSON (MalformedPayloadError)

    Notes:
      - handler keeps no per-call state; one instance serves all requests
      - matcher must be frozen before the handler is shared between threads
    """

    def __init__(
        self,
        matcher: TopicMatcher = DOWNLINK_MATCHER,
        translator: Optional[TopicTranslator] = None,
    ) -> None:
        self.matcher = matcher
        self.translator = translator or TopicTranslator()

    def handle(
        self,
        fog_topic: str,
        fog_payload: RawPayload,
        username: str,
        client_id: Optional[str] = None,
        password: Optional[str] = None,
    ) -> DownlinkResult:
        logger.info("fog_topic: %s, fog_payload: %s", fog_topic, fog_payload)

        identity = parse_username(username)

        res = self.matcher.match(fog_topic)
        if not res.matched:
            raise UnmatchedTopicError(f"unmatched topic: {fog_topic!r}")

        route = self.translator.translate(res.template_id, res.params, identity)
        raw_payload = fog_to_aliyun(fog_payload, route.method)

        logger.debug("Downlink %r -> %r (method=%r)", fog_topic, route.topic, route.method)
        return DownlinkResult(raw_topic=route.topic, raw_payload=raw_payload, identity=identity)


_default_handler = DownlinkHandler()


def handle_downlink(
    fog_topic: str,
    fog_payload: RawPayload,
    username: str,
    client_id: Optional[str] = None,
    password: Optional[str] = None,
) -> DownlinkResult:
    """Translate a downlink with the process-wide handler"""
    return _default_handler.handle(fog_topic, fog_payload, username, client_id, password)
