#!/usr/bin/env python3
# -*- coding: utf-8 -*-

from __future__ import annotations


class GatewayError(Exception):
    """
    Base class for every error that terminates a downlink translation

    kind:
      short stable name, reported to HTTP callers in the "error" field
    """

    kind = "GatewayError"


class InvalidUsernameError(GatewayError):
    """Credential string is not "<deviceName>&<productKey>" """

    kind = "InvalidCredential"


class UnmatchedTopicError(GatewayError):
    """Topic matches no downlink template or lacks values its route needs"""

    kind = "UnmatchedTopic"


class MalformedPayloadError(GatewayError):
    """Envelope JSON cannot be decoded into the expected shape"""

    kind = "MalformedPayload"
