#!/usr/bin/env python3
# -*- coding: utf-8 -*-

from __future__ import annotations

import base64
import binascii
import json
import logging
import time
from typing import Any, Dict, Optional, Type, TypeVar, Union

from pydantic import BaseModel, ValidationError

from ..lib.constants import ALIYUN_ENVELOPE_VERSION
from .envelopes import UINT32_MAX, AliyunEnvelope, FogEnvelope
from .errors import MalformedPayloadError

logger = logging.getLogger(__name__)

RawPayload = Union[str, bytes, bytearray]
EnvelopeT = TypeVar("EnvelopeT", bound=BaseModel)


def _decode_envelope(model: Type[EnvelopeT], raw: RawPayload) -> EnvelopeT:
    """
    Parse JSON text into an envelope model.

    Every failure (not JSON, not UTF-8, wrong shape or types) is reported
    as MalformedPayloadError chained from the original exception.
    """
    try:
        data = json.loads(raw)
        return model.model_validate(data)
    except (ValueError, TypeError, ValidationError) as e:
        logger.warning("Cannot decode %s payload: %r", model.__name__, e)
        raise MalformedPayloadError(f"malformed {model.__name__} payload: {e}") from e


def _encode_base64_json(data: Dict[str, Any]) -> str:
    try:
        raw = json.dumps(data, ensure_ascii=False, separators=(",", ":"), allow_nan=False).encode("utf-8")
    except (ValueError, TypeError) as e:
        logger.warning("Cannot encode payload: %r", e)
        raise MalformedPayloadError(f"cannot encode payload: {e}") from e
    return base64.b64encode(raw).decode("ascii")


def decode_fog_envelope(raw: RawPayload) -> FogEnvelope:
    return _decode_envelope(FogEnvelope, raw)


def decode_aliyun_envelope(raw: RawPayload) -> AliyunEnvelope:
    return _decode_envelope(AliyunEnvelope, raw)


def decode_base64_json(payload: RawPayload) -> Any:
    """
    Reverse of the transport encoding: base64 -> JSON value.

    Example:
      decode_base64_json("eyJpZCI6IjUifQ==") -> {"id": "5"}
    """
    try:
        raw = base64.b64decode(payload, validate=True)
        return json.loads(raw.decode("utf-8"))
    except (binascii.Error, ValueError, TypeError) as e:
        raise MalformedPayloadError(f"malformed base64 JSON payload: {e}") from e


def fog_to_aliyun(fog_payload: RawPayload, method: str) -> str:
    """
    Convert a Fog envelope into a base64 encoded Aliyun envelope.

    Input:
      fog_payload: Fog JSON text
      method: alink method, e.g. "thing.service.property.set"

    Output:
      base64 of {"id": "<id>", "version": "1.0", "method": method, "params": {...}}
    """
    fog = decode_fog_envelope(fog_payload)
    ali = AliyunEnvelope(
        id=str(fog.id),
        version=ALIYUN_ENVELOPE_VERSION,
        method=method,
        params=fog.params,
    )
    return _encode_base64_json(ali.model_dump())


def aliyun_to_fog(aliyun_payload: RawPayload, method: str, timestamp: Optional[int] = None) -> str:
    """
    Convert an Aliyun envelope into a base64 encoded Fog envelope.

    The Aliyun string id must be a decimal uint32, the version is kept
    from the input and method is omitted from the output when empty.
    timestamp defaults to the current epoch time in milliseconds.
    """
    ali = decode_aliyun_envelope(aliyun_payload)

    if not (ali.id.isascii() and ali.id.isdigit()) or int(ali.id) > UINT32_MAX:
        logger.warning("Aliyun id %r is not a decimal uint32", ali.id)
        raise MalformedPayloadError(f"malformed AliyunEnvelope payload: id {ali.id!r} is not a uint32")

    if timestamp is None:
        timestamp = int(time.time() * 1000)

    fog = FogEnvelope(
        id=int(ali.id),
        version=ali.version,
        method=method,
        timestamp=timestamp,
        params=ali.params,
    )
    data = fog.model_dump(exclude={"method"} if not method else None)
    return _encode_base64_json(data)
