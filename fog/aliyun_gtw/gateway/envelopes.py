#!/usr/bin/env python3
# -*- coding: utf-8 -*-

from __future__ import annotations

from typing import Any, Dict, Optional

from pydantic import BaseModel, Field, StrictInt, StrictStr

from ..lib.constants import ALIYUN_ENVELOPE_VERSION

UINT32_MAX = 0xFFFFFFFF
INT64_MIN = -(2**63)
INT64_MAX = 2**63 - 1

# params is forwarded untouched, never inspected
Params = Optional[Dict[str, Any]]


class FogEnvelope(BaseModel):
    """
    Fog thing-model message.

    Example (input JSON):
        {"id": 5, "version": "1.0", "timestamp": 0, "params": {"power": "on"}}
    """

    id: StrictInt = Field(ge=0, le=UINT32_MAX)
    version: StrictStr
    method: StrictStr = ""
    timestamp: StrictInt = Field(default=0, ge=INT64_MIN, le=INT64_MAX)
    params: Params = Field(default_factory=dict)


class AliyunEnvelope(BaseModel):
    """
    Aliyun IoT alink message.

    Example (output JSON):
        {"id": "5", "version": "1.0", "method": "thing.service.property.set",
         "params": {"power": "on"}}
    """

    id: StrictStr
    version: StrictStr = ALIYUN_ENVELOPE_VERSION
    method: StrictStr = ""
    params: Params = Field(default_factory=dict)
