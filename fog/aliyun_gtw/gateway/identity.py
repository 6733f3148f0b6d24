#!/usr/bin/env python3
# -*- coding: utf-8 -*-

from __future__ import annotations

import logging

from ..lib.constants import USERNAME_SEPARATOR
from .errors import InvalidUsernameError
from .models import Identity

logger = logging.getLogger(__name__)


def parse_username(username: str) -> Identity:
    """
    Extract device identity from the MQTT username used with Aliyun IoT.

    Input:
      username: "<deviceName>&<productKey>", exactly one "&"

    Output:
      Identity(product_key, device_name)

    Raises:
      InvalidUsernameError if the username does not split into two
      non-empty parts

    Examples:
      parse_username("device1&pk1") -> Identity(product_key="pk1", device_name="device1")
      parse_username("onlyonepart") -> InvalidUsernameError
      parse_username("&pk1")        -> InvalidUsernameError
    """
    if not isinstance(username, str):
        raise InvalidUsernameError(f"invalid username: expected str, got {type(username).__name__}")

    parts = username.split(USERNAME_SEPARATOR)
    if len(parts) != 2:
        raise InvalidUsernameError(f"invalid username: {username!r}")

    device_name, product_key = parts
    if not device_name or not product_key:
        raise InvalidUsernameError(f"invalid username: empty part in {username!r}")

    logger.debug("Parsed username %r -> pk=%r dn=%r", username, product_key, device_name)
    return Identity(product_key=product_key, device_name=device_name)
