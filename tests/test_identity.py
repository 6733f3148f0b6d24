#!/usr/bin/env python3
# -*- coding: utf-8 -*-

from __future__ import annotations

import pytest

from fog.aliyun_gtw.gateway.errors import GatewayError, InvalidUsernameError
from fog.aliyun_gtw.gateway.identity import parse_username
from fog.aliyun_gtw.gateway.models import Identity


def test_parse_username_device_name_first():
    assert parse_username("device1&pk1") == Identity(product_key="pk1", device_name="device1")


def test_parse_username_keeps_content_as_is():
    ident = parse_username(" dev.01 |x&a1B2/c3 ")
    assert ident.device_name == " dev.01 |x"
    assert ident.product_key == "a1B2/c3 "


@pytest.mark.parametrize(
    "username",
    [
        "onlyonepart",
        "a&b&c",
        "",
        "&pk1",
        "dev1&",
        "&",
    ],
)
def test_parse_username_invalid(username: str):
    with pytest.raises(InvalidUsernameError, match="invalid username"):
        parse_username(username)


def test_parse_username_rejects_non_string():
    with pytest.raises(InvalidUsernameError):
        parse_username(None)


def test_invalid_username_kind():
    with pytest.raises(GatewayError) as ei:
        parse_username("onlyonepart")
    assert ei.value.kind == "InvalidCredential"
