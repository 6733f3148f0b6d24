#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
Downlink translation engine

Fog side ("northbound"): topics fog/<pk>/<dn>/thing/down/..., integer ids
Aliyun side ("southbound"): topics /sys/<pk>/<dn>/thing/service/..., alink envelopes

Modules:
  - identity          username -> Identity
  - topic_matcher     ordered "+" template registry
  - topic_translator  Fog template -> Aliyun topic and method
  - payload_codec     Fog <-> Aliyun envelopes, base64 transport encoding
  - downlink          pipeline composing all of the above
"""
