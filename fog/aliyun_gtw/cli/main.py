#!/usr/bin/env python3
# -*- coding: utf-8 -*-
import argparse
import json
import logging
import sys
from enum import IntEnum

from fog.aliyun_gtw.gateway.downlink import handle_downlink
from fog.aliyun_gtw.gateway.errors import (
    InvalidUsernameError,
    MalformedPayloadError,
    UnmatchedTopicError,
)
from fog.aliyun_gtw.gateway.payload_codec import decode_base64_json
from fog.aliyun_gtw.lib.constants import FOG_ALIYUN_GTW_CLI_LOGGER_NAME
from fog.aliyun_gtw.lib.load_config import load_gateway_config

# Exit codes for CLI
class ExitCode(IntEnum):
    # Common linux codes (0-9)
    GEN_SUCCESS = 0  # Generic success for any command
    GEN_ERROR = 1  # Unexpected errors
    INIT_ERROR = 2  # Initialization errors (Not correct argument, bad config and etc)

    # Translate command (10-19)
    INVALID_CREDENTIAL = 10
    UNMATCHED_TOPIC = 11
    MALFORMED_PAYLOAD = 12


TRANSLATE_RESULT_PREF = "Translate result:"

logger = logging.getLogger(FOG_ALIYUN_GTW_CLI_LOGGER_NAME)


def setup_logging(level: str) -> None:
    logging.basicConfig(
        level=getattr(logging, str(level).upper(), logging.INFO),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        force=True,
    )
    logging.captureWarnings(True)


def serve(args) -> int:
    """Run HTTP gateway with uvicorn"""
    try:
        cfg = load_gateway_config(args.config)
    except Exception as e:
        print("Failed to load config: %r" % e, file=sys.stderr)
        return ExitCode.INIT_ERROR

    setup_logging(cfg.log_level)
    host = args.host or cfg.host
    port = args.port or cfg.port

    # Imported here so "translate" works without the server stack loaded
    import uvicorn

    from fog.aliyun_gtw.server.app import app

    logger.info("Starting gateway on %s:%d", host, port)
    uvicorn.run(app, host=host, port=port, log_config=None)
    return ExitCode.GEN_SUCCESS


def translate(args) -> int:
    """Translate one downlink and print Aliyun topic and payload"""
    setup_logging("DEBUG" if args.verbose else "WARNING")
    try:
        res = handle_downlink(args.topic, args.payload, args.username)
    except InvalidUsernameError as e:
        print("%s failed (%s)" % (TRANSLATE_RESULT_PREF, e))
        return ExitCode.INVALID_CREDENTIAL
    except UnmatchedTopicError as e:
        print("%s failed (%s)" % (TRANSLATE_RESULT_PREF, e))
        return ExitCode.UNMATCHED_TOPIC
    except MalformedPayloadError as e:
        print("%s failed (%s)" % (TRANSLATE_RESULT_PREF, e))
        return ExitCode.MALFORMED_PAYLOAD

    print(res.raw_topic)
    if args.decode:
        print(json.dumps(decode_base64_json(res.raw_payload), ensure_ascii=False))
    else:
        print(res.raw_payload)
    return ExitCode.GEN_SUCCESS


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="fog-aliyun-gtw",
        description="Translate Fog downlink messages into Aliyun IoT topic/payload convention",
        usage="fog-aliyun-gtw [-h] <command>",
        epilog="""
Example:
  fog-aliyun-gtw serve --port 8080
  fog-aliyun-gtw translate --topic fog/x/y/thing/down/property/set \\
      --username 'dev1&pk1' --payload '{"id":5,"version":"1.0","params":{}}' --decode
""",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    subparsers = parser.add_subparsers(
        dest="command",
        title="Available commands",
        metavar="<command>",
    )

    p_serve = subparsers.add_parser("serve", help="Run HTTP gateway")
    p_serve.add_argument("--config", help="Path to JSON config file")
    p_serve.add_argument("--host", help="Bind address (overrides config)")
    p_serve.add_argument("--port", type=int, help="Bind port (overrides config)")
    p_serve.set_defaults(func=serve)

    p_tr = subparsers.add_parser("translate", help="Translate a single downlink")
    p_tr.add_argument("--topic", required=True, help="Fog topic")
    p_tr.add_argument("--username", required=True, help="'<deviceName>&<productKey>'")
    p_tr.add_argument("--payload", required=True, help="Fog JSON envelope")
    p_tr.add_argument("--decode", action="store_true", help="Print decoded JSON instead of base64")
    p_tr.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    p_tr.set_defaults(func=translate)
    return parser


def main(argv=None):
    parser = build_parser()
    args = parser.parse_args(argv)
    if not getattr(args, "func", None):
        parser.print_help()
        return int(ExitCode.INIT_ERROR)
    return int(args.func(args))


if __name__ == "__main__":
    sys.exit(main())
