#!/usr/bin/env python3
# -*- coding: utf-8 -*-

import logging
import uuid
from http import HTTPStatus

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from pydantic import BaseModel

from fog.aliyun_gtw.gateway.downlink import DownlinkHandler
from fog.aliyun_gtw.gateway.errors import GatewayError
from fog.aliyun_gtw.gateway.topic_matcher import DOWNLINK_MATCHER

logger = logging.getLogger(__name__)


class CloudGtwDownlinkReq(BaseModel):
    fog_topic: str = ""
    fog_payload: str = ""
    raw_clientid: str = ""
    raw_username: str = ""
    raw_password: str = ""


class CloudGtwDownlinkResp(BaseModel):
    raw_topic: str
    raw_payload: str


# FastAPI initialization
app = FastAPI(
    title="Fog to Aliyun IoT downlink gateway",
    version="1.0.0",
)

# Registry is built once at import and shared by all requests
handler = DownlinkHandler(matcher=DOWNLINK_MATCHER)


def translate_downlink(req: CloudGtwDownlinkReq) -> CloudGtwDownlinkResp:
    res = handler.handle(
        fog_topic=req.fog_topic,
        fog_payload=req.fog_payload,
        username=req.raw_username,
        client_id=req.raw_clientid,
        password=req.raw_password,
    )
    return CloudGtwDownlinkResp(raw_topic=res.raw_topic, raw_payload=res.raw_payload)


@app.post("/", response_model=CloudGtwDownlinkResp, status_code=HTTPStatus.OK)
async def downlink_root(req: CloudGtwDownlinkReq):
    return translate_downlink(req)


@app.post("/downlink", response_model=CloudGtwDownlinkResp, status_code=HTTPStatus.OK)
async def downlink(req: CloudGtwDownlinkReq):
    return translate_downlink(req)


@app.get("/health", status_code=HTTPStatus.OK)
async def health():
    return {
        "status": "ok",
        "templates": [t.text for t in DOWNLINK_MATCHER.templates],
    }


@app.exception_handler(GatewayError)
async def gateway_error_handler(request: Request, exc: GatewayError):
    logger.warning("Rejected %r %r: %s", request.method, request.url.path, exc)
    return JSONResponse(
        status_code=HTTPStatus.BAD_REQUEST,
        content={"detail": str(exc), "error": exc.kind},
    )


@app.exception_handler(RequestValidationError)
async def request_validation_handler(request: Request, exc: RequestValidationError):
    # Every malformed request is answered with 400, same as translation errors
    logger.warning("Bad request body on %r %r: %s", request.method, request.url.path, exc.errors())
    return JSONResponse(
        status_code=HTTPStatus.BAD_REQUEST,
        content={"detail": "invalid request body", "error": "BadRequest"},
    )


@app.exception_handler(Exception)
async def unhandled_exception_handler(request: Request, exc: Exception):
    """
    JSON-only fallback handler.
    Logs the error with a correlation error_id and returns it to the caller
    """
    error_id = str(uuid.uuid4())
    logger.exception(
        "[%r] Unhandled error on %r %r: %r",
        error_id,
        request.method,
        request.url.path,
        exc,
    )
    return JSONResponse(
        status_code=HTTPStatus.INTERNAL_SERVER_ERROR,
        content={
            "detail": f"{type(exc).__name__}: {exc} (error_id={error_id})",
            "message": "Internal server error. See gateway logs.",
            "path": str(request.url.path),
            "error_id": error_id,
        },
    )
