"""
Request body decoding.

Bodies are read the way the original Chirpy clients expect: only the first
JSON value counts (anything after it is ignored), a bare `null` decodes as an
empty object, invalid UTF-8 and lone surrogates become U+FFFD, and object keys
match model fields case-insensitively. Missing or `null` fields keep their
defaults. A wrong field type is still a `DecodeError`.
"""

from __future__ import annotations

import json
import re
from typing import Any, TypeVar

import pydantic
from pydantic import BaseModel, model_validator

from . import errors


def _object_from_pairs(pairs: list[tuple[str, Any]]) -> dict[str, Any]:
    # Repeated keys: the last occurrence wins and moves to the end, except
    # that null never overwrites a value.
    obj: dict[str, Any] = {}
    for key, value in pairs:
        if value is None and key in obj:
            continue
        obj.pop(key, None)
        obj[key] = value
    return obj


_DECODER = json.JSONDecoder(object_pairs_hook=_object_from_pairs)
_JSON_WHITESPACE = " \t\r\n"
_LONE_SURROGATE = re.compile("[\ud800-\udfff]")
REPLACEMENT_CHAR = "\ufffd"


class JSONPayload(BaseModel):
    """
    Base for request models decoded by `decode_payload`.
    """

    @model_validator(mode="before")
    @classmethod
    def _match_keys(cls, data: Any) -> Any:
        if not isinstance(data, dict):
            return data
        fields = {name.casefold(): name for name in cls.model_fields}
        matched: dict[str, Any] = {}
        # Later keys overwrite earlier ones that fold to the same field.
        for key, value in data.items():
            name = fields.get(key.casefold())
            if name is None or value is None:
                continue
            matched[name] = value
        return matched


PayloadT = TypeVar("PayloadT", bound=BaseModel)


def _scrub(value: Any) -> Any:
    if isinstance(value, str):
        return _LONE_SURROGATE.sub(REPLACEMENT_CHAR, value)
    if isinstance(value, list):
        return [_scrub(item) for item in value]
    if isinstance(value, dict):
        return {_scrub(k): _scrub(v) for k, v in value.items()}
    return value


def first_json_value(raw_body: bytes) -> Any:
    text = (raw_body or b"").decode("utf-8", errors="replace").lstrip(_JSON_WHITESPACE)
    try:
        value, _ = _DECODER.raw_decode(text)
    except json.JSONDecodeError as exc:
        raise errors.DecodeError() from exc
    return _scrub(value)


def decode_payload(model: type[PayloadT], raw_body: bytes) -> PayloadT:
    """
    Parse the first JSON value in `raw_body` into `model`.

    Malformed JSON, a non-object top level, or a field of the wrong type is a
    `DecodeError`.
    """
    value = first_json_value(raw_body)
    if value is None:
        value = {}
    try:
        return model.model_validate(value)
    except pydantic.ValidationError as exc:
        raise errors.DecodeError() from exc
