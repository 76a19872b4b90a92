"""JSON framework notation with "arguments" and "defeats" arrays."""

from __future__ import annotations

import json
import logging

from pydantic import ValidationError

from argviz.argumentation.errors import FrameworkParseError
from argviz.argumentation.models import Framework
from argviz.models import FrameworkPayload

logger = logging.getLogger("argviz.formats")


def parse_json(content: str | dict) -> Framework:
    if isinstance(content, str):
        try:
            data = json.loads(content)
        except json.JSONDecodeError as e:
            raise FrameworkParseError(f"invalid JSON: {e.msg}", line=e.lineno) from e
    else:
        data = content

    if not isinstance(data, dict):
        raise FrameworkParseError("JSON framework must be an object")

    try:
        payload = FrameworkPayload.model_validate(data)
    except ValidationError as e:
        first = e.errors()[0]
        where = ".".join(str(p) for p in first["loc"])
        raise FrameworkParseError(f"{where}: {first['msg']}") from e

    return payload.to_framework()


def dump_json(framework: Framework, indent: int | None = 2) -> str:
    return json.dumps(FrameworkPayload.from_framework(framework).dump(), indent=indent)
