"""Framework notations (line and JSON) and Graphviz DOT export."""
import dataclasses
import json

from argviz.argumentation.models import Framework

from .aspartix import dump_aspartix, parse_aspartix
from .dot import to_dot
from .json_notation import dump_json, parse_json

__all__ = [
    "parse_framework",
    "parse_aspartix",
    "dump_aspartix",
    "parse_json",
    "dump_json",
    "to_dot",
]


def parse_framework(content: str, name: str = "") -> Framework:
    """Parse JSON notation if the content is JSON, the line notation otherwise."""
    try:
        data = json.loads(content)
    except json.JSONDecodeError:
        return parse_aspartix(content, name=name)
    framework = parse_json(data)
    if name and not framework.name:
        framework = dataclasses.replace(framework, name=name)
    return framework
