"""
Line-oriented framework notation (ASPARTIX style)

    % comment
    arg(a).
    arg(b).
    att(a,b).

One fact per line, trailing period optional, whitespace ignored.
References are not checked here; Framework.validate() does that.
"""

from __future__ import annotations

import logging
import re

from argviz.argumentation.errors import FrameworkParseError
from argviz.argumentation.models import Argument, Attack, Framework

logger = logging.getLogger("argviz.formats")

_ID = r"([^\s(),.%]+(?:\.[^\s(),.%]+)*)"
ARG_PATTERN = re.compile(rf"^arg\(\s*{_ID}\s*\)\s*\.?$")
ATT_PATTERN = re.compile(rf"^att\(\s*{_ID}\s*,\s*{_ID}\s*\)\s*\.?$")


def parse_aspartix(content: str, name: str = "") -> Framework:
    arguments: list[Argument] = []
    attacks: list[Attack] = []

    for lineno, raw in enumerate(content.splitlines(), start=1):
        line = raw.split("%", 1)[0].strip()
        if not line:
            continue

        match = ARG_PATTERN.match(line)
        if match:
            arguments.append(Argument(id=match.group(1)))
            continue

        match = ATT_PATTERN.match(line)
        if match:
            attacks.append(Attack(source=match.group(1), target=match.group(2)))
            continue

        raise FrameworkParseError(f"expected arg(x). or att(x,y). but got {line!r}", line=lineno)

    logger.debug(f"Parsed {len(arguments)} arguments and {len(attacks)} attacks")
    return Framework(arguments=tuple(arguments), attacks=tuple(attacks), name=name)


def dump_aspartix(framework: Framework) -> str:
    lines = [f"arg({a.id})." for a in framework.arguments]
    lines.extend(f"att({t.source},{t.target})." for t in framework.unique_attacks())
    return "\n".join(lines) + "\n"
