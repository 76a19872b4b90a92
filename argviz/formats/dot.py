"""
Graphviz DOT export

Renders a framework coloured by a SemanticsResult:
accepted / rejected / undecided fill colours from GraphvizConfig, a
white or black font picked by fill brightness, annotations as tooltips
(nodes) and labels (edges), and optional rank=same groups.
"""

from __future__ import annotations

from argviz.argumentation.models import Framework, Label, SemanticsResult
from argviz.models import GraphvizConfig


def _escape(text: str) -> str:
    return text.replace("\\", "\\\\").replace('"', '\\"')


def font_color(fill: str) -> str:
    r = int(fill[1:3], 16)
    g = int(fill[3:5], 16)
    b = int(fill[5:7], 16)
    brightness = (r * 299 + g * 587 + b * 114) / 1000
    return "white" if brightness < 128 else "black"


def to_dot(
    framework: Framework,
    result: SemanticsResult,
    config: GraphvizConfig | None = None,
) -> str:
    config = config or GraphvizConfig()
    colors = {
        Label.ACCEPTED: config.accepted_color,
        Label.REJECTED: config.rejected_color,
        Label.UNDECIDED: config.undecided_color,
    }

    lines = [
        "digraph ArgumentationFramework {",
        f"  rankdir={config.direction};",
        '  node [shape=circle, style=filled, fontname="Arial"];',
        "  edge [arrowhead=normal];",
        "",
    ]

    for arg in framework.arguments:
        fill = colors[result.label_of(arg.id) or Label.UNDECIDED]
        attrs = [f'fillcolor="{fill}"', f'fontcolor="{font_color(fill)}"']
        if arg.annotation:
            attrs.append(f'tooltip="{_escape(arg.annotation)}"')
        if arg.url:
            attrs.append(f'URL="{_escape(arg.url)}"')
        lines.append(f'  "{_escape(arg.id)}" [{", ".join(attrs)}];')

    lines.append("")

    position = {a.id: i for i, a in enumerate(framework.arguments)}
    for attack in framework.unique_attacks():
        if not config.allow_backward_arrows:
            if position.get(attack.source, 0) > position.get(attack.target, 0):
                continue
        edge = f'  "{_escape(attack.source)}" -> "{_escape(attack.target)}"'
        if attack.annotation:
            edge += f' [label="{_escape(attack.annotation)}"]'
        lines.append(edge + ";")

    lines.append("")

    for group in config.rank_same_groups:
        members = [m for m in group if m in position]
        if len(members) > 1:
            quoted = "; ".join(f'"{_escape(m)}"' for m in members)
            lines.append(f"  {{ rank=same; {quoted}; }}")

    lines.append("}")
    return "\n".join(lines) + "\n"
