"""
Sample frameworks for demos, docs and tests, plus a seeded random
framework generator.
"""

from __future__ import annotations

import random

from argviz.argumentation.models import Argument, Attack, Framework


def _arg(arg_id: str, annotation: str) -> Argument:
    return Argument(
        id=arg_id,
        annotation=annotation,
        url=f"https://example.com/argument/{arg_id}",
    )


SAMPLE_FRAMEWORKS: dict[str, Framework] = {
    "simple": Framework(
        name="Simple Framework",
        arguments=(
            _arg("a", "It will rain tomorrow"),
            _arg("b", "The forecast says it will be sunny"),
            _arg("c", "The forecast is often wrong"),
        ),
        attacks=(
            Attack("b", "a"),
            Attack("c", "b"),
        ),
    ),
    "cycle": Framework(
        name="Cycle Example",
        arguments=(
            _arg("a", "We should go to the beach"),
            _arg("b", "We should go to the mountains"),
            _arg("c", "We should stay home"),
        ),
        attacks=(
            Attack("a", "b"),
            Attack("b", "c"),
            Attack("c", "a"),
        ),
    ),
    "complex": Framework(
        name="Complex Framework",
        arguments=(
            _arg("a", "The product should be released now"),
            _arg("b", "There are still bugs to fix"),
            _arg("c", "The bugs are minor"),
            _arg("d", "The competition is releasing similar features"),
            _arg("e", "Our product has unique advantages"),
        ),
        attacks=(
            Attack("b", "a"),
            Attack("c", "b"),
            Attack("d", "a"),
            Attack("e", "d"),
        ),
    ),
}


def get_sample(sample_id: str) -> Framework | None:
    return SAMPLE_FRAMEWORKS.get(sample_id)


def _label(i: int) -> str:
    letter = chr(65 + i % 26)
    return letter if i < 26 else f"{letter}{i // 26}"


def random_framework(
    num_arguments: int = 5,
    num_attacks: int = 8,
    seed: int | None = None,
) -> Framework:
    """
    Random framework with ids A, B, C, ... and distinct attacks between
    different arguments. The attack count is capped at n·(n-1); the same
    seed always yields the same framework.
    """
    if num_arguments < 0 or num_attacks < 0:
        raise ValueError("counts must be non-negative")

    rng = random.Random(seed)
    ids = [_label(i) for i in range(num_arguments)]
    arguments = tuple(_arg(i, f"This is argument {i}") for i in ids)

    pairs = [(s, t) for s in ids for t in ids if s != t]
    chosen = rng.sample(pairs, min(num_attacks, len(pairs)))

    return Framework(
        name=f"Random Framework ({num_arguments} arguments)",
        arguments=arguments,
        attacks=tuple(Attack(s, t) for s, t in chosen),
    )
