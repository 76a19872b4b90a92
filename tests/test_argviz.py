"""
argviz Test Suite

Tests covering:
- Framework validation and fingerprinting
- Attack Index: lookup tables, deduplication
- Extension Solver: grounded/complete/preferred/stable extensions, budget
- Verdict Classifier: skeptical labelling and partition
- Provenance Resolver: dispute trees, cycles, provenance modes
- Framework notations and DOT export
- Sample frameworks and the result cache
"""
import os
import sys
from itertools import combinations

import pytest


# Add package root to path
sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))


def _fw(args, attacks=(), name=""):
    from argviz.argumentation import Framework
    return Framework.build(args, attacks, name=name)


SELF_ATTACK = (["a"], [("a", "a")])
INDEPENDENT = (["a", "b", "c"], [])
ODD_CYCLE = (["a", "b", "c"], [("a", "b"), ("b", "c"), ("c", "a")])
DEFENSE_CHAIN = (["a", "b", "c"], [("b", "a"), ("c", "b")])
MUTUAL = (["a", "b"], [("a", "b"), ("b", "a")])
# a <-> b, both attack c, c attacks d
FLOATING = (
    ["a", "b", "c", "d"],
    [("a", "b"), ("b", "a"), ("a", "c"), ("b", "c"), ("c", "d")],
)

SCENARIOS = [SELF_ATTACK, INDEPENDENT, ODD_CYCLE, DEFENSE_CHAIN, MUTUAL, FLOATING]
ALL_SEMANTICS = ["grounded", "complete", "preferred", "stable"]


# ── Framework Tests ────────────────────────────────────────────

class TestFramework:
    def test_validate_accepts_well_formed(self):
        fw = _fw(*DEFENSE_CHAIN)
        assert fw.validate() is fw

    def test_unknown_attack_endpoint(self):
        from argviz.argumentation import InvalidFramework
        fw = _fw(["a", "b"], [("a", "z")])
        with pytest.raises(InvalidFramework) as exc:
            fw.validate()
        assert exc.value.unknown_ids == ["z"]

    def test_duplicate_argument_ids(self):
        from argviz.argumentation import InvalidFramework
        fw = _fw(["a", "b", "a"])
        with pytest.raises(InvalidFramework) as exc:
            fw.validate()
        assert exc.value.duplicate_ids == ["a"]

    def test_invalid_framework_is_value_error(self):
        from argviz.argumentation import InvalidFramework
        assert issubclass(InvalidFramework, ValueError)

    def test_duplicate_attacks_collapse(self):
        from argviz.argumentation import Attack
        fw = _fw(["a", "b"], [
            Attack("a", "b", annotation="first"),
            Attack("a", "b", annotation="second"),
        ])
        unique = fw.unique_attacks()
        assert len(unique) == 1
        assert unique[0].annotation == "first"

    def test_fingerprint_ignores_order_and_annotations(self):
        from argviz.argumentation import Argument, Attack, Framework
        fw1 = Framework.build(["a", "b"], [("a", "b")], name="one")
        fw2 = Framework(
            name="two",
            arguments=(Argument("b", annotation="note"), Argument("a")),
            attacks=(Attack("a", "b", annotation="x"), Attack("a", "b")),
        )
        assert fw1.fingerprint == fw2.fingerprint

    def test_fingerprint_changes_with_attacks(self):
        assert _fw(["a", "b"], [("a", "b")]).fingerprint != _fw(["a", "b"], [("b", "a")]).fingerprint

    def test_fingerprint_unambiguous_for_separator_ids(self):
        assert _fw(["a,b"]).fingerprint != _fw(["a", "b"]).fingerprint
        assert _fw(["a>b", "c"], [("a>b", "c")]).fingerprint != _fw(["a", "b>c"], [("a", "b>c")]).fingerprint


# ── Attack Index Tests ─────────────────────────────────────────

class TestAttackIndex:
    def test_lookup_tables(self):
        from argviz.argumentation import AttackIndex
        index = AttackIndex(_fw(*DEFENSE_CHAIN))
        assert index.attackers_of("a") == {"b"}
        assert index.attackees_of("c") == {"b"}
        assert index.attackers_of("c") == frozenset()
        assert index.attackees_of("a") == frozenset()

    def test_unknown_id_defaults_empty(self):
        from argviz.argumentation import AttackIndex
        index = AttackIndex(_fw(["a"]))
        assert index.attackers_of("nope") == frozenset()

    def test_defenders_and_self_attacks(self):
        from argviz.argumentation import AttackIndex
        index = AttackIndex(_fw(["a", "b", "c", "s"], [("b", "a"), ("c", "b"), ("s", "s")]))
        assert index.defenders_of("a") == {"c"}
        assert index.self_attacking == {"s"}
        assert index.attacks("c", "b") is True
        assert index.attacks("b", "c") is False

    def test_redundant_attacks_counted_once(self):
        from argviz.argumentation import AttackIndex
        index = AttackIndex(_fw(["a", "b"], [("a", "b"), ("a", "b")]))
        assert index.num_attacks == 1


# ── Extension Solver Tests ─────────────────────────────────────

class TestExtensionSolver:
    def _solver(self, args, attacks=(), budget=None):
        from argviz.argumentation import AttackIndex, ExtensionSolver
        index = AttackIndex(_fw(args, attacks))
        if budget is None:
            return ExtensionSolver(index)
        return ExtensionSolver(index, search_budget=budget)

    def _sets(self, extensions):
        return [set(e.arguments) for e in extensions]

    def test_grounded_empty_framework(self):
        ext = self._solver([]).grounded_extension()
        assert ext.is_empty

    def test_grounded_unattacked_arguments(self):
        ext = self._solver(*INDEPENDENT).grounded_extension()
        assert ext.arguments == {"a", "b", "c"}

    def test_grounded_reinstatement(self):
        ext = self._solver(*DEFENSE_CHAIN).grounded_extension()
        assert ext.arguments == {"a", "c"}

    def test_grounded_mutual_attack(self):
        assert self._solver(*MUTUAL).grounded_extension().is_empty

    def test_grounded_long_chain(self):
        # x0 <- x1 <- ... <- x9: even positions from the unattacked end win
        ids = [f"x{i}" for i in range(10)]
        attacks = [(ids[i + 1], ids[i]) for i in range(9)]
        ext = self._solver(ids, attacks).grounded_extension()
        assert ext.arguments == {"x9", "x7", "x5", "x3", "x1"}

    def test_conflict_free_check(self):
        solver = self._solver(["a", "b"], [("a", "b")])
        assert solver.is_conflict_free({"a"}) is True
        assert solver.is_conflict_free({"a", "b"}) is False

    def test_admissible_needs_defense(self):
        solver = self._solver(*DEFENSE_CHAIN)
        assert solver.is_admissible({"a"}) is False
        assert solver.is_admissible({"a", "c"}) is True

    def test_complete_mutual_attack(self):
        exts = self._solver(*MUTUAL).complete_extensions()
        assert self._sets(exts) == [set(), {"a"}, {"b"}]

    def test_preferred_mutual_attack(self):
        exts = self._solver(*MUTUAL).preferred_extensions()
        assert self._sets(exts) == [{"a"}, {"b"}]

    def test_stable_mutual_attack(self):
        exts = self._solver(*MUTUAL).stable_extensions()
        assert self._sets(exts) == [{"a"}, {"b"}]

    def test_floating_reinstatement(self):
        solver = self._solver(*FLOATING)
        assert self._sets(solver.complete_extensions()) == [set(), {"a", "d"}, {"b", "d"}]
        assert self._sets(solver.preferred_extensions()) == [{"a", "d"}, {"b", "d"}]
        assert self._sets(solver.stable_extensions()) == [{"a", "d"}, {"b", "d"}]

    def test_joint_defense_found(self):
        # a and b only defend each other together: c attacks a, d attacks b,
        # b attacks c, a attacks d, c and d attack each other.
        solver = self._solver(
            ["a", "b", "c", "d"],
            [("c", "a"), ("d", "b"), ("b", "c"), ("a", "d"), ("c", "d"), ("d", "c")],
        )
        preferred = self._sets(solver.preferred_extensions())
        assert {"a", "b"} in preferred

    def test_odd_cycle_has_no_stable(self):
        solver = self._solver(*ODD_CYCLE)
        assert solver.stable_extensions() == []
        assert self._sets(solver.preferred_extensions()) == [set()]

    def test_self_attack_never_admissible(self):
        solver = self._solver(*SELF_ATTACK)
        assert solver.is_admissible({"a"}) is False
        assert self._sets(solver.complete_extensions()) == [set()]
        assert solver.stable_extensions() == []

    def test_matches_brute_force(self):
        from argviz.samples import random_framework
        from argviz.argumentation import AttackIndex, ExtensionSolver

        for seed in range(15):
            fw = random_framework(6, 9, seed=seed)
            solver = ExtensionSolver(AttackIndex(fw))
            ids = fw.arg_ids
            subsets = [
                frozenset(c)
                for size in range(len(ids) + 1)
                for c in combinations(ids, size)
            ]
            admissible = [s for s in subsets if solver.is_admissible(s)]
            complete = {s for s in admissible if solver.is_complete(s)}
            preferred = {s for s in admissible if not any(s < o for o in admissible)}
            stable = {s for s in subsets if solver.is_stable(s)}

            assert {e.arguments for e in solver.complete_extensions()} == complete
            assert {e.arguments for e in solver.preferred_extensions()} == preferred
            assert {e.arguments for e in solver.stable_extensions()} == stable

    def test_enumeration_is_deterministic(self):
        from argviz.samples import random_framework
        from argviz.argumentation import AttackIndex, ExtensionSolver
        fw = random_framework(7, 10, seed=3)
        first = ExtensionSolver(AttackIndex(fw)).complete_extensions()
        second = ExtensionSolver(AttackIndex(fw)).complete_extensions()
        assert [e.sorted_ids() for e in first] == [e.sorted_ids() for e in second]
        keys = [list(e.sorted_ids()) for e in first]
        assert keys == sorted(keys)

    def test_search_budget_exceeded(self):
        from argviz.argumentation import SearchBudgetExceeded
        args = [f"{p}{i}" for i in range(8) for p in "ab"]
        attacks = [(f"a{i}", f"b{i}") for i in range(8)] + [(f"b{i}", f"a{i}") for i in range(8)]
        solver = self._solver(args, attacks, budget=50)
        with pytest.raises(SearchBudgetExceeded) as exc:
            solver.preferred_extensions()
        assert exc.value.budget == 50
        assert exc.value.semantics == "preferred"

    def test_grounded_ignores_budget(self):
        solver = self._solver(*MUTUAL, budget=1)
        assert solver.grounded_extension().is_empty
        assert solver.candidates_explored == 0

    def test_budget_must_be_positive(self):
        with pytest.raises(ValueError):
            self._solver(*MUTUAL, budget=0)


# ── Semantics Engine Tests ─────────────────────────────────────

class TestSemanticsEngine:
    def _make_engine(self, **kwargs):
        from argviz.argumentation import SemanticsEngine
        return SemanticsEngine(**kwargs)

    def _solve(self, scenario, semantics):
        return self._make_engine().solve(_fw(*scenario), semantics)

    def test_partition(self):
        for scenario in SCENARIOS:
            for semantics in ALL_SEMANTICS:
                result = self._solve(scenario, semantics)
                if not result.ok:
                    continue
                ids = set(scenario[0])
                assert not (result.accepted & result.rejected)
                assert not (result.accepted & result.undecided)
                assert not (result.rejected & result.undecided)
                assert result.accepted | result.rejected | result.undecided == ids
                assert set(result.provenance) == ids

    def test_grounded_is_deterministic(self):
        engine = self._make_engine()
        fw = _fw(*FLOATING)
        assert engine.solve(fw, "grounded").accepted == engine.solve(fw, "grounded").accepted

    def test_complete_accepted_equals_grounded(self):
        from argviz.samples import SAMPLE_FRAMEWORKS, random_framework
        engine = self._make_engine()
        frameworks = list(SAMPLE_FRAMEWORKS.values())
        frameworks += [random_framework(6, 9, seed=s) for s in range(10)]
        frameworks += [_fw(*s) for s in SCENARIOS]
        for fw in frameworks:
            grounded = engine.extensions(fw, "grounded")[0]
            assert engine.solve(fw, "complete").accepted == grounded.arguments

    def test_self_attack_rejected(self):
        from argviz.argumentation import ResultStatus
        for semantics in ("grounded", "complete", "preferred"):
            result = self._solve(SELF_ATTACK, semantics)
            assert result.rejected == {"a"}
        stable = self._solve(SELF_ATTACK, "stable")
        assert stable.status == ResultStatus.NO_STABLE_EXTENSION

    def test_independence_cluster(self):
        for semantics in ALL_SEMANTICS:
            result = self._solve(INDEPENDENT, semantics)
            assert result.accepted == {"a", "b", "c"}

    def test_odd_cycle(self):
        from argviz.argumentation import ResultStatus
        stable = self._solve(ODD_CYCLE, "stable")
        assert stable.status == ResultStatus.NO_STABLE_EXTENSION
        assert stable.accepted == stable.rejected == stable.undecided == frozenset()
        assert stable.provenance == {}

        grounded = self._solve(ODD_CYCLE, "grounded")
        assert grounded.undecided == {"a", "b", "c"}

    def test_defense_chain(self):
        result = self._solve(DEFENSE_CHAIN, "grounded")
        assert result.accepted == {"a", "c"}
        assert result.rejected == {"b"}
        assert result.undecided == frozenset()

    def test_floating_reinstatement_preferred(self):
        result = self._solve(FLOATING, "preferred")
        assert result.accepted == {"d"}
        assert result.rejected == {"c"}
        assert result.undecided == {"a", "b"}

    def test_raise_for_status(self):
        from argviz.argumentation import NoStableExtension
        result = self._make_engine().solve(_fw(*ODD_CYCLE, name="triangle"), "stable")
        with pytest.raises(NoStableExtension) as exc:
            result.raise_for_status()
        assert "triangle" in str(exc.value)
        ok = self._solve(DEFENSE_CHAIN, "stable")
        assert ok.raise_for_status() is ok

    def test_invalid_framework_rejected_before_search(self, monkeypatch):
        from argviz.argumentation import InvalidFramework
        import argviz.argumentation.engine as engine_module

        class ExplodingSolver:
            def __init__(self, *args, **kwargs):
                raise AssertionError("search must not start")

        monkeypatch.setattr(engine_module, "ExtensionSolver", ExplodingSolver)
        with pytest.raises(InvalidFramework):
            self._make_engine().solve(_fw(["a"], [("a", "ghost")]), "preferred")

    def test_budget_propagates(self):
        from argviz.argumentation import SearchBudgetExceeded
        args = [f"{p}{i}" for i in range(6) for p in "ab"]
        attacks = [(f"a{i}", f"b{i}") for i in range(6)] + [(f"b{i}", f"a{i}") for i in range(6)]
        engine = self._make_engine(search_budget=20)
        with pytest.raises(SearchBudgetExceeded):
            engine.solve(_fw(args, attacks), "complete")

    def test_accepts_plain_string_semantics(self):
        from argviz.argumentation import SemanticsKind
        result = self._solve(DEFENSE_CHAIN, "stable")
        assert result.semantics == SemanticsKind.STABLE

    def test_label_of(self):
        from argviz.argumentation import Label
        result = self._solve(DEFENSE_CHAIN, "grounded")
        assert result.label_of("a") == Label.ACCEPTED
        assert result.label_of("b") == Label.REJECTED
        assert result.label_of("missing") is None

    def test_to_dict(self):
        data = self._solve(DEFENSE_CHAIN, "grounded").to_dict()
        assert data["accepted"] == ["a", "c"]
        assert data["extensions"] == [["a", "c"]]
        assert data["provenance"]["a"]["dispute_tree"]["role"] == "proponent"


# ── Provenance Tests ───────────────────────────────────────────

class TestProvenance:
    def _solve(self, scenario, semantics="grounded"):
        from argviz.argumentation import SemanticsEngine
        return SemanticsEngine().solve(_fw(*scenario), semantics)

    def test_potential_is_direct_attackers(self):
        from argviz.argumentation import AttackIndex
        for scenario in SCENARIOS:
            index = AttackIndex(_fw(*scenario))
            for semantics in ALL_SEMANTICS:
                result = self._solve(scenario, semantics)
                for arg_id, info in result.provenance.items():
                    assert set(info.potential_provenance) == index.attackers_of(arg_id)
                    assert set(info.attackers) == index.attackers_of(arg_id)

    def test_rejected_tree_shows_accepted_attacker(self):
        for scenario in (SELF_ATTACK, INDEPENDENT, ODD_CYCLE, DEFENSE_CHAIN):
            for semantics in ("grounded", "complete"):
                result = self._solve(scenario, semantics)
                for arg_id in result.rejected:
                    tree = result.provenance[arg_id].dispute_tree
                    children = {c.argument for c in tree.children}
                    if children & result.accepted:
                        continue
                    # a self-attacker is its own winning attacker
                    assert any(c.circular and c.argument == arg_id for c in tree.children)

    def test_defense_chain_tree(self):
        from argviz.argumentation import Role
        info = self._solve(DEFENSE_CHAIN).provenance["a"]
        tree = info.dispute_tree
        assert tree.argument == "a" and tree.role == Role.PROPONENT
        (opponent,) = tree.children
        assert opponent.argument == "b" and opponent.role == Role.OPPONENT
        (defender,) = opponent.children
        assert defender.argument == "c" and defender.role == Role.PROPONENT
        assert defender.children == ()
        assert info.primary_provenance == ("c",)
        assert info.actual_provenance == ("b", "c")

    def test_self_attack_marked_circular(self):
        tree = self._solve(SELF_ATTACK).provenance["a"].dispute_tree
        (child,) = tree.children
        assert child.circular is True
        assert child.children == ()

    def test_cycles_terminate(self):
        result = self._solve(ODD_CYCLE, "preferred")
        for info in result.provenance.values():
            ids = list(info.dispute_tree.iter_ids())
            assert len(ids) <= 10

    def test_opponent_children_from_winning_set(self):
        result = self._solve(FLOATING, "preferred")
        tree = result.provenance["d"].dispute_tree
        (c_node,) = tree.children
        assert {n.argument for n in c_node.children} == {"a", "b"}

    def test_credulous_defender_expanded(self):
        # a <-> b, b -> c: preferred extensions are {a, c} and {b}, so a is
        # in the winning set without being accepted in every extension
        result = self._solve((["a", "b", "c"], [("a", "b"), ("b", "a"), ("b", "c")]), "preferred")
        assert result.accepted == frozenset()
        tree = result.provenance["c"].dispute_tree
        (b_node,) = tree.children
        (a_node,) = b_node.children
        assert a_node.argument == "a"
        (back,) = a_node.children
        assert back.argument == "b" and back.circular is True

    def test_for_mode(self):
        from argviz.argumentation import ProvenanceMode
        info = self._solve(DEFENSE_CHAIN).provenance["a"]
        assert info.for_mode(ProvenanceMode.POTENTIAL) == ("b",)
        assert info.for_mode(ProvenanceMode.PRIMARY) == ("c",)
        assert info.for_mode(ProvenanceMode.ACTUAL) == ("b", "c")

    def test_reasons(self):
        result = self._solve(DEFENSE_CHAIN)
        assert "not attacked" in result.provenance["c"].reason
        assert "c" in result.provenance["b"].reason
        assert "itself" in self._solve(SELF_ATTACK).provenance["a"].reason

    def test_depth_limit_truncates(self):
        from argviz.argumentation import SemanticsEngine
        ids = [f"x{i}" for i in range(10)]
        attacks = [(ids[i + 1], ids[i]) for i in range(9)]
        result = SemanticsEngine(max_tree_depth=3).solve(_fw(ids, attacks), "grounded")
        tree = result.provenance["x1"].dispute_tree
        assert tree.depth == 3
        node = tree
        while node.children:
            node = node.children[0]
        assert node.truncated is True


# ── Notation Tests ─────────────────────────────────────────────

class TestNotations:
    def test_parse_aspartix(self):
        from argviz.formats import parse_aspartix
        fw = parse_aspartix("% weather\narg(a).\narg(b).\n\natt( a , b ).\narg(c)\n")
        assert fw.arg_ids == ("a", "b", "c")
        assert [t.pair for t in fw.attacks] == [("a", "b")]

    def test_parse_aspartix_bad_line(self):
        from argviz.argumentation import FrameworkParseError
        from argviz.formats import parse_aspartix
        with pytest.raises(FrameworkParseError) as exc:
            parse_aspartix("arg(a).\nattack(a,b).\n")
        assert exc.value.line == 2

    def test_dump_aspartix(self):
        from argviz.formats import dump_aspartix, parse_aspartix
        fw = _fw(*DEFENSE_CHAIN)
        text = dump_aspartix(fw)
        assert "att(b,a)." in text
        assert parse_aspartix(text).fingerprint == fw.fingerprint

    def test_parse_json_notation(self):
        from argviz.argumentation import ManualValue
        from argviz.formats import parse_framework
        fw = parse_framework(
            '{"name": "demo", "arguments": [{"id": "a", "value": "defeated"}, {"id": "b", "url": "https://x"}],'
            ' "defeats": [{"from": "b", "to": "a", "annotation": "rebuts"}]}'
        )
        assert fw.name == "demo"
        assert fw.get_argument("a").manual_value == ManualValue.DEFEATED
        assert fw.attacks[0].source == "b"
        assert fw.attacks[0].annotation == "rebuts"

    def test_parse_framework_falls_back_to_text(self):
        from argviz.formats import parse_framework
        fw = parse_framework("arg(x).\narg(y).\natt(x,y).", name="text")
        assert fw.name == "text"
        assert fw.arg_ids == ("x", "y")

    def test_parse_json_schema_error(self):
        from argviz.argumentation import FrameworkParseError
        from argviz.formats import parse_json
        with pytest.raises(FrameworkParseError):
            parse_json('{"arguments": [{"annotation": "no id"}]}')

    def test_parse_does_not_validate_references(self):
        from argviz.argumentation import InvalidFramework
        from argviz.formats import parse_json
        fw = parse_json({"arguments": [{"id": "a"}], "defeats": [{"from": "a", "to": "q"}]})
        with pytest.raises(InvalidFramework):
            fw.validate()

    def test_dump_json_uses_notation_keys(self):
        import json
        from argviz.formats import dump_json
        data = json.loads(dump_json(_fw(*DEFENSE_CHAIN, name="chain")))
        assert data["name"] == "chain"
        assert {"from": "b", "to": "a"} in data["defeats"]


# ── DOT Export Tests ───────────────────────────────────────────

class TestDotExport:
    def _export(self, scenario, semantics="grounded", **config):
        from argviz.argumentation import SemanticsEngine
        from argviz.formats import to_dot
        from argviz.models import GraphvizConfig
        fw = _fw(*scenario)
        result = SemanticsEngine().solve(fw, semantics)
        return to_dot(fw, result, GraphvizConfig(**config))

    def test_colors_by_label(self):
        dot = self._export(DEFENSE_CHAIN)
        assert dot.startswith("digraph ArgumentationFramework {")
        assert '"a" [fillcolor="#40cfff", fontcolor="black"];' in dot
        assert '"b" [fillcolor="#ffb763", fontcolor="black"];' in dot
        assert '"b" -> "a";' in dot
        assert "rankdir=LR;" in dot

    def test_dark_fill_gets_white_font(self):
        dot = self._export(INDEPENDENT, accepted_color="#000080")
        assert 'fontcolor="white"' in dot

    def test_backward_arrows_dropped(self):
        dot = self._export((["a", "b", "c"], [("a", "b"), ("c", "b")]), allow_backward_arrows=False)
        assert '"a" -> "b";' in dot
        assert '"c" -> "b"' not in dot

    def test_rank_same_groups(self):
        dot = self._export(DEFENSE_CHAIN, rank_same_groups=[["a", "c", "ghost"], ["b"]])
        assert '{ rank=same; "a"; "c"; }' in dot
        assert '{ rank=same; "b"; }' not in dot

    def test_annotations_escaped(self):
        from argviz.argumentation import Argument, Attack, Framework, SemanticsEngine
        from argviz.formats import to_dot
        fw = Framework(
            arguments=(Argument("a", annotation='He said "no"', url="https://e.com/a"), Argument("b")),
            attacks=(Attack("a", "b", annotation="undercut"),),
        )
        dot = to_dot(fw, SemanticsEngine().solve(fw, "grounded"))
        assert 'tooltip="He said \\"no\\""' in dot
        assert 'URL="https://e.com/a"' in dot
        assert '"a" -> "b" [label="undercut"];' in dot

    def test_no_stable_extension_renders_undecided(self):
        dot = self._export(ODD_CYCLE, "stable")
        assert dot.count('fillcolor="#fefe62"') == 3

    def test_bad_color_rejected(self):
        from pydantic import ValidationError
        from argviz.models import GraphvizConfig
        with pytest.raises(ValidationError):
            GraphvizConfig(accepted_color="blue")


# ── Samples Tests ──────────────────────────────────────────────

class TestSamples:
    def test_samples_are_valid(self):
        from argviz.samples import SAMPLE_FRAMEWORKS
        assert set(SAMPLE_FRAMEWORKS) == {"simple", "cycle", "complex"}
        for fw in SAMPLE_FRAMEWORKS.values():
            fw.validate()

    def test_random_is_seeded(self):
        from argviz.samples import random_framework
        assert random_framework(5, 8, seed=42) == random_framework(5, 8, seed=42)

    def test_random_attacks_distinct_and_not_self(self):
        from argviz.samples import random_framework
        fw = random_framework(5, 8, seed=1)
        pairs = [t.pair for t in fw.attacks]
        assert len(pairs) == 8
        assert len(set(pairs)) == 8
        assert all(s != t for s, t in pairs)
        fw.validate()

    def test_random_attack_cap(self):
        from argviz.samples import random_framework
        assert len(random_framework(3, 100, seed=0).attacks) == 6

    def test_random_ids_beyond_alphabet(self):
        from argviz.samples import random_framework
        fw = random_framework(28, 0, seed=0)
        assert fw.arguments[0].id == "A"
        assert fw.arguments[26].id == "A1"
        assert fw.arguments[27].id == "B1"


# ── Result Cache Tests ─────────────────────────────────────────

class TestResultCache:
    def test_hit_and_miss(self):
        from argviz.argumentation import SemanticsEngine
        from argviz.utils import ResultCache
        cache = ResultCache(max_entries=4)
        engine = SemanticsEngine()
        fw = _fw(*DEFENSE_CHAIN)

        first, hit1 = cache.get_or_solve(engine, fw, "grounded")
        second, hit2 = cache.get_or_solve(engine, _fw(*DEFENSE_CHAIN, name="renamed"), "grounded")
        assert (hit1, hit2) == (False, True)
        assert second is first
        assert cache.stats["hits"] == 1

    def test_semantics_is_part_of_key(self):
        from argviz.argumentation import SemanticsEngine
        from argviz.utils import ResultCache
        cache = ResultCache()
        engine = SemanticsEngine()
        fw = _fw(*MUTUAL)
        cache.get_or_solve(engine, fw, "grounded")
        _, hit = cache.get_or_solve(engine, fw, "preferred")
        assert hit is False
        assert len(cache) == 2

    def test_lru_eviction(self):
        from argviz.argumentation import SemanticsEngine
        from argviz.utils import ResultCache
        cache = ResultCache(max_entries=2)
        engine = SemanticsEngine()
        a, b, c = _fw(["a"]), _fw(["b"]), _fw(["c"])
        cache.get_or_solve(engine, a, "grounded")
        cache.get_or_solve(engine, b, "grounded")
        cache.get(a, "grounded")
        cache.get_or_solve(engine, c, "grounded")
        assert cache.get(a, "grounded") is not None
        assert cache.get(b, "grounded") is None

    def test_errors_not_cached(self):
        from argviz.argumentation import InvalidFramework, SemanticsEngine
        from argviz.utils import ResultCache
        cache = ResultCache()
        with pytest.raises(InvalidFramework):
            cache.get_or_solve(SemanticsEngine(), _fw(["a"], [("a", "b")]), "grounded")
        assert len(cache) == 0

    def test_separator_ids_do_not_share_entries(self):
        from argviz.argumentation import SemanticsEngine
        from argviz.utils import ResultCache
        cache = ResultCache()
        engine = SemanticsEngine()
        cache.get_or_solve(engine, _fw(["a,b"]), "grounded")
        result, hit = cache.get_or_solve(engine, _fw(["a", "b"]), "grounded")
        assert hit is False
        assert result.accepted == {"a", "b"}

    def test_duplicate_ids_refused_despite_cached_twin(self):
        from argviz.argumentation import InvalidFramework, SemanticsEngine
        from argviz.utils import ResultCache
        cache = ResultCache()
        engine = SemanticsEngine()
        cache.get_or_solve(engine, _fw(["z"]), "grounded")
        with pytest.raises(InvalidFramework) as exc:
            cache.get_or_solve(engine, _fw(["z", "z"]), "grounded")
        assert exc.value.duplicate_ids == ["z"]
        assert cache.stats["hits"] == 0
