"""
models — API Request/Response Schemas

These Pydantic models define the HTTP contract for argviz v1 and double
as the schema of the JSON framework notation:

    {"name": "...",
     "arguments": [{"id": "a", "annotation": "...", "url": "...", "value": "accepted"}],
     "defeats":   [{"from": "b", "to": "a", "annotation": "..."}]}

Engine-side types live in argviz.argumentation.models as dataclasses;
the payloads here convert to and from them.
"""

from __future__ import annotations

import re
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from argviz.argumentation.models import (
    Argument,
    Attack,
    Framework,
    ManualValue,
    ProvenanceInfo,
    ProvenanceMode,
    ResultStatus,
    SemanticsKind,
    SemanticsResult,
)

_HEX_COLOR = re.compile(r"^#[0-9a-fA-F]{6}$")


# ── Framework Notation ───────────────────────────────────────────

class ArgumentPayload(BaseModel):
    id: str = Field(..., min_length=1)
    annotation: Optional[str] = None
    url: Optional[str] = None
    value: Optional[ManualValue] = None

    @field_validator("id")
    @classmethod
    def strip_id(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("argument id must not be blank")
        return v


class DefeatPayload(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    source: str = Field(..., alias="from", min_length=1)
    target: str = Field(..., alias="to", min_length=1)
    annotation: Optional[str] = None

    @field_validator("source", "target")
    @classmethod
    def strip_endpoint(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("attack endpoints must not be blank")
        return v


class FrameworkPayload(BaseModel):
    name: str = ""
    arguments: list[ArgumentPayload] = Field(default_factory=list)
    defeats: list[DefeatPayload] = Field(default_factory=list)

    def to_framework(self) -> Framework:
        return Framework(
            name=self.name,
            arguments=tuple(
                Argument(
                    id=a.id,
                    annotation=a.annotation,
                    url=a.url,
                    manual_value=a.value,
                )
                for a in self.arguments
            ),
            attacks=tuple(
                Attack(source=d.source, target=d.target, annotation=d.annotation)
                for d in self.defeats
            ),
        )

    @classmethod
    def from_framework(cls, framework: Framework) -> FrameworkPayload:
        return cls(
            name=framework.name,
            arguments=[
                ArgumentPayload(
                    id=a.id,
                    annotation=a.annotation,
                    url=a.url,
                    value=a.manual_value,
                )
                for a in framework.arguments
            ],
            defeats=[
                DefeatPayload(source=t.source, target=t.target, annotation=t.annotation)
                for t in framework.attacks
            ],
        )

    def dump(self) -> dict:
        """Serialize using the notation's own key names ("from"/"to")."""
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)


# ── Graphviz Export ──────────────────────────────────────────────

class GraphvizConfig(BaseModel):
    direction: str = "LR"
    accepted_color: str = "#40cfff"
    rejected_color: str = "#ffb763"
    undecided_color: str = "#fefe62"
    allow_backward_arrows: bool = True
    rank_same_groups: list[list[str]] = Field(default_factory=list)

    @field_validator("direction")
    @classmethod
    def validate_direction(cls, v: str) -> str:
        v = v.upper()
        if v not in ("LR", "TB"):
            raise ValueError("direction must be LR or TB")
        return v

    @field_validator("accepted_color", "rejected_color", "undecided_color")
    @classmethod
    def validate_color(cls, v: str) -> str:
        if not _HEX_COLOR.match(v):
            raise ValueError("colors must be #rrggbb hex strings")
        return v.lower()


# ── Request Models ───────────────────────────────────────────────

class SolveRequest(BaseModel):
    framework: FrameworkPayload
    semantics: SemanticsKind = SemanticsKind.GROUNDED


class TextSolveRequest(BaseModel):
    """Framework given as raw text in either notation."""
    content: str = Field(..., min_length=1)
    semantics: SemanticsKind = SemanticsKind.GROUNDED


class ProvenanceRequest(BaseModel):
    framework: FrameworkPayload
    semantics: SemanticsKind = SemanticsKind.GROUNDED
    argument: str
    mode: ProvenanceMode = ProvenanceMode.ACTUAL


class DotExportRequest(BaseModel):
    framework: FrameworkPayload
    semantics: SemanticsKind = SemanticsKind.GROUNDED
    config: GraphvizConfig = Field(default_factory=GraphvizConfig)


# ── Response Models ──────────────────────────────────────────────

class ProvenanceSchema(BaseModel):
    status: str
    reason: str
    attackers: list[str] = Field(default_factory=list)
    defenders: list[str] = Field(default_factory=list)
    potential_provenance: list[str] = Field(default_factory=list)
    primary_provenance: list[str] = Field(default_factory=list)
    actual_provenance: list[str] = Field(default_factory=list)
    dispute_tree: dict = Field(default_factory=dict)

    @classmethod
    def from_info(cls, info: ProvenanceInfo) -> ProvenanceSchema:
        return cls(**info.to_dict())


class SolveResponse(BaseModel):
    semantics: SemanticsKind
    status: ResultStatus
    accepted: list[str] = Field(default_factory=list)
    rejected: list[str] = Field(default_factory=list)
    undecided: list[str] = Field(default_factory=list)
    extensions: list[list[str]] = Field(default_factory=list)
    provenance: dict[str, ProvenanceSchema] = Field(default_factory=dict)
    candidates_explored: int = 0
    fingerprint: str = ""
    cached: bool = False
    solve_ms: float = 0.0

    @classmethod
    def from_result(
        cls,
        result: SemanticsResult,
        fingerprint: str = "",
        cached: bool = False,
        solve_ms: float = 0.0,
    ) -> SolveResponse:
        return cls(
            semantics=result.semantics,
            status=result.status,
            accepted=sorted(result.accepted),
            rejected=sorted(result.rejected),
            undecided=sorted(result.undecided),
            extensions=[list(e.sorted_ids()) for e in result.extensions],
            provenance={
                arg_id: ProvenanceSchema.from_info(info)
                for arg_id, info in sorted(result.provenance.items())
            },
            candidates_explored=result.candidates_explored,
            fingerprint=fingerprint,
            cached=cached,
            solve_ms=round(solve_ms, 3),
        )


class ProvenanceResponse(BaseModel):
    argument: str
    status: str
    mode: ProvenanceMode
    highlighted: list[str] = Field(default_factory=list)
    reason: str = ""
    dispute_tree: dict = Field(default_factory=dict)


class SampleInfo(BaseModel):
    id: str
    name: str
    num_arguments: int = 0
    num_attacks: int = 0


class HealthResponse(BaseModel):
    status: str = "ok"
    version: str = "1.0.0"
    uptime_seconds: int = 0
    search_budget: int = 0
    cache: dict = Field(default_factory=dict)
