"""
app.py — argviz: Argumentation Semantics API

Request flow:
  Client ──POST framework──▶ argviz ──▶ ResultCache ──miss──▶ SemanticsEngine
                                 │
                                 ├── solve       ──▶ labels + provenance
                                 ├── provenance  ──▶ highlighted ids for one argument
                                 └── export/dot  ──▶ Graphviz text

The engine is pure and synchronous; the only state held here is the
result cache keyed by framework fingerprint and semantics.

Usage:
  export ARGVIZ_SEARCH_BUDGET=100000
  python -m argviz.app          # or: argviz-server
"""

from __future__ import annotations

import logging
import os
import time
from contextlib import asynccontextmanager
from typing import Optional

import uvicorn
from fastapi import FastAPI, HTTPException, Query, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse, PlainTextResponse

from argviz import __version__
from argviz.argumentation import (
    DEFAULT_SEARCH_BUDGET,
    FrameworkParseError,
    InvalidFramework,
    NoStableExtension,
    SearchBudgetExceeded,
    SemanticsEngine,
)
from argviz.formats import parse_framework, to_dot
from argviz.middleware import RequestTimer
from argviz.models import (
    DotExportRequest,
    FrameworkPayload,
    HealthResponse,
    ProvenanceRequest,
    ProvenanceResponse,
    SampleInfo,
    SolveRequest,
    SolveResponse,
    TextSolveRequest,
)
from argviz.samples import SAMPLE_FRAMEWORKS, get_sample, random_framework
from argviz.utils import ResultCache

# ── Logging ──────────────────────────────────────────────────────

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s │ %(name)-14s │ %(levelname)-7s │ %(message)s",
    datefmt="%H:%M:%S",
)
log = logging.getLogger("argviz.server")

# ── Configuration ────────────────────────────────────────────────

SEARCH_BUDGET = int(os.environ.get("ARGVIZ_SEARCH_BUDGET", DEFAULT_SEARCH_BUDGET))
TREE_DEPTH = int(os.environ.get("ARGVIZ_TREE_DEPTH", "64"))
CACHE_SIZE = int(os.environ.get("ARGVIZ_CACHE_SIZE", "256"))
HOST = os.environ.get("ARGVIZ_HOST", "0.0.0.0")
PORT = int(os.environ.get("ARGVIZ_PORT", "8787"))
MAX_RANDOM_ARGUMENTS = 52
SERVER_START_TIME = time.time()

# ── Engine & Cache ───────────────────────────────────────────────

engine = SemanticsEngine(search_budget=SEARCH_BUDGET, max_tree_depth=TREE_DEPTH)
cache = ResultCache(max_entries=CACHE_SIZE)


# ── App Lifecycle ────────────────────────────────────────────────

@asynccontextmanager
async def lifespan(app: FastAPI):
    log.info("=" * 60)
    log.info("  argviz — Argumentation Semantics API")
    log.info(f"  Version:       {__version__}")
    log.info(f"  Search budget: {SEARCH_BUDGET} candidate sets")
    log.info(f"  Tree depth:    {TREE_DEPTH}")
    log.info(f"  Cache size:    {CACHE_SIZE}")
    log.info("=" * 60)

    yield

    log.info(f"argviz server stopped. Cache: {cache.stats}")


# ── FastAPI App ──────────────────────────────────────────────────

app = FastAPI(
    title="argviz API",
    description="Grounded, complete, preferred and stable semantics for abstract argumentation frameworks, with provenance.",
    version=__version__,
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_methods=["GET", "POST", "OPTIONS"],
    allow_headers=["Content-Type"],
)
app.add_middleware(RequestTimer)


# ── Error Mapping ────────────────────────────────────────────────

@app.exception_handler(InvalidFramework)
async def invalid_framework_handler(request: Request, exc: InvalidFramework):
    log.warning(f"Rejected framework: {exc}")
    return JSONResponse(
        status_code=422,
        content={
            "error": "invalid_framework",
            "message": str(exc),
            "unknown_ids": exc.unknown_ids,
            "duplicate_ids": exc.duplicate_ids,
        },
    )


@app.exception_handler(FrameworkParseError)
async def parse_error_handler(request: Request, exc: FrameworkParseError):
    return JSONResponse(
        status_code=422,
        content={"error": "parse_error", "message": str(exc), "line": exc.line},
    )


@app.exception_handler(SearchBudgetExceeded)
async def budget_handler(request: Request, exc: SearchBudgetExceeded):
    return JSONResponse(
        status_code=422,
        content={
            "error": "search_budget_exceeded",
            "message": str(exc),
            "budget": exc.budget,
            "semantics": exc.semantics,
        },
    )


@app.exception_handler(NoStableExtension)
async def no_stable_handler(request: Request, exc: NoStableExtension):
    return JSONResponse(
        status_code=409,
        content={"error": "no_stable_extension", "message": str(exc)},
    )


# ═════════════════════════════════════════════════════════════════
#  ENDPOINTS
# ═════════════════════════════════════════════════════════════════


# ── Health ───────────────────────────────────────────────────────

@app.get("/v1/health", response_model=HealthResponse, tags=["System"])
async def health():
    return HealthResponse(
        status="ok",
        version=__version__,
        uptime_seconds=int(time.time() - SERVER_START_TIME),
        search_budget=SEARCH_BUDGET,
        cache=cache.stats,
    )


# ── Solve ────────────────────────────────────────────────────────

def _solve(framework, semantics) -> SolveResponse:
    start = time.perf_counter()
    result, hit = cache.get_or_solve(engine, framework, semantics)
    elapsed = (time.perf_counter() - start) * 1000
    return SolveResponse.from_result(
        result,
        fingerprint=framework.fingerprint,
        cached=hit,
        solve_ms=elapsed,
    )


@app.post("/v1/solve", response_model=SolveResponse, tags=["Semantics"])
async def solve(req: SolveRequest):
    """
    Label every argument under the requested semantics.

    A framework without a stable extension answers 200 with
    status "no_stable_extension" and empty label lists.
    """
    framework = req.framework.to_framework()
    log.info(f"Solve | {framework!r} | {req.semantics.value}")
    return _solve(framework, req.semantics)


@app.post("/v1/solve/text", response_model=SolveResponse, tags=["Semantics"])
async def solve_text(req: TextSolveRequest):
    """Same as /v1/solve for a framework given in either text notation."""
    framework = parse_framework(req.content)
    log.info(f"Solve (text) | {framework!r} | {req.semantics.value}")
    return _solve(framework, req.semantics)


# ── Provenance Inspection ────────────────────────────────────────

@app.post("/v1/provenance", response_model=ProvenanceResponse, tags=["Semantics"])
async def provenance(req: ProvenanceRequest):
    framework = req.framework.to_framework()
    result, _ = cache.get_or_solve(engine, framework, req.semantics)
    result.raise_for_status()

    info = result.provenance.get(req.argument)
    if info is None:
        raise HTTPException(status_code=404, detail=f"Unknown argument: {req.argument}")

    return ProvenanceResponse(
        argument=req.argument,
        status=info.status.value,
        mode=req.mode,
        highlighted=list(info.for_mode(req.mode)),
        reason=info.reason,
        dispute_tree=info.dispute_tree.to_dict(),
    )


# ── Export ───────────────────────────────────────────────────────

@app.post("/v1/export/dot", tags=["Export"])
async def export_dot(req: DotExportRequest):
    framework = req.framework.to_framework()
    result, _ = cache.get_or_solve(engine, framework, req.semantics)
    return PlainTextResponse(
        content=to_dot(framework, result, req.config),
        media_type="text/vnd.graphviz",
    )


# ── Samples ──────────────────────────────────────────────────────

@app.get("/v1/samples", tags=["Samples"])
async def list_samples():
    samples = [
        SampleInfo(
            id=sample_id,
            name=fw.name,
            num_arguments=len(fw.arguments),
            num_attacks=len(fw.attacks),
        )
        for sample_id, fw in SAMPLE_FRAMEWORKS.items()
    ]
    return {"samples": samples}


@app.get("/v1/samples/random", response_model=FrameworkPayload, tags=["Samples"])
async def random_sample(
    arguments: int = Query(5, ge=0, le=MAX_RANDOM_ARGUMENTS),
    attacks: int = Query(8, ge=0),
    seed: Optional[int] = None,
):
    return FrameworkPayload.from_framework(random_framework(arguments, attacks, seed))


@app.get("/v1/samples/{sample_id}", response_model=FrameworkPayload, tags=["Samples"])
async def get_sample_framework(sample_id: str):
    framework = get_sample(sample_id)
    if framework is None:
        raise HTTPException(status_code=404, detail=f"Sample not found: {sample_id}")
    return FrameworkPayload.from_framework(framework)


# ── Entrypoint ───────────────────────────────────────────────────

def main():
    uvicorn.run(
        "argviz.app:app",
        host=HOST,
        port=PORT,
        log_level="info",
        reload=False,
    )


if __name__ == "__main__":
    main()
