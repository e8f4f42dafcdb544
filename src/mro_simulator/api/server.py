"""FastAPI server — HTTP access to the MRO cost projection engine.

Run with:
    uvicorn mro_simulator.api.server:app --reload --port 8000

Or:
    python -m mro_simulator.api.server

Endpoints:
    GET  /                     — name, version, pointers
    GET  /health               — liveness probe
    GET  /schema               — JSON Schema for ProjectionRequest
    GET  /parameters/defaults  — default parameters as JSON
    POST /project              — run a projection (partial or full request)
    POST /project/narrative    — run + plain-English interpretation
"""

from __future__ import annotations

from typing import Any

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from pydantic import BaseModel

from mro_simulator.config.parameters import ProjectionParameters, ProjectionRequest
from mro_simulator.engine.projection import project
from mro_simulator.models.results import ProjectionResult
from mro_simulator.api.narrative import generate_narrative, headline_metrics


API_NAME = "Fleet Degradation Simulator API"
API_VERSION = "1.0"


# ═══════════════════════════════════════════════════════════════════════════
# App setup
# ═══════════════════════════════════════════════════════════════════════════

app = FastAPI(
    title=API_NAME,
    version=API_VERSION,
    description=(
        "MRO cost projection and re-forecasting. Send cost, limit, phased "
        "growth rates and an optional re-forecast; get back a 26-year series "
        "and the first year each curve exceeds the economic limit."
    ),
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_methods=["*"],
    allow_headers=["*"],
)


# ═══════════════════════════════════════════════════════════════════════════
# Response models
# ═══════════════════════════════════════════════════════════════════════════

class ProjectResponse(BaseModel):
    """Response from /project."""
    parameters: ProjectionParameters
    result: ProjectionResult
    headline: dict[str, Any]


class NarrativeResponse(BaseModel):
    """Response from /project/narrative."""
    narrative: str
    headline_metrics: dict[str, Any]


# ═══════════════════════════════════════════════════════════════════════════
# Endpoints
# ═══════════════════════════════════════════════════════════════════════════

@app.get("/health")
def health_check():
    """Health check for deployment platforms."""
    return {"status": "ok"}


@app.get("/")
def root():
    return {
        "name": API_NAME,
        "version": API_VERSION,
        "start_here": "GET /parameters/defaults",
        "docs": "GET /docs (interactive Swagger UI)",
    }


@app.get("/schema")
def get_schema():
    """JSON Schema for the request body — types, defaults, constraints."""
    return ProjectionRequest.model_json_schema()


@app.get("/parameters/defaults")
def get_defaults():
    """Default parameters. Use as a starting point for modifications."""
    return ProjectionRequest().model_dump()


@app.post("/project", response_model=ProjectResponse)
def run_projection(req: ProjectionRequest):
    """Run a projection.

    Missing fields use defaults. Out-of-range values (non-positive costs,
    intervention year outside 1-24) are rejected with 422.

    Example minimal request:
    ```json
    {"intervention_enabled": true, "intervention_year": 3, "intervention_cost": 4000000}
    ```
    """
    params = req.to_parameters()
    result = project(params)
    return ProjectResponse(
        parameters=params,
        result=result,
        headline=headline_metrics(params, result),
    )


@app.post("/project/narrative", response_model=NarrativeResponse)
def run_projection_narrative(req: ProjectionRequest):
    """Same as /project but returns the plain-English report and headline figures."""
    params = req.to_parameters()
    result = project(params)
    return NarrativeResponse(
        narrative=generate_narrative(params, result),
        headline_metrics=headline_metrics(params, result),
    )


# ═══════════════════════════════════════════════════════════════════════════
# CLI entry point
# ═══════════════════════════════════════════════════════════════════════════

def main():
    """Run the API server."""
    import uvicorn
    uvicorn.run(
        "mro_simulator.api.server:app",
        host="0.0.0.0",
        port=8000,
        reload=True,
    )


if __name__ == "__main__":
    main()
