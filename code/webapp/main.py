import logging
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from household import codec
from household.config import LOG_LEVEL, SHARE_BASE_URL, SHARE_QUERY_KEY
from household.schemas import InvalidScenario
from household.sweep import sweep
from webapp.core.models import (
    Point,
    Scenario,
    ScenarioLookup,
    ShareRequest,
    ShareResponse,
    SweepResponse,
)
from webapp.core.session import ScenarioSession, build_notes

logging.basicConfig(level=LOG_LEVEL)
logger = logging.getLogger(__name__)

app = FastAPI(title="Income Scenario Calculator API")


@app.exception_handler(InvalidScenario)
async def invalid_scenario_handler(_request: Request, exc: InvalidScenario):
    return JSONResponse(status_code=422, content={"detail": str(exc)})


@app.get("/health")
def health():
    return {"status": "ok"}


@app.get("/defaults", response_model=Scenario)
def defaults():
    return Scenario()


@app.post("/sweep", response_model=SweepResponse)
def run_sweep(payload: Scenario):
    params = payload.to_params()
    points = [Point.from_data_point(p) for p in sweep(params)]
    logger.debug("swept %d points for %s", len(points), params)
    return SweepResponse(scenario=payload, points=points, notes=build_notes(params))


@app.post("/share", response_model=ShareResponse)
def share(payload: ShareRequest):
    params = payload.scenario.to_params()
    return ShareResponse(
        token=codec.encode(params),
        url=codec.build_share_url(params, payload.base_url or SHARE_BASE_URL),
    )


@app.get("/scenario", response_model=ScenarioLookup)
def lookup_scenario(scenario: Optional[str] = None):
    session = ScenarioSession.from_query({SHARE_QUERY_KEY: scenario})
    return ScenarioLookup(scenario=Scenario.from_params(session.params), source=session.source)
