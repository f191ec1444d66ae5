import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.responses import PlainTextResponse

from pingmon.api_schemas import ConfigResponse, HealthResponse, PingResultResponse
from pingmon.config import settings
from pingmon.query import ResultsQuery
from pingmon.registry import resolve_targets
from pingmon.runner import Scheduler
from pingmon.state import ResultStore

logger = logging.getLogger(__name__)

BANNER = "HTTP Check Service. Go to /ping for results"

store = ResultStore()
query = ResultsQuery(store)


def build_scheduler(result_store: ResultStore) -> Scheduler:
    return Scheduler(
        targets=resolve_targets(),
        store=result_store,
        interval_s=settings.PINGMON_INTERVAL_S,
        timeout_s=settings.PINGMON_TIMEOUT_S,
    )


@asynccontextmanager
async def lifespan(app: FastAPI):
    scheduler = build_scheduler(store)
    app.state.scheduler = scheduler
    logger.info(
        "Starting HTTP check service for %d targets every %ss",
        len(scheduler.targets),
        scheduler.interval_s,
    )
    scheduler.start()
    try:
        yield
    finally:
        scheduler.stop()
        scheduler.join(timeout=5)


app = FastAPI(
    title="pingmon",
    version="1.0.0",
    description=(
        "Probes a fixed list of endpoints over HTTP every couple of minutes "
        "and serves the latest reachability and latency per endpoint."
    ),
    lifespan=lifespan,
)


@app.get(
    "/",
    response_class=PlainTextResponse,
    tags=["system"],
    summary="Banner",
)
def index():
    return BANNER


@app.get(
    "/health",
    response_model=HealthResponse,
    tags=["system"],
    summary="Health Check",
    description="Liveness endpoint used by probes and orchestration.",
)
def health():
    return {"status": "ok"}


@app.get(
    "/config",
    response_model=ConfigResponse,
    tags=["system"],
    summary="Current Effective Config",
    description="Returns the targets and timings the running scheduler uses.",
)
def config(request: Request):
    scheduler = request.app.state.scheduler
    return {
        "targets": scheduler.targets,
        "interval_s": scheduler.interval_s,
        "timeout_s": scheduler.timeout_s,
        "port": settings.PINGMON_PORT,
    }


@app.get(
    "/ping",
    response_model=dict[str, PingResultResponse],
    response_model_exclude_none=True,
    tags=["status"],
    summary="Latest Check Results",
    description="Latest outcome per target. Targets not checked yet are absent.",
)
def ping():
    return query.get_results_payload()
