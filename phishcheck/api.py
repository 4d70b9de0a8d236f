import logging
from contextlib import asynccontextmanager
from typing import Any, Dict, List, Literal, Optional

from fastapi import Depends, FastAPI, HTTPException, status
from fastapi.security import APIKeyHeader
from pydantic import BaseModel

from . import config
from .scoring import evaluate
from .simulation import SimulatedRegistry


logger = logging.getLogger(__name__)


class AnalysisResponse(BaseModel):
    schema_version: Literal["1.0"] = "1.0"
    url: str
    host: Optional[str] = None
    verdict: Literal["Phishing", "NotPhishing", "AnalysisFailed"]
    verdict_message: str
    error: Optional[str] = None
    has_invalid_characters: Optional[bool] = None
    has_suspicious_characters: Optional[bool] = None
    number_of_subdomains: Optional[int] = None
    has_too_many_subdomains: Optional[bool] = None
    has_ip_address_in_url: Optional[bool] = None
    uses_https: Optional[bool] = None
    domain_age_days: Optional[int] = None
    is_newly_created_domain: Optional[bool] = None
    is_free_hosting_platform: Optional[bool] = None
    risk_indicator_count: Optional[int] = None
    risk_percentage: Optional[int] = None
    risk_level: Optional[Literal["Low", "Medium", "High"]] = None
    reasons: List[str] = []
    technical_details: Dict[str, Any] = {}


api_key_header = APIKeyHeader(name=config.API_KEY_NAME, auto_error=False)


async def require_api_key(api_key: Optional[str] = Depends(api_key_header)):
    if api_key is None or api_key != config.API_KEY:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Unauthorized",
        )


@asynccontextmanager
async def lifespan(app: FastAPI):
    config.configure_logging()
    yield


app = FastAPI(title="PhishCheck", version="0.1.0", lifespan=lifespan)


def request_registry() -> Optional[SimulatedRegistry]:
    """One registry per request so a batch shares a single random stream."""
    try:
        return SimulatedRegistry.seeded(config.get_seed())
    except ValueError as exc:
        # evaluate() turns the bad seed into failure records
        logger.error("Invalid simulation seed: %s", exc)
        return None


class AnalyzeUrlRequest(BaseModel):
    url: str


class AnalyzeUrlsRequest(BaseModel):
    urls: List[str]


@app.get("/health")
async def health():
    return {"status": "ok", "version": "0.1.0"}


@app.post("/analyze-url", response_model=AnalysisResponse, dependencies=[Depends(require_api_key)])
async def analyze_url(body: AnalyzeUrlRequest):
    return evaluate(body.url, request_registry())


class AnalyzeUrlsResponse(BaseModel):
    results: List[AnalysisResponse]


@app.post("/analyze-urls", response_model=AnalyzeUrlsResponse, dependencies=[Depends(require_api_key)])
async def analyze_urls(body: AnalyzeUrlsRequest):
    registry = request_registry()
    return {"results": [evaluate(url, registry) for url in body.urls]}


if __name__ == "__main__":
    import uvicorn

    uvicorn.run("phishcheck.api:app", host="0.0.0.0", port=8000, reload=True)
