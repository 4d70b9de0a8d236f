"""
Scoring and verdict logic for PhishCheck.

This module turns the heuristic findings for a URL into a risk
percentage, a risk level and a phishing verdict, and attaches the
simulated technical details used by the CLI and API reports.
"""

from __future__ import annotations

import logging
from dataclasses import asdict
from typing import Any, Dict, Optional

from .config import get_seed
from .heuristics import (
    AnalysisFailed,
    analyze_url,
    matches_free_hosting,
    normalize_url,
)
from .simulation import DomainAgeProvider, SimulatedRegistry


logger = logging.getLogger(__name__)

PHISHING = "Phishing"
NOT_PHISHING = "NotPhishing"
ANALYSIS_FAILED = "AnalysisFailed"

VERDICT_MESSAGES = {
    PHISHING: "Phishing attack detected",
    NOT_PHISHING: "No phishing attack detected",
    ANALYSIS_FAILED: "Analysis failed",
}

TOTAL_INDICATORS = 7
PHISHING_INDICATOR_THRESHOLD = 3

HIGH_RISK_PERCENTAGE = 70
MEDIUM_RISK_PERCENTAGE = 40


def risk_percentage(indicator_count: int) -> int:
    """Every indicator weighs the same, so the score is the triggered share."""
    pct = int(100 * indicator_count / TOTAL_INDICATORS + 0.5)
    return max(0, min(100, pct))


def risk_level(percentage: int) -> str:
    if percentage >= HIGH_RISK_PERCENTAGE:
        return "High"
    if percentage >= MEDIUM_RISK_PERCENTAGE:
        return "Medium"
    return "Low"


def decide_verdict(indicator_count: int, url: str, domain_age_days: Optional[int]) -> str:
    if (
        indicator_count >= PHISHING_INDICATOR_THRESHOLD
        or matches_free_hosting(url)
        or domain_age_days is None
    ):
        return PHISHING
    return NOT_PHISHING


def failed_result(raw_url: str) -> Dict[str, Any]:
    return {
        "url": raw_url,
        "error": "Failed to analyze URL",
        "verdict": ANALYSIS_FAILED,
        "verdict_message": VERDICT_MESSAGES[ANALYSIS_FAILED],
    }


def evaluate(raw_url: str, registry: Optional[DomainAgeProvider] = None) -> Dict[str, Any]:
    """
    Analyze a URL and return a flat result record.

    `registry` supplies domain age and, if it has a
    `technical_details` method, the display-only details. It
    defaults to a SimulatedRegistry seeded from PHISHCHECK_SEED
    (unseeded when unset).

    Never raises: unparseable input gives a record with an `error`
    key and verdict 'AnalysisFailed'.

    Returns a dict with at least:
      - url (normalized)
      - one key per Findings field
      - risk_indicator_count, risk_percentage, risk_level
      - verdict: 'Phishing' | 'NotPhishing'
      - verdict_message, reasons, technical_details
    """
    url = normalize_url(raw_url)
    try:
        if registry is None:
            registry = SimulatedRegistry.seeded(get_seed())
        findings = analyze_url(url, registry)
        describe = getattr(registry, "technical_details", None)
        details = describe(findings.host, findings.uses_https, findings.domain_age_days) if describe else {}
    except AnalysisFailed as exc:
        logger.warning("Analysis failed for %r: %s", raw_url, exc)
        return failed_result(raw_url)
    except Exception:
        logger.exception("Unexpected error analyzing %r", raw_url)
        return failed_result(raw_url)

    count = sum(findings.indicators())
    pct = risk_percentage(count)
    verdict = decide_verdict(count, url, findings.domain_age_days)

    logger.debug("Evaluated %s: %d indicators, %d%%, %s", url, count, pct, verdict)

    record = asdict(findings)
    reasons = record.pop("reasons")
    if not reasons:
        reasons.append("No phishing indicators detected.")

    return {
        "url": url,
        **record,
        "risk_indicator_count": count,
        "risk_percentage": pct,
        "risk_level": risk_level(pct),
        "verdict": verdict,
        "verdict_message": VERDICT_MESSAGES[verdict],
        "reasons": reasons,
        "technical_details": details,
    }
