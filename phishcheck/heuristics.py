"""
Heuristic URL checks for PhishCheck.

This module normalizes and parses a URL and runs the syntax-level
phishing indicators over it (unsafe characters, subdomain depth,
raw IP hosts, missing HTTPS, free hosting platforms). Domain age is
not measured here; it is handed in by a registry provider.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, List, Optional, Tuple
from urllib.parse import urlsplit

if TYPE_CHECKING:
    from .simulation import DomainAgeProvider


class AnalysisFailed(ValueError):
    """Raised when a URL cannot be parsed or yields no host."""


# Tokens associated with low-trust or throwaway hosting. Matched as plain
# substrings, so structural fragments like "-com" and "com." are included.
FREE_HOSTING_PLATFORMS: Tuple[str, ...] = (
    "freewebhostmost.com", "000webhost.com", "x10hosting.com", "weebly.com",
    "vercel.app", "netlify.com", ".monster", ".top", ".pro", "-com", "com.",
    ".solutions", ".playtest", "communmutty", "comunutty", ".vip", ".ww",
    "fsthosting", ".tw", ".de", ".legal", ".kg", ".n1", ".store",
    "firebaseapp", ".bond", ".br", "bj", "hstn", ".asp", ".gd", ".r2",
    ".top", ".mx", ".fr", "gcbt", "comcom", "-sale", ".vip", ".leia",
    ".beta", ".cn", ".ca", "=phi", ".web", ".center", ".centre", ".shop",
    "m.s", "com-info", "-lg", "cp.", "hn.pn", ".run", ".es", ".click",
    "-binance", ".webflow", ".jp", "-cdn", ".cdn", ".sso", "-sso", ".msde",
    "-fi", ".p7ah", "net-", "-net", ".ubpages", "i.m", ".pagemaker",
    ".ubpages", "_uc", ".gy", "/d/e/", "/gmx", ".p", "aspmx.", ".aspmx",
    "m.", ".m", ".vpn", "vpn.", ".cfd", "-cse.", "/accueil", ".de",
    ".intttc", ".p250w", ".work", ".im", ".community", "-bless.", ".ys7z",
    ".doom", "-lala.", "-bless.", ".bless", "-steam.", ".concord", "-bonus",
    ".wall", "0steam.", "-steam.", ".com.co", "ycc.com", ",wp", "/przyciski",
    "/fr/", ".fr", ".top", ".devr", "-iossa.", "-luigi-", "-luigi", ".luigi",
    ".lma", ".nz", "device.", "/for", "yee.", "-usa.", ".mx", "/ncp/", ".dk",
    ".md", ".pp-al", ".my", ".ro", ".it", ".firebaseapp", "-io", "app.",
    "-nft", "-gpt-", ".log", ".dog", ".shop", "swhm.", ".swhm", ".ac1360",
    "com-info", "token.", "sea.", ".gbjslyhr", ".help", "-be.", "-seguro.",
    "-suspenso.", ".3ds-", ".portal", ".account", ".admin", ".de", ".ru",
    "ftp.",
)

INVALID_URL_CHARS = frozenset('<>"{}|\\^[]` ')

SUSPICIOUS_CHARS = frozenset(' <>_$^*{}[]|"`')

IPV4_HOST_RE = re.compile(r"^\d{1,3}(\.\d{1,3}){3}$")

NEW_DOMAIN_AGE_DAYS = 180
MAX_SUBDOMAIN_LABELS = 3


@dataclass(frozen=True)
class ParsedUrl:
    scheme: str
    host: str
    labels: Tuple[str, ...]


@dataclass
class Findings:
    host: str
    has_invalid_characters: bool
    has_suspicious_characters: bool
    number_of_subdomains: int
    has_too_many_subdomains: bool
    has_ip_address_in_url: bool
    uses_https: bool
    domain_age_days: Optional[int]
    is_newly_created_domain: bool
    is_free_hosting_platform: bool
    reasons: List[str] = field(default_factory=list)

    def indicators(self) -> List[bool]:
        """The seven equally weighted risk indicators, in report order."""
        return [
            self.has_invalid_characters,
            self.has_suspicious_characters,
            self.has_too_many_subdomains,
            self.has_ip_address_in_url,
            not self.uses_https,
            self.is_newly_created_domain,
            self.is_free_hosting_platform,
        ]


def normalize_url(raw_url: str) -> str:
    if raw_url.startswith("http://") or raw_url.startswith("https://"):
        return raw_url
    return "https://" + raw_url


def parse_url(url: str) -> ParsedUrl:
    """
    Split a normalized URL into scheme and host.

    The host keeps its original case; userinfo and port are dropped.
    Raises AnalysisFailed if the URL cannot be split or has no host.
    """
    try:
        parts = urlsplit(url)
    except ValueError as exc:
        raise AnalysisFailed(f"Could not parse URL {url!r}: {exc}") from exc

    authority = parts.netloc.rpartition("@")[2]
    if authority.startswith("["):
        host = authority[1:].partition("]")[0]
    else:
        host = authority.partition(":")[0]

    if not host:
        raise AnalysisFailed(f"No host found in URL {url!r}")

    return ParsedUrl(scheme=parts.scheme, host=host, labels=tuple(host.split(".")))


def matches_free_hosting(text: str) -> bool:
    return any(token in text for token in FREE_HOSTING_PLATFORMS)


def has_invalid_characters(url: str) -> bool:
    return any(c in url for c in INVALID_URL_CHARS) or matches_free_hosting(url)


def has_suspicious_characters(url: str) -> bool:
    return any(c in url for c in SUSPICIOUS_CHARS)


def count_subdomains(labels: Tuple[str, ...]) -> int:
    return max(0, len(labels) - 2)


def is_ip_literal(host: str) -> bool:
    # Shape only; octets above 255 still match.
    return IPV4_HOST_RE.match(host) is not None


def analyze_url(url: str, registry: DomainAgeProvider) -> Findings:
    """
    Run every syntax heuristic over a normalized URL.

    Domain age is asked from `registry` (anything with a
    `domain_age(host)` method). None means the age is unavailable,
    which never marks the domain as newly created.
    """
    parsed = parse_url(url)
    host = parsed.host
    domain_age_days = registry.domain_age(host)
    reasons: List[str] = []

    invalid = has_invalid_characters(url)
    if invalid:
        reasons.append("URL contains invalid characters or a low-trust hosting token.")

    suspicious = has_suspicious_characters(url)
    if suspicious:
        reasons.append("URL contains characters rarely seen in legitimate links.")

    subdomains = count_subdomains(parsed.labels)
    too_many = len(parsed.labels) > MAX_SUBDOMAIN_LABELS
    if too_many:
        reasons.append(f"Host has {subdomains} subdomains, which can hide the real domain.")

    ip_host = is_ip_literal(host)
    if ip_host:
        reasons.append("URL uses a raw IP address as host.")

    uses_https = url.startswith("https")
    if not uses_https:
        reasons.append("URL does not use HTTPS.")

    newly_created = domain_age_days is not None and domain_age_days < NEW_DOMAIN_AGE_DAYS
    if newly_created:
        reasons.append(f"Domain was registered only {domain_age_days} days ago.")
    elif domain_age_days is None:
        reasons.append("Domain age is unavailable.")

    free_hosting = matches_free_hosting(host)
    if free_hosting:
        reasons.append("Host is on a known free hosting platform.")

    return Findings(
        host=host,
        has_invalid_characters=invalid,
        has_suspicious_characters=suspicious,
        number_of_subdomains=subdomains,
        has_too_many_subdomains=too_many,
        has_ip_address_in_url=ip_host,
        uses_https=uses_https,
        domain_age_days=domain_age_days,
        is_newly_created_domain=newly_created,
        is_free_hosting_platform=free_hosting,
        reasons=reasons,
    )
