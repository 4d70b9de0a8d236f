"""
Plain-text rendering of PhishCheck results.

Fields missing from a result render as "Unknown" (certificate and
firewall fields as "N/A") so partial records never break a report.
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional

UNKNOWN = "Unknown"
NOT_AVAILABLE = "N/A"

BAR_WIDTH = 20


def _value(value: Any, default: str = UNKNOWN) -> str:
    if value is None or value == "" or value == []:
        return default
    return str(value)


def _flag(value: Optional[bool], yes: str, no: str) -> str:
    if value is None:
        return UNKNOWN
    return yes if value else no


def _enabled(value: Optional[bool]) -> str:
    return _flag(value, "Enabled", "Disabled")


def _row(title: str, value: str) -> str:
    return f"  {title + ':':<26} {value}"


def risk_bar(percentage: int) -> str:
    filled = round(BAR_WIDTH * percentage / 100)
    return "[" + "#" * filled + "-" * (BAR_WIDTH - filled) + "]"


def indicator_rows(result: Dict[str, Any]) -> List[str]:
    details = result.get("technical_details") or {}
    age = result.get("domain_age_days")
    subdomains = result.get("number_of_subdomains")
    return [
        _row("Invalid Characters", _flag(result.get("has_invalid_characters"), "Detected", "None")),
        _row("Suspicious Characters", _flag(result.get("has_suspicious_characters"), "Detected", "None")),
        _row("Subdomains", UNKNOWN if subdomains is None else f"{subdomains} subdomain(s)"),
        _row("IP Address in URL", _flag(result.get("has_ip_address_in_url"), "Yes", "No")),
        _row("HTTPS", _flag(result.get("uses_https"), "Yes", "No")),
        _row("Domain Age", UNKNOWN if age is None else f"{age} days"),
        _row("Free Hosting", _flag(result.get("is_free_hosting_platform"), "Yes", "No")),
        _row("Server Location", _value(details.get("server_location"))),
    ]


def server_tab(details: Dict[str, Any]) -> List[str]:
    info = details.get("server_info") or {}
    status = details.get("server_status") or {}
    lines = [
        "Server Information",
        _row("IP Address", _value(details.get("ip_address"))),
        _row("Location", _value(details.get("server_location"))),
        _row("Web Server", _value(info.get("web_server"))),
        _row("Powered By", _value(info.get("powered_by"))),
        "Server Status",
        _row("Status", _value(status.get("status"))),
        _row("Uptime", _value(status.get("uptime"))),
        _row("Response Time", _value(status.get("response_time"))),
    ]
    return lines


def security_tab(details: Dict[str, Any]) -> List[str]:
    cert = details.get("ssl_certificate_details") or {}
    security = details.get("http_security") or {}
    firewall = details.get("firewall") or {}
    days = cert.get("days_remaining")
    return [
        "SSL Certificate",
        _row("Valid", _flag(cert.get("valid"), "Yes", "No")),
        _row("Issuer", _value(cert.get("issuer"), NOT_AVAILABLE)),
        _row("Valid From", _value(cert.get("valid_from"), NOT_AVAILABLE)),
        _row("Valid To", _value(cert.get("valid_to"), NOT_AVAILABLE)),
        _row("Days Remaining", NOT_AVAILABLE if days is None else str(days)),
        "HTTP Security",
        _row("HSTS", _enabled(security.get("hsts"))),
        _row("Content-Security-Policy", _enabled(security.get("content_security_policy"))),
        _row("X-Frame-Options", _enabled(security.get("x_frame_options"))),
        _row("X-XSS-Protection", _enabled(security.get("x_xss_protection"))),
        _row("Referrer-Policy", _enabled(security.get("referrer_policy"))),
        "Firewall",
        _row("Detected", _flag(firewall.get("detected"), "Yes", "No")),
        _row("Name", _value(firewall.get("name"), NOT_AVAILABLE)),
    ]


def dns_tab(details: Dict[str, Any]) -> List[str]:
    whois = details.get("whois_info") or {}
    servers = details.get("dns_servers") or []
    lines = [
        "DNS Information",
        _row("DNSSEC", _value(details.get("dnssec"))),
        _row("DNS Servers", ", ".join(servers) if servers else UNKNOWN),
        "Domain WHOIS",
        _row("Registrar", _value(whois.get("registrar"))),
        _row("Registrant", _value(whois.get("registrant_name"))),
        _row("Organization", _value(whois.get("registrant_organization"))),
        _row("Created", _value(whois.get("creation_date"))),
        _row("Expires", _value(whois.get("expiry_date"))),
        _row("Domain Age", _value(whois.get("domain_age"))),
    ]
    return lines


def tls_tab(details: Dict[str, Any]) -> List[str]:
    handshake = details.get("tls_handshake") or {}
    ciphers = details.get("tls_cipher_suites") or []
    lines = [
        "TLS Handshake",
        _row("Protocol", _value(handshake.get("protocol"))),
        _row("Status", _value(handshake.get("status"))),
        _row("Time", _value(handshake.get("time"))),
        "TLS Cipher Suites",
    ]
    if ciphers:
        lines.extend(f"  - {c}" for c in ciphers)
    else:
        lines.append(f"  {UNKNOWN}")
    return lines


def misc_tab(details: Dict[str, Any]) -> List[str]:
    headers = details.get("http_headers") or {}
    redirects = details.get("redirect_details") or []
    ports = details.get("open_ports") or []
    carbon = details.get("carbon_footprint") or {}

    lines = ["HTTP Headers"]
    if headers:
        lines.extend(_row(name, _value(value)) for name, value in headers.items())
    else:
        lines.append(f"  {UNKNOWN}")

    lines.append("Redirects")
    if redirects:
        for hop in redirects:
            source = hop.get("from", UNKNOWN)
            target = hop.get("to", UNKNOWN)
            lines.append(f"  {source} -> {target} ({hop.get('status_code', UNKNOWN)})")
    else:
        lines.append("  No redirects")

    lines.append("Open Ports")
    lines.append("  " + (", ".join(str(p) for p in ports) if ports else UNKNOWN))

    lines.extend(
        [
            "Carbon Footprint",
            _row("CO2 per Visit", _value(carbon.get("co2_per_visit"))),
            _row("Cleaner Than", _value(carbon.get("cleaner_than"))),
            _row("Rating", _value(carbon.get("rating"))),
        ]
    )
    return lines


TABS = (
    ("server", server_tab),
    ("security", security_tab),
    ("dns", dns_tab),
    ("tls", tls_tab),
    ("misc", misc_tab),
)


def render_report(result: Dict[str, Any], details: bool = True) -> str:
    """Render one evaluate() record as a multi-line text report."""
    url = result.get("url", UNKNOWN)
    if "error" in result:
        return f"{url}\n  Error: Failed to analyze URL. Please try again."

    pct = result.get("risk_percentage", 0)
    lines = [
        f"Analysis Results for {url}",
        f"  Risk: {risk_bar(pct)} {pct}% ({result.get('risk_level', UNKNOWN)} risk)",
        f"  Verdict: {result.get('verdict_message', UNKNOWN)}",
        "",
    ]
    lines.extend(indicator_rows(result))

    reasons = result.get("reasons") or []
    if reasons:
        lines.append("")
        lines.append("Reasons")
        lines.extend(f"  - {r}" for r in reasons)

    if details:
        tech = result.get("technical_details") or {}
        for name, build in TABS:
            lines.append("")
            lines.append(f"== {name} ==")
            lines.extend(build(tech))

    return "\n".join(lines)
