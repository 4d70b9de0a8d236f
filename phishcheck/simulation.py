"""
Simulated registry and server data for PhishCheck.

Nothing in here touches the network. Domain age, server location,
DNS, TLS, WHOIS and the other technical details are drawn from a
random source so that reports look complete. Pass a seeded
random.Random to get reproducible output.
"""

from __future__ import annotations

import random
from datetime import date, timedelta
from typing import Any, Dict, List, Optional, Protocol

import tldextract


# Offline extractor: bundled public suffix snapshot, never fetched.
_extract = tldextract.TLDExtract(suffix_list_urls=())

NEW_DOMAIN_KEYWORDS = ("free", "login", "secure")
NEW_DOMAIN_SUFFIXES = {"xyz", "info"}
ESTABLISHED_SUFFIXES = {"com", "org", "net", "gov"}

COUNTRIES = (
    "United States", "Russia", "China", "Netherlands",
    "Germany", "France", "United Kingdom", "Canada",
)

DNSSEC_STATUSES = ("Enabled", "Disabled", "Not Configured")

DNS_PROVIDERS = (
    "ns1.cloudflare.com", "ns2.cloudflare.com",
    "ns1.google.com", "ns2.google.com",
    "ns1.amazon.com", "ns2.amazon.com",
    "ns1.godaddy.com", "ns2.godaddy.com",
)

WEB_SERVERS = ("Apache/2.4.41", "nginx/1.18.0", "Microsoft-IIS/10.0", "LiteSpeed/5.4.1")
POWERED_BY = ("PHP/7.4.3", "PHP/8.0.13", "PHP/8.1.2", "Not Detected")

FIREWALLS = ("Cloudflare", "AWS WAF", "Sucuri", "Imperva")
NO_FIREWALL = "None Detected"

TLS_PROTOCOLS = ("TLSv1.2", "TLSv1.3")
TLS_STATUSES = ("Successful", "Failed", "Timeout")
TLS_TIMES_MS = (100, 150, 200, 250, 300, 350)

CIPHER_SUITES = (
    "TLS_AES_128_GCM_SHA256",
    "TLS_AES_256_GCM_SHA384",
    "TLS_CHACHA20_POLY1305_SHA256",
    "ECDHE-ECDSA-AES128-GCM-SHA256",
    "ECDHE-RSA-AES128-GCM-SHA256",
    "ECDHE-ECDSA-AES256-GCM-SHA384",
    "ECDHE-RSA-AES256-GCM-SHA384",
)

REDIRECT_STATUS_CODES = (301, 302, 307)

CO2_GRAMS = (0.1, 0.2, 0.3, 0.4, 0.5, 0.6, 0.7, 0.8, 0.9, 1.0)
UPTIMES = ("99.9", "99.99", "99.999", "100")

COMMON_PORTS = (21, 22, 25, 53, 80, 443, 3306, 8080, 8443)

REGISTRARS = (
    "GoDaddy.com, LLC",
    "Namecheap, Inc.",
    "Amazon Registrar, Inc.",
    "Google LLC",
    "Cloudflare, Inc.",
)

CERT_ISSUERS = (
    "Let's Encrypt Authority X3",
    "DigiCert SHA2 Secure Server CA",
    "Cloudflare Inc ECC CA-3",
    "Amazon",
)


class DomainAgeProvider(Protocol):
    def domain_age(self, host: str) -> Optional[int]:
        ...


def _add_years(day: date, years: int) -> date:
    try:
        return day.replace(year=day.year + years)
    except ValueError:
        # Feb 29 into a non-leap year
        return day.replace(year=day.year + years, month=3, day=1)


class SimulatedRegistry:
    """
    Fake WHOIS/DNS/TLS data source.

    Every method draws from self.rng; nothing is cached between calls.
    """

    def __init__(self, rng: Optional[random.Random] = None, today: Optional[date] = None):
        self.rng = rng or random.Random()
        self._today = today

    @classmethod
    def seeded(cls, seed: Optional[int]) -> "SimulatedRegistry":
        return cls(random.Random(seed))

    @property
    def today(self) -> date:
        return self._today or date.today()

    def domain_age(self, host: str) -> int:
        """Age in days; keyword and TLD hints skew towards young domains."""
        lowered = host.lower()
        suffix = _extract(lowered).suffix

        if any(k in lowered for k in NEW_DOMAIN_KEYWORDS) or suffix in NEW_DOMAIN_SUFFIXES:
            return self.rng.randrange(180)
        if suffix in ESTABLISHED_SUFFIXES:
            return 180 + self.rng.randrange(1000)
        return self.rng.randrange(500)

    def ip_address(self) -> str:
        return ".".join(str(self.rng.randrange(256)) for _ in range(4))

    def server_location(self) -> str:
        return self.rng.choice(COUNTRIES)

    def dnssec(self) -> str:
        return self.rng.choice(DNSSEC_STATUSES)

    def dns_servers(self) -> List[str]:
        count = 2 + self.rng.randrange(2)
        return [self.rng.choice(DNS_PROVIDERS) for _ in range(count)]

    def server_info(self) -> Dict[str, str]:
        return {
            "web_server": self.rng.choice(WEB_SERVERS),
            "powered_by": self.rng.choice(POWERED_BY),
        }

    def firewall(self) -> Dict[str, Any]:
        detected = self.rng.random() > 0.3
        return {
            "detected": detected,
            "name": self.rng.choice(FIREWALLS) if detected else NO_FIREWALL,
        }

    def tls_handshake(self) -> Dict[str, str]:
        return {
            "protocol": self.rng.choice(TLS_PROTOCOLS),
            "status": self.rng.choice(TLS_STATUSES),
            "time": f"{self.rng.choice(TLS_TIMES_MS)}ms",
        }

    def tls_cipher_suites(self) -> List[str]:
        count = 2 + self.rng.randrange(3)
        return [self.rng.choice(CIPHER_SUITES) for _ in range(count)]

    def http_headers(self) -> Dict[str, str]:
        return {
            "Server": self.server_info()["web_server"],
            "X-Powered-By": self.server_info()["powered_by"],
            "Content-Type": "text/html; charset=UTF-8",
            "Content-Encoding": "gzip" if self.rng.random() > 0.5 else "none",
            "Cache-Control": "max-age=3600, public",
            "X-Frame-Options": "SAMEORIGIN" if self.rng.random() > 0.5 else "DENY",
            "X-XSS-Protection": "1; mode=block",
            "X-Content-Type-Options": "nosniff",
            "Strict-Transport-Security": (
                "max-age=31536000; includeSubDomains" if self.rng.random() > 0.7 else "not set"
            ),
        }

    def redirects(self) -> List[Dict[str, Any]]:
        hops = []
        for i in range(self.rng.randrange(3)):
            hops.append(
                {
                    "from": f"http{'s' if self.rng.random() > 0.5 else ''}://example{i}.com",
                    "to": f"http{'s' if self.rng.random() > 0.7 else ''}://example{i + 1}.com",
                    "status_code": self.rng.choice(REDIRECT_STATUS_CODES),
                }
            )
        return hops

    def carbon_footprint(self) -> Dict[str, str]:
        co2 = self.rng.choice(CO2_GRAMS)
        if co2 < 0.5:
            rating = "A"
        elif co2 < 0.8:
            rating = "B"
        else:
            rating = "C"
        return {
            "co2_per_visit": f"{co2:.2f}g",
            "cleaner_than": f"{self.rng.randrange(100)}%",
            "rating": rating,
        }

    def server_status(self) -> Dict[str, str]:
        response_time = 100 + self.rng.randrange(900)
        return {
            "status": "Online" if self.rng.random() > 0.1 else "Offline",
            "uptime": f"{self.rng.choice(UPTIMES)}%",
            "response_time": f"{response_time}ms",
        }

    def open_ports(self) -> List[int]:
        count = self.rng.randrange(4) + 1
        ports = [80 if self.rng.random() > 0.5 else 443]
        while len(ports) < count:
            port = self.rng.choice(COMMON_PORTS)
            if port not in ports:
                ports.append(port)
        return sorted(ports)

    def whois_info(self, host: str, domain_age: Optional[int] = None) -> Dict[str, str]:
        if domain_age is None:
            domain_age = self.domain_age(host)

        created = self.today - timedelta(days=domain_age)
        expires = _add_years(created, self.rng.randrange(5) + 1)
        return {
            "registrar": self.rng.choice(REGISTRARS),
            "registrant_name": "Privacy Protected" if self.rng.random() > 0.5 else "John Doe",
            "registrant_organization": (
                "Privacy Protected" if self.rng.random() > 0.5 else "Example Organization"
            ),
            "creation_date": created.isoformat(),
            "expiry_date": expires.isoformat(),
            "domain_age": f"{domain_age} days",
        }

    def http_security(self) -> Dict[str, bool]:
        return {
            "hsts": self.rng.random() > 0.6,
            "content_security_policy": self.rng.random() > 0.7,
            "x_frame_options": self.rng.random() > 0.5,
            "x_xss_protection": self.rng.random() > 0.5,
            "referrer_policy": self.rng.random() > 0.6,
        }

    def ssl_certificate(self, uses_https: bool) -> Dict[str, Any]:
        if not uses_https:
            return {
                "valid": False,
                "issuer": "N/A",
                "valid_from": "N/A",
                "valid_to": "N/A",
                "days_remaining": 0,
            }

        today = self.today
        valid_from = today - timedelta(days=self.rng.randrange(90))
        valid_to = valid_from + timedelta(days=90 + self.rng.randrange(275))
        return {
            "valid": True,
            "issuer": self.rng.choice(CERT_ISSUERS),
            "valid_from": valid_from.isoformat(),
            "valid_to": valid_to.isoformat(),
            "days_remaining": (valid_to - today).days,
        }

    def technical_details(
        self, host: str, uses_https: bool, domain_age: Optional[int] = None
    ) -> Dict[str, Any]:
        """All display-only fields for one report."""
        return {
            "ip_address": self.ip_address(),
            "server_location": self.server_location(),
            "ssl_certificate": "Valid" if uses_https else "Invalid",
            "whois_info": self.whois_info(host, domain_age),
            "dnssec": self.dnssec(),
            "dns_servers": self.dns_servers(),
            "server_info": self.server_info(),
            "firewall": self.firewall(),
            "tls_handshake": self.tls_handshake(),
            "tls_cipher_suites": self.tls_cipher_suites(),
            "http_headers": self.http_headers(),
            "redirect_details": self.redirects(),
            "carbon_footprint": self.carbon_footprint(),
            "server_status": self.server_status(),
            "open_ports": self.open_ports(),
            "http_security": self.http_security(),
            "ssl_certificate_details": self.ssl_certificate(uses_https),
        }
