import random
from datetime import date

from phishcheck.simulation import (
    CIPHER_SUITES,
    DNS_PROVIDERS,
    SimulatedRegistry,
    _add_years,
)


def make_registry(seed=0):
    return SimulatedRegistry(random.Random(seed), today=date(2024, 3, 1))


def test_domain_age_ranges_follow_host_hints():
    registry = make_registry()
    for _ in range(50):
        assert 0 <= registry.domain_age("free-gifts.example.org") < 180
        assert 0 <= registry.domain_age("Secure.Bank.example.com") < 180
        assert 0 <= registry.domain_age("prizes.xyz") < 180
        assert 180 <= registry.domain_age("example.com") < 1180
        assert 180 <= registry.domain_age("python.org") < 1180
        assert 0 <= registry.domain_age("example.io") < 500
        assert 0 <= registry.domain_age("10.0.0.1") < 500


def test_same_seed_same_details():
    a = make_registry(3).technical_details("example.com", True, 400)
    b = make_registry(3).technical_details("example.com", True, 400)
    assert a == b


def test_open_ports_always_include_web_port_and_are_unique():
    registry = make_registry()
    for _ in range(50):
        ports = registry.open_ports()
        assert 1 <= len(ports) <= 4
        assert ports == sorted(set(ports))
        assert 80 in ports or 443 in ports


def test_list_sizes():
    registry = make_registry()
    for _ in range(50):
        servers = registry.dns_servers()
        assert 2 <= len(servers) <= 3
        assert set(servers) <= set(DNS_PROVIDERS)

        ciphers = registry.tls_cipher_suites()
        assert 2 <= len(ciphers) <= 4
        assert set(ciphers) <= set(CIPHER_SUITES)

        assert len(registry.redirects()) <= 2


def test_ip_address_is_dotted_quad_in_range():
    octets = make_registry().ip_address().split(".")
    assert len(octets) == 4
    assert all(0 <= int(o) <= 255 for o in octets)


def test_firewall_name_matches_detection():
    registry = make_registry()
    for _ in range(50):
        firewall = registry.firewall()
        if firewall["detected"]:
            assert firewall["name"] != "None Detected"
        else:
            assert firewall["name"] == "None Detected"


def test_carbon_rating_matches_co2():
    registry = make_registry()
    for _ in range(50):
        carbon = registry.carbon_footprint()
        co2 = float(carbon["co2_per_visit"].rstrip("g"))
        expected = "A" if co2 < 0.5 else "B" if co2 < 0.8 else "C"
        assert carbon["rating"] == expected


def test_ssl_certificate_without_https_is_not_available():
    cert = make_registry().ssl_certificate(False)
    assert cert == {
        "valid": False,
        "issuer": "N/A",
        "valid_from": "N/A",
        "valid_to": "N/A",
        "days_remaining": 0,
    }


def test_ssl_certificate_with_https_is_current():
    registry = make_registry()
    for _ in range(20):
        cert = registry.ssl_certificate(True)
        assert cert["valid"] is True
        assert cert["valid_from"] <= "2024-03-01" < cert["valid_to"]
        expected = (date.fromisoformat(cert["valid_to"]) - date(2024, 3, 1)).days
        assert cert["days_remaining"] == expected
        assert cert["days_remaining"] > 0


def test_whois_creation_date_matches_domain_age():
    whois = make_registry().whois_info("example.com", domain_age=30)
    assert whois["creation_date"] == "2024-01-31"
    assert whois["domain_age"] == "30 days"
    assert whois["expiry_date"] > whois["creation_date"]


def test_add_years_rolls_leap_day_forward():
    assert _add_years(date(2024, 2, 29), 1) == date(2025, 3, 1)
    assert _add_years(date(2024, 2, 29), 4) == date(2028, 2, 29)


def test_technical_details_keys():
    details = make_registry().technical_details("example.com", False)
    assert details["ssl_certificate"] == "Invalid"
    assert details["ssl_certificate_details"]["valid"] is False
    assert set(details) == {
        "ip_address",
        "server_location",
        "ssl_certificate",
        "whois_info",
        "dnssec",
        "dns_servers",
        "server_info",
        "firewall",
        "tls_handshake",
        "tls_cipher_suites",
        "http_headers",
        "redirect_details",
        "carbon_footprint",
        "server_status",
        "open_ports",
        "http_security",
        "ssl_certificate_details",
    }
