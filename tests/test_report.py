from phishcheck.report import render_report, risk_bar
from phishcheck.scoring import evaluate
from phishcheck.simulation import SimulatedRegistry


def test_risk_bar_width():
    assert risk_bar(0) == "[" + "-" * 20 + "]"
    assert risk_bar(100) == "[" + "#" * 20 + "]"
    assert risk_bar(43).count("#") == 9


def test_failed_result_renders_only_error():
    text = render_report(evaluate(""))
    assert "Failed to analyze URL" in text
    assert "== server ==" not in text
    assert "Verdict" not in text


def test_full_report_has_indicators_and_tabs():
    result = evaluate("http://example.com/a_b", SimulatedRegistry.seeded(5))
    text = render_report(result)

    assert "http://example.com/a_b" in text
    assert f"{result['risk_percentage']}%" in text
    assert result["verdict_message"] in text
    assert "Suspicious Characters:" in text
    assert "HTTPS:" in text
    for tab in ["server", "security", "dns", "tls", "misc"]:
        assert f"== {tab} ==" in text
    assert result["technical_details"]["ip_address"] in text


def test_missing_fields_render_as_unknown():
    partial = {
        "url": "https://example.com",
        "risk_percentage": 14,
        "risk_level": "Low",
        "verdict_message": "No phishing attack detected",
    }
    text = render_report(partial)
    assert "Domain Age:" in text
    assert "Unknown" in text
    assert "N/A" in text


def test_details_can_be_left_out(established):
    text = render_report(evaluate("https://example.com", established), details=False)
    assert "Invalid Characters:" in text
    assert "==" not in text
