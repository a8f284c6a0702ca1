# tests/test_report.py

"""
Report Tests - markdown report and results charts
"""

import pytest

from blueprint.models.lead import Lead
from blueprint.services.report_generator import generate_assessment_report, report_filename


@pytest.fixture
def report(engine, moderate_answers):
    return engine.score(moderate_answers)


class TestMarkdownReport:

    def test_sections(self, report):
        md = generate_assessment_report(report)
        assert md.startswith("# Breakaway Blueprint™ — Readiness Report")
        assert "## Overall Score: 75/100" in md
        assert "**Moderate Readiness**" in md
        assert "## Primary Gap: Alpha" in md
        assert "[Explore Preparation Pathways](https://example.com/contact)" in md

    def test_breakdown_rows_with_bands(self, report):
        md = generate_assessment_report(report)
        assert "| Alpha | 10 | 20 | 50% | Developing |" in md
        assert "| Beta | 30 | 30 | 100% | Strong |" in md

    def test_benchmark_rows(self, report):
        md = generate_assessment_report(report)
        assert "| Alpha | 50% | 60% | -10 |" in md
        assert "| Gamma | 50% | 50% | +0 |" in md

    def test_roadmap_is_weakest_three(self, report):
        md = generate_assessment_report(report)
        roadmap = md.split("## 90-Day Priority Roadmap")[1]
        assert roadmap.index("1. **Alpha") < roadmap.index("2. **Gamma") < roadmap.index("3. **Beta")

    def test_lead_header(self, report):
        lead = Lead(name="Sam Lee", email="sam@example.com", firm="Acme")
        md = generate_assessment_report(report, lead)
        assert "> **Sam Lee** | Acme | Generated:" in md

    def test_filename(self):
        assert report_filename() == "Breakaway-Blueprint-Results.md"
        lead = Lead(name="Sam  O'Neil", email="sam@example.com")
        assert report_filename(lead) == "Breakaway-Blueprint-Results-Sam-O-Neil.md"
        assert report_filename(Lead(name="李", email="li@example.com")) == "Breakaway-Blueprint-Results.md"
