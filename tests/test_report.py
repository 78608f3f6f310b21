"""Tests for curriculum.models.report."""
from curriculum.models.report import Finding, ValidationReport


def test_add_routes_by_severity() -> None:
    report = ValidationReport()
    report.add(Finding(severity="error", code="empty-field", message="no title"))
    report.add(Finding(severity="warning", code="orphaned-code-fence", message="odd fences"))
    report.add(Finding(severity="warning", code="orphaned-code-fence", message="odd fences again"))

    assert not report.ok
    assert len(report.errors) == 1
    assert len(report.warnings) == 2
    assert report.summary() == {"empty-field": 1, "orphaned-code-fence": 2}


def test_merge_keeps_both_reports_intact() -> None:
    first = ValidationReport(errors=[Finding(severity="error", code="a", message="a")])
    second = ValidationReport(warnings=[Finding(severity="warning", code="b", message="b")])

    merged = first.merge(second)

    assert [f.code for f in merged.findings()] == ["a", "b"]
    assert first.warnings == []
    assert second.errors == []


def test_empty_report_is_ok() -> None:
    assert ValidationReport().ok
