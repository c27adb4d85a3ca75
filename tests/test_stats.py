"""
Aggregation engine unit tests — pure functions over in-memory rows.
"""

from datetime import date, datetime, timedelta, timezone

from audit_dashboard.domain import Audit, AuditStatus, Company
from audit_dashboard.services import stats

NOW = datetime(2026, 10, 19, 12, 0, tzinfo=timezone.utc)

COMPANIES = [
    Company(id=1, name="carol", display_name="Carol"),
    Company(id=2, name="grand-vision", display_name="Grand Vision"),
    Company(id=3, name="sunglass-hut", display_name="SunglassHut"),
]


def _audit(audit_id: int, company_id: int, status: AuditStatus, audit_date: date, age_days: float = 1) -> Audit:
    return Audit(
        id=audit_id,
        company_id=company_id,
        status=status.value,
        audit_date=audit_date,
        created_at=NOW - timedelta(days=age_days),
    )


class TestStatusBreakdown:
    def test_empty_collection_reports_zero_for_every_status(self):
        result = stats.status_breakdown([])

        assert result == [
            {"status": "aprovada", "count": 0},
            {"status": "aprovada-com-aviso", "count": 0},
            {"status": "reprovada", "count": 0},
        ]

    def test_counts_per_status(self):
        audits = [
            _audit(1, 1, AuditStatus.REJECTED, date(2025, 1, 1)),
            _audit(2, 2, AuditStatus.REJECTED, date(2025, 1, 2)),
            _audit(3, 2, AuditStatus.APPROVED, date(2025, 1, 3)),
        ]

        counts = {row["status"]: row["count"] for row in stats.status_breakdown(audits)}

        assert counts == {"aprovada": 1, "aprovada-com-aviso": 0, "reprovada": 2}


class TestCompanyBreakdown:
    def test_companies_without_audits_have_zero_and_no_date(self):
        result = stats.company_breakdown(COMPANIES, [])

        assert [row["company"] for row in result] == ["carol", "grand-vision", "sunglass-hut"]
        assert all(row["count"] == 0 for row in result)
        assert all(row["last_audit_date"] is None for row in result)

    def test_per_company_counts_and_latest_audit_date(self):
        audits = [
            _audit(1, 1, AuditStatus.APPROVED, date(2025, 2, 1)),
            _audit(2, 1, AuditStatus.APPROVED_WITH_WARNING, date(2025, 5, 1)),
            _audit(3, 1, AuditStatus.REJECTED, date(2025, 3, 1)),
            _audit(4, 3, AuditStatus.APPROVED, date(2024, 12, 31)),
        ]

        by_name = {row["company"]: row for row in stats.company_breakdown(COMPANIES, audits)}

        carol = by_name["carol"]
        assert carol["count"] == 3
        assert (carol["approved"], carol["approved_with_warning"], carol["rejected"]) == (1, 1, 1)
        assert carol["last_audit_date"] == date(2025, 5, 1)
        assert by_name["grand-vision"]["count"] == 0
        assert by_name["sunglass-hut"]["last_audit_date"] == date(2024, 12, 31)

    def test_audits_for_unknown_companies_are_ignored(self):
        audits = [_audit(1, 99, AuditStatus.APPROVED, date(2025, 1, 1))]

        assert sum(row["count"] for row in stats.company_breakdown(COMPANIES, audits)) == 0


class TestRecentCount:
    def test_only_audits_inside_trailing_window(self):
        audits = [
            _audit(1, 1, AuditStatus.APPROVED, date(2025, 1, 1), age_days=0.5),
            _audit(2, 1, AuditStatus.APPROVED, date(2025, 1, 1), age_days=29),
            _audit(3, 1, AuditStatus.APPROVED, date(2025, 1, 1), age_days=31),
        ]

        assert stats.recent_count(audits, now=NOW, days=30) == 2

    def test_naive_timestamps_are_treated_as_utc(self):
        audit = _audit(1, 1, AuditStatus.APPROVED, date(2025, 1, 1))
        audit.created_at = (NOW - timedelta(days=2)).replace(tzinfo=None)

        assert stats.recent_count([audit], now=NOW) == 1


def test_overview_combines_all_three_views():
    audits = [_audit(1, 1, AuditStatus.REJECTED, date(2025, 1, 1))]

    result = stats.overview(COMPANIES, audits, now=NOW)

    assert {"status": "reprovada", "count": 1} in result["status_breakdown"]
    assert result["company_breakdown"][0]["count"] == 1
    assert result["recent_audits"] == 1
