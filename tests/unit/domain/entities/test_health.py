from __future__ import annotations

from datetime import timezone

import pytest

from src.domain.entities.health import HealthReport, compute_score
from src.domain.entities.probe import ProbeResult


@pytest.mark.parametrize(
    ("total", "failures", "expected"),
    [
        (10, 1, 90),
        (3, 0, 100),
        (1, 1, 0),
        (7, 1, 85),
        (3, 1, 66),
        (6, 5, 16),
        (0, 0, 100),
    ],
)
def test_compute_score_rounds_failure_share_up(total, failures, expected) -> None:
    assert compute_score(total, failures) == expected


def test_compute_score_clamps_failures_to_total() -> None:
    assert compute_score(2, 5) == 0


def test_report_from_results_counts_every_probe() -> None:
    report = HealthReport.from_results(
        {
            "httpd": [
                ProbeResult.success("httpd", 80),
                ProbeResult.success("172.16.238.11", 80),
            ],
            "mysql": [
                ProbeResult.success("mysql", 3306),
                ProbeResult.rejected("172.16.238.12", 3306, "Access denied"),
                ProbeResult.success("127.0.0.1", 3306),
            ],
        }
    )

    assert report.total_checks == 5
    assert report.total_failures == 1
    assert report.score_percent == 80
    assert not report.healthy
    assert list(report.per_service) == ["httpd", "mysql"]
    assert report.checked_at.tzinfo == timezone.utc


def test_report_without_services_is_healthy() -> None:
    report = HealthReport.from_results({})

    assert report.total_checks == 0
    assert report.score_percent == 100
    assert report.healthy
