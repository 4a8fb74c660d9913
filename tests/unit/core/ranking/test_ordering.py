"""
Unit tests for leaderboard ranking, job-title grouping and history filtering.
"""
import random

import pytest

from core.models import User
from core.ranking import (
    ALL_BUCKETS,
    DEFAULT_BUCKET,
    bucket_label,
    filter_history,
    group_by_job_title,
    job_titles,
    rank_reports,
    status_breakdown,
)
from tests import make_report

T1 = "2026-01-01T09:00:00+00:00"
T2 = "2026-01-02T09:00:00+00:00"


class TestRankReports:

    def test_newer_report_wins_score_tie(self):
        older = make_report("a", score=80, created_at=T1)
        newer = make_report("b", score=80, created_at=T2)

        assert [r.id for r in rank_reports([older, newer])] == ["b", "a"]
        assert [r.id for r in rank_reports([newer, older])] == ["b", "a"]

    def test_score_descending(self):
        reports = [make_report("low", score=40), make_report("high", score=95), make_report("mid", score=70)]
        assert [r.id for r in rank_reports(reports)] == ["high", "mid", "low"]

    def test_full_ties_break_on_id(self):
        reports = [make_report("c", score=60, created_at=T1), make_report("a", score=60, created_at=T1),
                   make_report("b", score=60, created_at=T1)]
        assert [r.id for r in rank_reports(reports)] == ["a", "b", "c"]

    def test_order_is_independent_of_input_order(self):
        reports = [
            make_report(f"r{i}", score=score, created_at=created)
            for i, (score, created) in enumerate([(80, T1), (80, T2), (80, T1), (65, T2), (99, T1), (65, T2)])
        ]
        expected = [r.id for r in rank_reports(reports)]

        rng = random.Random(7)
        for _ in range(10):
            shuffled = list(reports)
            rng.shuffle(shuffled)
            assert [r.id for r in rank_reports(shuffled)] == expected

        assert [r.id for r in rank_reports(rank_reports(reports))] == expected

    def test_bucket_filter(self):
        reports = [
            make_report("be", score=50, job_title="Backend Engineer"),
            make_report("ds", score=90, job_title="Data Scientist"),
        ]
        assert [r.id for r in rank_reports(reports, "Backend Engineer")] == ["be"]
        assert [r.id for r in rank_reports(reports, ALL_BUCKETS)] == ["ds", "be"]
        assert [r.id for r in rank_reports(reports, None)] == ["ds", "be"]

    def test_unknown_bucket_is_empty(self):
        assert rank_reports([make_report("a")], "Astronaut") == []


class TestGrouping:

    @pytest.mark.parametrize("title", ["", "   ", None])
    def test_blank_titles_share_default_bucket(self, title):
        assert bucket_label(title) == DEFAULT_BUCKET

    def test_default_bucket_is_never_split(self):
        reports = [
            make_report("a", job_title=""),
            make_report("b", job_title="Backend Engineer"),
            make_report("c", job_title="  "),
            make_report("d", job_title=DEFAULT_BUCKET),
        ]

        groups = group_by_job_title(reports)

        assert [r.id for r in groups[DEFAULT_BUCKET]] == ["a", "c", "d"]
        assert list(groups.keys()) == [DEFAULT_BUCKET, "Backend Engineer"]

    def test_titles_are_trimmed(self):
        reports = [make_report("a", job_title=" QA Lead "), make_report("b", job_title="QA Lead")]
        assert job_titles(reports) == ["QA Lead"]

    def test_status_breakdown_counts_every_status(self):
        reports = [make_report("a"), make_report("b", status="shortlisted"), make_report("c", status="shortlisted")]
        assert status_breakdown(reports) == {"pending": 1, "shortlisted": 2, "rejected": 0, "interviewing": 0}


class TestFilterHistory:

    def setup_method(self):
        self.reports = [
            make_report("mine-old", user_id="u1", created_at=T1),
            make_report("theirs", user_id="u2", created_at=T2),
            make_report("mine-new", user_id="u1", created_at=T2),
        ]

    def test_user_sees_only_own_reports(self):
        viewer = User(id="u1", email="u1@example.com", name="U1")

        history = filter_history(self.reports, viewer)

        assert all(r.user_id == viewer.id for r in history)
        assert [r.id for r in history] == ["mine-new", "mine-old"]

    def test_admin_sees_everything(self):
        admin = User(id="admin-001", email="admin@atspro.com", name="Admin", role="admin")
        assert [r.id for r in filter_history(self.reports, admin)] == ["mine-new", "theirs", "mine-old"]
