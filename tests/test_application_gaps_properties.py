"""Property-based tests for application history gap analysis."""

from datetime import datetime, timedelta, timezone

import pytest
from hypothesis import given, strategies as st, settings

from career_inbox.analysis.gaps import identify_application_gaps
from career_inbox.core.models import GapRecord


def _utc(year, month, day):
    return datetime(year, month, day, tzinfo=timezone.utc)


@st.composite
def history_strategy(draw):
    """Generate application histories using any of the supported date fields."""
    days = draw(st.lists(st.integers(min_value=0, max_value=365), max_size=12))
    records = []
    for offset in days:
        key = draw(st.sampled_from(["applicationDate", "appliedDate", "createdAt", "created_at"]))
        records.append({"title": "Engineer", key: (_utc(2025, 1, 1) + timedelta(days=offset)).isoformat()})
    if draw(st.booleans()):
        records.append({"title": "Undated"})
    return records


class TestIdentifyApplicationGaps:
    """Test cases for identify_application_gaps."""
    
    def test_single_gap(self):
        applications = [
            {"title": "A", "applicationDate": "2025-01-01"},
            {"title": "B", "applicationDate": "2025-01-20"},
            {"title": "C", "applicationDate": "2025-01-03"},
        ]
        
        gaps = identify_application_gaps(applications, gap_days=7)
        
        assert gaps == [GapRecord(
            start_date=_utc(2025, 1, 3),
            end_date=_utc(2025, 1, 20),
            days_missing=17,
            suggestion="No applications logged for 17 days. Did you forget to track some applications?"
        )]
    
    def test_threshold_is_inclusive(self):
        applications = [{"appliedDate": "2025-02-01"}, {"appliedDate": "2025-02-08"}]
        
        assert len(identify_application_gaps(applications, gap_days=7)) == 1
        assert identify_application_gaps(applications, gap_days=8) == []
    
    def test_partial_days_are_floored(self):
        applications = [
            {"appliedDate": "2025-02-01T18:00:00Z"},
            {"appliedDate": "2025-02-08T12:00:00Z"},
        ]
        # 6.75 days
        assert identify_application_gaps(applications, gap_days=7) == []
    
    def test_date_field_precedence(self):
        applications = [
            {"applicationDate": "2025-03-01", "createdAt": "2025-06-01"},
            {"appliedDate": "2025-03-20", "createdAt": "2025-03-02"},
        ]
        
        gaps = identify_application_gaps(applications)
        
        assert len(gaps) == 1
        assert gaps[0].days_missing == 19
    
    @pytest.mark.parametrize("applications", [
        None,
        [],
        [{"appliedDate": "2025-01-01"}],
        [{"appliedDate": "2025-01-01"}, {"title": "no date"}, {"appliedDate": "garbage"}],
    ])
    def test_fewer_than_two_dated_records(self, applications):
        assert identify_application_gaps(applications) == []
    
    def test_wire_shape(self):
        gaps = identify_application_gaps([
            {"createdAt": "2025-01-01T00:00:00Z"},
            {"createdAt": "2025-01-11T00:00:00Z"},
        ])
        payload = gaps[0].model_dump(mode="json", by_alias=True)
        
        assert set(payload) == {"startDate", "endDate", "daysMissing", "suggestion"}
        assert payload["daysMissing"] == 10
        assert payload["startDate"].startswith("2025-01-01T00:00:00")


class TestGapProperties:
    """Property-based tests for gap analysis."""
    
    @given(history=history_strategy(), gap_days=st.integers(min_value=1, max_value=60))
    @settings(max_examples=100)
    def test_gaps_are_ordered_and_disjoint(self, history, gap_days):
        gaps = identify_application_gaps(history, gap_days)
        
        for gap in gaps:
            assert gap.days_missing >= gap_days
            assert gap.start_date < gap.end_date
        for earlier, later in zip(gaps, gaps[1:]):
            assert earlier.end_date <= later.start_date
    
    @given(history=history_strategy(), gap_days=st.integers(min_value=1, max_value=60))
    @settings(max_examples=50)
    def test_idempotent(self, history, gap_days):
        assert identify_application_gaps(history, gap_days) == identify_application_gaps(history, gap_days)
    
    @given(history=history_strategy())
    @settings(max_examples=50)
    def test_input_order_does_not_matter(self, history):
        assert identify_application_gaps(history) == identify_application_gaps(list(reversed(history)))
