"""Property-based tests for duplicate application detection."""

from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from typing import Optional

import pytest
from hypothesis import given, strategies as st, settings

from career_inbox.analysis.dedup import are_duplicates, find_duplicate_pairs
from career_inbox.core.models import ParsedApplication


@dataclass
class TrackedJob:
    """Attribute-style record as stored by a persistence layer."""
    title: str
    company: str
    applied_date: Optional[datetime] = None


@st.composite
def application_strategy(draw):
    """Generate loosely shaped application records."""
    title = draw(st.sampled_from([
        "Full Stack Developer", "Full-Stack Developer", "Senior Full Stack Developer",
        "Backend Engineer", "Data Scientist", "", "Product Manager"
    ]))
    company = draw(st.sampled_from([
        "Microsoft", "Microsoft Corp.", "Microsft", "Google", "Alphabet", ""
    ]))
    applied = draw(st.one_of(
        st.none(),
        st.datetimes(
            min_value=datetime(2024, 1, 1),
            max_value=datetime(2026, 1, 1),
            timezones=st.just(timezone.utc)
        ).map(lambda d: d.isoformat())
    ))
    record = {"title": title, "company": company}
    if applied is not None:
        record["appliedDate"] = applied
    return record


class TestAreDuplicates:
    """Test cases for are_duplicates."""
    
    def test_same_job_one_day_apart(self):
        first = {"title": "Full Stack Developer", "company": "Microsoft", "appliedDate": "2025-12-12"}
        second = {"title": "Full Stack Developer", "company": "Microsoft", "appliedDate": "2025-12-13"}
        assert are_duplicates(first, second, 7) is True
    
    def test_same_job_ten_days_apart(self):
        first = {"title": "Full Stack Developer", "company": "Microsoft", "appliedDate": "2025-12-12"}
        second = {"title": "Full Stack Developer", "company": "Microsoft", "appliedDate": "2025-12-22"}
        assert are_duplicates(first, second, 7) is False
    
    def test_window_boundary_is_inclusive(self):
        first = {"title": "Analyst", "company": "Acme", "appliedDate": "2025-03-01"}
        second = {"title": "Analyst", "company": "Acme", "appliedDate": "2025-03-08"}
        assert are_duplicates(first, second, 7) is True
        assert are_duplicates(first, second, 6) is False
    
    def test_company_gate_runs_first(self):
        assert are_duplicates(
            {"title": "Engineer", "company": "Google"},
            {"title": "Engineer", "company": "Netflix"}
        ) is False
    
    def test_company_variants(self):
        assert are_duplicates(
            {"title": "Engineer", "company": "Microsoft Corp."},
            {"title": "Engineer", "company": "microsoft"}
        ) is True
        assert are_duplicates(
            {"title": "Engineer", "company": "Microsoft"},
            {"title": "Engineer", "company": "Microsft"}
        ) is True
    
    def test_title_gate(self):
        assert are_duplicates(
            {"title": "Full-Stack Developer", "company": "Acme"},
            {"title": "full stack developer", "company": "Acme"}
        ) is True
        assert are_duplicates(
            {"title": "Data Scientist", "company": "Acme"},
            {"title": "Office Manager", "company": "Acme"}
        ) is False
    
    def test_missing_date_skips_window(self):
        assert are_duplicates(
            {"title": "Engineer", "company": "Acme", "appliedDate": "2020-01-01"},
            {"title": "Engineer", "company": "Acme"}
        ) is True
    
    def test_snake_case_and_objects(self):
        parsed = ParsedApplication(
            platform="Indeed",
            title="Full Stack Developer",
            company="Microsoft",
            applied_date=datetime(2025, 12, 12, 14, 15, tzinfo=timezone.utc)
        )
        tracked = TrackedJob(
            title="Full Stack Developer",
            company="Microsoft",
            applied_date=datetime(2025, 12, 30, tzinfo=timezone.utc)
        )
        
        assert are_duplicates(parsed, tracked, 7) is False
        assert are_duplicates(parsed, tracked, 30) is True
        assert are_duplicates({"title": "Full Stack Developer", "company": "Microsoft",
                               "applied_date": "2025-12-13"}, parsed) is True


class TestDuplicateProperties:
    """Property-based tests for duplicate detection."""
    
    @given(
        first=application_strategy(),
        second=application_strategy(),
        window=st.integers(min_value=0, max_value=30)
    )
    @settings(max_examples=200)
    def test_symmetric(self, first, second, window):
        assert are_duplicates(first, second, window) == are_duplicates(second, first, window)
    
    @given(record=application_strategy(), window=st.integers(min_value=0, max_value=30))
    @settings(max_examples=50)
    def test_reflexive(self, record, window):
        assert are_duplicates(record, record, window) is True
    
    @given(records=st.lists(application_strategy(), max_size=6))
    @settings(max_examples=50)
    def test_pairs_match_predicate(self, records):
        pairs = find_duplicate_pairs(records)
        
        for i, j in pairs:
            assert i < j
            assert are_duplicates(records[i], records[j])
        expected = sum(
            1 for i in range(len(records)) for j in range(i + 1, len(records))
            if are_duplicates(records[i], records[j])
        )
        assert len(pairs) == expected


class TestFindDuplicatePairs:
    """Test cases for the pairwise scan."""
    
    def test_cross_platform_duplicate(self):
        start = datetime(2025, 12, 10, tzinfo=timezone.utc)
        records = [
            {"title": "Senior Software Engineer", "company": "Google", "appliedDate": start},
            {"title": "Full Stack Developer", "company": "Microsoft", "appliedDate": start + timedelta(days=2)},
            {"title": "Frontend Engineer", "company": "Meta", "appliedDate": start + timedelta(days=4)},
            {"title": "Full Stack Developer", "company": "Microsoft", "appliedDate": start + timedelta(days=3)},
        ]
        
        assert find_duplicate_pairs(records) == [(1, 3)]
    
    @pytest.mark.parametrize("records", [[], [{"title": "A", "company": "B"}]])
    def test_too_few_records(self, records):
        assert find_duplicate_pairs(records) == []
