"""Search and filter layer tests."""
from app.schemas.schemas import FilterCriteria, MatchResult
from app.services.filter_service import apply_filters
from conftest import make_internship


def _ids(items):
    return [i.id for i in items]


def test_query_matches_location_case_insensitively():
    listing = make_internship(location="Bangalore, Karnataka")
    assert apply_filters([listing], "bangalore") == [listing]


def test_query_searches_title_company_category_and_skills(listings):
    assert _ids(apply_filters(listings, "machine")) == ["1"]
    assert _ids(apply_filters(listings, "TECHCORP")) == ["1", "2", "3", "4", "5"]
    assert _ids(apply_filters(listings, "media &")) == ["4"]
    assert _ids(apply_filters(listings, "spark")) == ["5"]
    assert apply_filters(listings, "blockchain") == []


def test_query_is_trimmed(listings):
    assert _ids(apply_filters(listings, "  canva  ")) == ["2"]


def test_no_query_and_no_criteria_is_identity(listings):
    result = apply_filters(listings, "   ", FilterCriteria())

    assert result == listings
    assert result is not listings


def test_unset_remote_keeps_both(listings):
    assert len(apply_filters(listings, "", FilterCriteria(remote=None))) == len(listings)


def test_remote_false_excludes_every_remote_listing(listings):
    result = apply_filters(listings, "", FilterCriteria(remote=False))

    assert _ids(result) == ["1", "4", "5"]
    assert not any(l.remote for l in result)


def test_remote_true_keeps_only_remote(listings):
    assert _ids(apply_filters(listings, "", FilterCriteria(remote=True))) == ["2", "3"]


def test_criteria_use_exact_equality(listings):
    assert _ids(apply_filters(listings, "", FilterCriteria(state="Maharashtra"))) == ["2", "5"]
    assert apply_filters(listings, "", FilterCriteria(state="maharashtra")) == []
    assert _ids(apply_filters(listings, "", FilterCriteria(duration="6 months"))) == ["3", "5"]
    assert _ids(apply_filters(listings, "", FilterCriteria(type="Analytics"))) == ["3", "5"]
    assert _ids(apply_filters(listings, "", FilterCriteria(category="Media & Communications"))) == ["4"]


def test_all_predicates_must_hold(listings):
    criteria = FilterCriteria(type="Analytics", remote=False)
    assert _ids(apply_filters(listings, "data", criteria)) == ["5"]
    assert apply_filters(listings, "excel", criteria) == []


def test_filtering_twice_changes_nothing(listings):
    criteria = FilterCriteria(state="Maharashtra", remote=False)
    once = apply_filters(listings, "intern", criteria)

    assert apply_filters(once, "intern", criteria) == once


def test_relative_order_is_preserved(listings):
    reversed_listings = list(reversed(listings))
    assert _ids(apply_filters(reversed_listings, "", FilterCriteria(type="Analytics"))) == ["5", "3"]


def test_filters_scored_results_with_key(listings):
    ranked = [MatchResult(internship=l, match_score=90 - i, reasoning="x") for i, l in enumerate(listings)]
    result = apply_filters(ranked, "", FilterCriteria(remote=True), key=lambda r: r.internship)

    assert [r.internship.id for r in result] == ["2", "3"]
    assert [r.match_score for r in result] == [89, 88]
