"""Tests for score explanations."""

from bari_score.domain.nutrition import NutrientProfile
from bari_score.services.explanations import explain
from tests.conftest import make_profile


def test_sleeve_scenario_has_positive_sugar_and_protein() -> None:
    profile = NutrientProfile(
        fat=5, sodium=100, sugar=3, calories=120, protein=28
    )

    entries = explain(profile, "Sleeve Gastrectomy")
    by_tag = {entry.tag: entry for entry in entries}

    assert by_tag["sugar"].positive
    assert by_tag["protein"].positive
    assert "surgery" not in by_tag


def test_entries_follow_fixed_order() -> None:
    good = NutrientProfile(calories=100, fat=5, sugar=3, sodium=100, protein=30)
    bad = NutrientProfile(calories=500, fat=25, sugar=25, sodium=600, protein=5)

    good_entries = explain(good, None)
    bad_entries = explain(bad, "Gastric Bypass")

    assert [e.tag for e in good_entries] == [
        "sugar",
        "protein",
        "fat",
        "sodium",
        "calories",
    ]
    assert all(e.positive for e in good_entries)
    assert [e.tag for e in bad_entries] == [
        "sugar",
        "protein",
        "fat",
        "sodium",
        "calories",
        "surgery",
    ]
    assert not any(e.positive for e in bad_entries)


def test_sugar_bands_differ_from_scoring_tiers() -> None:
    def sugar_entry(sugar: float):
        return explain(make_profile(sugar=sugar))[0]

    assert sugar_entry(5).positive
    assert sugar_entry(10).positive
    assert not sugar_entry(18).positive
    assert "dumping" in sugar_entry(18).text
    assert "Very high" in sugar_entry(20.5).text


def test_protein_entry_skipped_when_unknown_or_middling() -> None:
    assert "protein" not in [e.tag for e in explain(make_profile())]
    assert "protein" not in [e.tag for e in explain(make_profile(protein=12))]

    low = [e for e in explain(make_profile(protein=4)) if e.tag == "protein"]
    assert len(low) == 1
    assert not low[0].positive


def test_neutral_ranges_produce_no_entry() -> None:
    entries = explain(make_profile(fat=15, sodium=400, calories=300))

    assert [e.tag for e in entries] == ["sugar"]


def test_surgery_note_uses_policy_sugar_limit() -> None:
    def tags(sugar: float, surgery_type: str) -> list[str]:
        return [e.tag for e in explain(make_profile(sugar=sugar), surgery_type)]

    assert "surgery" in tags(12, "Gastric Bypass (Roux-en-Y)")
    assert "surgery" not in tags(12, "Sleeve Gastrectomy")
    assert "surgery" in tags(16, "Sleeve Gastrectomy")
    assert "surgery" in tags(16, "Mini Gastric Bypass")
    assert "surgery" not in tags(30, "Adjustable Gastric Band")
    assert "surgery" not in tags(30, "Not specified")


def test_surgery_note_follows_resolved_variant() -> None:
    def tags(surgery_type: str) -> list[str]:
        return [e.tag for e in explain(make_profile(sugar=12), surgery_type)]

    assert "surgery" in tags("roux-en-y")
    assert "surgery" not in tags("Bypass")
