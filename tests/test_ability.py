from types import SimpleNamespace

import pytest

from grouping.ability import AbilityProfile, build_ability_profiles


def assessment(assessment_id, class_id="class-1", max_score=100):
    return SimpleNamespace(id=assessment_id, classroom_id=class_id, max_score=max_score)


def entry(student_id, assessment_id, score):
    return SimpleNamespace(student_id=student_id, assessment_id=assessment_id, score=score)


def test_percentile_bands_for_evenly_spread_averages(student_factory):
    students = [student_factory(f"s{i}") for i in range(1, 10)]
    entries = [entry(f"s{i}", "a1", i * 10) for i in range(1, 10)]

    profiles = build_ability_profiles("class-1", students, [assessment("a1")], entries)

    # 9 averages: lower cut point index floor(8 * 0.33) = 2 (30%), upper floor(8 * 0.66) = 5 (60%)
    bands = [profiles[f"s{i}"].band for i in range(1, 10)]
    assert bands == ["developing"] * 3 + ["proficient"] * 2 + ["advanced"] * 4
    assert [profiles[f"s{i}"].rank for i in (1, 4, 9)] == [0, 1, 2]


def test_students_without_graded_entries_are_unknown(student_factory):
    students = [student_factory("s1"), student_factory("s2")]
    entries = [entry("s1", "a1", 8), entry("s2", "a1", None)]

    profiles = build_ability_profiles("class-1", students, [assessment("a1", max_score=10)], entries)

    assert profiles["s2"] == AbilityProfile(average_percent=None, band="unknown", rank=1, is_support_partner=False)
    assert profiles["s1"].average_percent == pytest.approx(80)


def test_missing_max_score_defaults_to_ten(student_factory):
    students = [student_factory("s1")]

    profiles = build_ability_profiles("class-1", students, [assessment("a1", max_score=None)], [entry("s1", "a1", 5)])

    assert profiles["s1"].average_percent == pytest.approx(50)


def test_assessments_from_other_classes_are_ignored(student_factory):
    students = [student_factory("s1")]
    assessments = [assessment("a1"), assessment("other", class_id="class-2")]
    entries = [entry("s1", "a1", 40), entry("s1", "other", 100)]

    profiles = build_ability_profiles("class-1", students, assessments, entries)

    assert profiles["s1"].average_percent == pytest.approx(40)


def test_support_partner_needs_high_score_and_no_help_needed(student_factory):
    students = [
        student_factory("low"),
        student_factory("strong"),
        student_factory("strong-needs-help", needs_help=True),
    ]
    entries = [entry("low", "a1", 20), entry("strong", "a1", 80), entry("strong-needs-help", "a1", 90)]

    profiles = build_ability_profiles("class-1", students, [assessment("a1")], entries)

    assert profiles["strong"].is_support_partner
    assert not profiles["strong-needs-help"].is_support_partner
    assert not profiles["low"].is_support_partner


def test_single_graded_student_lands_on_both_cut_points(student_factory):
    students = [student_factory("s1"), student_factory("s2")]

    profiles = build_ability_profiles("class-1", students, [assessment("a1")], [entry("s1", "a1", 55)])

    # With one average both cut points equal it; "at or below the lower" wins
    assert profiles["s1"].band == "developing"
    assert profiles["s2"].band == "unknown"


def test_unparseable_scores_are_skipped(student_factory):
    students = [student_factory("s1")]
    entries = [entry("s1", "a1", "n/a"), entry("s1", "a1", float("inf")), entry("s1", "a1", 70)]

    profiles = build_ability_profiles("class-1", students, [assessment("a1")], entries)

    assert profiles["s1"].average_percent == pytest.approx(70)


def test_repeated_runs_give_identical_profiles(student_factory):
    students = [student_factory(f"s{i}") for i in range(6)]
    entries = [entry(f"s{i}", "a1", (i * 37) % 100) for i in range(6)]
    assessments = [assessment("a1")]

    first = build_ability_profiles("class-1", students, assessments, entries)
    second = build_ability_profiles("class-1", students, assessments, entries)

    assert first == second
