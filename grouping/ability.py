# grouping/ability.py
import math
from dataclasses import dataclass
from typing import Dict, Iterable, Optional

from assessments.metrics import average_from_percents, get_assessment_max_score, score_to_percent

BAND_UNKNOWN = "unknown"
BAND_DEVELOPING = "developing"
BAND_PROFICIENT = "proficient"
BAND_ADVANCED = "advanced"

LOWER_PERCENTILE = 0.33
UPPER_PERCENTILE = 0.66

SUPPORT_PARTNER_MIN_PERCENT = 75


@dataclass(frozen=True)
class AbilityProfile:
    average_percent: Optional[float]
    band: str
    rank: int
    is_support_partner: bool


UNKNOWN_PROFILE = AbilityProfile(average_percent=None, band=BAND_UNKNOWN, rank=1, is_support_partner=False)


def _percentile_value(sorted_values, fraction):
    if not sorted_values:
        return None
    index = max(0, math.floor((len(sorted_values) - 1) * fraction))
    return sorted_values[index]


def build_ability_profiles(class_id, class_students, assessments: Iterable, entries: Iterable) -> Dict[str, AbilityProfile]:
    """
    Works out an ability band for every student of a class from their
    assessment history.

    Each graded entry becomes a percentage of its assessment's maximum score.
    A student's average is then placed against the class's 33rd and 66th
    percentile averages: at or below the lower cut point is ``developing``, at
    or above the upper one ``advanced``, anything between ``proficient``.
    Students with no graded work are ``unknown``.

    Returns a dict keyed by ``str(student.id)``.
    """
    class_key = str(class_id)
    assessment_by_id = {
        str(assessment.id): assessment
        for assessment in assessments
        if str(assessment.classroom_id) == class_key
    }

    samples_by_student = {}
    for entry in entries:
        assessment = assessment_by_id.get(str(entry.assessment_id))
        if assessment is None:
            continue
        percent = score_to_percent(entry.score, get_assessment_max_score(assessment))
        if percent is None:
            continue
        samples_by_student.setdefault(str(entry.student_id), []).append(percent)

    averages = {
        student_id: average_from_percents(samples)
        for student_id, samples in samples_by_student.items()
    }
    sorted_averages = sorted(
        averages[str(student.id)] for student in class_students if str(student.id) in averages
    )
    lower_threshold = _percentile_value(sorted_averages, LOWER_PERCENTILE)
    upper_threshold = _percentile_value(sorted_averages, UPPER_PERCENTILE)

    profiles = {}
    for student in class_students:
        student_id = str(student.id)
        average = averages.get(student_id)

        if average is None:
            band, rank = BAND_UNKNOWN, 1
        elif lower_threshold is None or upper_threshold is None:
            band, rank = BAND_PROFICIENT, 1
        elif average <= lower_threshold:
            band, rank = BAND_DEVELOPING, 0
        elif average >= upper_threshold:
            band, rank = BAND_ADVANCED, 2
        else:
            band, rank = BAND_PROFICIENT, 1

        profiles[student_id] = AbilityProfile(
            average_percent=average,
            band=band,
            rank=rank,
            is_support_partner=(
                not student.needs_help
                and average is not None
                and (band == BAND_ADVANCED or average >= SUPPORT_PARTNER_MIN_PERCENT)
            ),
        )

    return profiles
