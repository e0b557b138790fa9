# assessments/metrics.py
import math

# Used when an assessment has no usable maximum score.
DEFAULT_MAX_SCORE = 10

LEVEL_INDEPENDENT = "Independent (95-100%)"
LEVEL_INSTRUCTIONAL = "Instructional (90-94%)"
LEVEL_FRUSTRATION = "Frustration (<90%)"


def to_number(value):
    """Converts a raw score to a finite float, or None when it is not one."""
    if value is None or isinstance(value, bool):
        return None
    try:
        number = float(value)
    except (TypeError, ValueError):
        return None
    return number if math.isfinite(number) else None


def get_assessment_max_score(assessment):
    """
    Returns the maximum score of an assessment, falling back to
    DEFAULT_MAX_SCORE when it is missing, invalid or not positive.
    """
    raw = to_number(getattr(assessment, 'max_score', None))
    if raw is not None and raw > 0:
        return raw
    return DEFAULT_MAX_SCORE


def score_to_percent(score, max_score):
    numeric_score = to_number(score)
    numeric_max = to_number(max_score)
    if numeric_score is None or numeric_max is None or numeric_max <= 0:
        return None
    return numeric_score / numeric_max * 100


def entry_to_percent(entry, assessment_by_id):
    if entry is None:
        return None
    assessment = assessment_by_id.get(entry.assessment_id)
    return score_to_percent(entry.score, get_assessment_max_score(assessment))


def average_from_percents(values):
    valid = [v for v in values if to_number(v) is not None]
    if not valid:
        return 0
    return sum(valid) / len(valid)


def performance_band(percent):
    """Traffic-light band for a percentage: 'good', 'fair' or 'low'."""
    if percent >= 70:
        return 'good'
    if percent >= 50:
        return 'fair'
    return 'low'


def round_one_decimal(value):
    """Rounds half up to one decimal place."""
    return math.floor(value * 10 + 0.5) / 10


def running_record_accuracy(total_words, errors):
    """Unrounded accuracy of a running record, as a percentage of words read correctly."""
    return (total_words - errors) / total_words * 100


def reading_level(accuracy):
    if accuracy >= 95:
        return LEVEL_INDEPENDENT
    if accuracy >= 90:
        return LEVEL_INSTRUCTIONAL
    return LEVEL_FRUSTRATION


def self_correction_ratio(errors, self_corrections):
    """Returns (errors + self-corrections) / self-corrections, or None without self-corrections."""
    if self_corrections <= 0:
        return None
    return round_one_decimal((errors + self_corrections) / self_corrections)
