# grouping/constraints.py
"""
Separation rules: pairs of students who must never share a group.

Rules come from two places, explicit pairs saved by the teacher and each
student's own ``separation_list``. Both are folded into one set of canonical
pair keys so that membership can be tested in O(1) regardless of the order
the two ids are given in.
"""


def pair_key(first_id, second_id):
    """Canonical key of an unordered pair: the smaller id string first."""
    a, b = str(first_id), str(second_id)
    if b < a:
        a, b = b, a
    return f"{a}|{b}"


def parse_separation_list(raw):
    return [entry.strip() for entry in (raw or "").split(",") if entry.strip()]


def build_constraint_set(students, explicit_pairs=()):
    """
    Builds the set of canonical pair keys for a roster.

    ``explicit_pairs`` is an iterable of ``(student_a_id, student_b_id)``.
    Pairs naming a student outside ``students`` and self-pairs are dropped.
    """
    valid_ids = {str(student.id) for student in students}
    constraint_set = set()

    def add_pair(a, b):
        a, b = str(a), str(b)
        if a not in valid_ids or b not in valid_ids or a == b:
            return
        constraint_set.add(pair_key(a, b))

    for a, b in explicit_pairs:
        add_pair(a, b)

    for student in students:
        for other_id in parse_separation_list(getattr(student, 'separation_list', "")):
            add_pair(student.id, other_id)

    return constraint_set


def violates(candidate_id, member_ids, constraint_set):
    """True if the candidate may not join a group holding ``member_ids``."""
    return any(pair_key(candidate_id, member_id) in constraint_set for member_id in member_ids)
