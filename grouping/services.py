# grouping/services.py
import logging
from dataclasses import dataclass, field
from typing import List

from django.conf import settings
from django.db import transaction

from assessments.models import Assessment, AssessmentEntry
from classrooms.models import Student
from .ability import build_ability_profiles
from .constraints import build_constraint_set
from .models import GroupMember, SeparationConstraint, StudentGroup
from .partitioner import MIN_GROUP_SIZE, GroupingOptions, generate_groups

logger = logging.getLogger(__name__)


class GroupingError(Exception):
    """A grouping request that cannot be carried out, with a message fit for the teacher."""


@dataclass
class GenerationResult:
    groups: List[StudentGroup]
    unplaced: List[Student] = field(default_factory=list)


def build_class_constraint_set(students):
    """Constraint set for a roster, from saved separation rules and each student's separation list."""
    student_ids = [student.id for student in students]
    explicit_pairs = SeparationConstraint.objects.filter(
        student_a_id__in=student_ids, student_b_id__in=student_ids,
    ).values_list('student_a_id', 'student_b_id')
    return build_constraint_set(students, explicit_pairs)


def build_class_ability_profiles(classroom, students):
    assessments = Assessment.objects.filter(classroom=classroom)
    entries = AssessmentEntry.objects.filter(assessment__classroom=classroom, score__isnull=False)
    return build_ability_profiles(classroom.id, students, assessments, entries)


def generate_and_save_groups(classroom, size, prefix=None, clear_existing=False, options=None, rng=None):
    """
    Generates groups for a class and saves them, replacing the class's previous
    groups when ``clear_existing`` is set.

    The groups are saved all together or not at all. Raises GroupingError when
    the request is invalid or no group could be formed.
    """
    options = options or GroupingOptions()
    prefix = (prefix or "").strip() or settings.GROUPING_DEFAULT_PREFIX

    if size is None or size < MIN_GROUP_SIZE:
        raise GroupingError("Group size must be 2 or more.")

    students = list(Student.objects.filter(classroom=classroom).order_by('last_name', 'first_name', 'id'))
    if not students:
        raise GroupingError("No students found in that class.")

    constraint_set = build_class_constraint_set(students) if options.respect_separations else set()
    ability_by_student_id = build_class_ability_profiles(classroom, students)

    group_list = generate_groups(
        students,
        size,
        constraint_set,
        options,
        ability_by_student_id,
        max_attempts=settings.GROUPING_MAX_ATTEMPTS,
        rng=rng,
    )
    if not group_list:
        raise GroupingError("Could not satisfy the grouping rules. Try adjusting constraints or size.")

    with transaction.atomic():
        if clear_existing:
            deleted, _ = StudentGroup.objects.filter(classroom=classroom).delete()
            logger.info("Cleared %d existing group records for class %s", deleted, classroom.id)

        created_groups = []
        member_rows = []
        for index, members in enumerate(group_list, start=1):
            group = StudentGroup.objects.create(classroom=classroom, name=f"{prefix} {index}")
            created_groups.append(group)
            member_rows.extend(GroupMember(group=group, student=student) for student in members)
        GroupMember.objects.bulk_create(member_rows)

    placed_ids = {member.student_id for member in member_rows}
    unplaced = [student for student in students if student.id not in placed_ids]
    if unplaced:
        logger.warning(
            "%d of %d students in class %s could not be placed in a group",
            len(unplaced), len(students), classroom.id,
        )
    logger.info("Created %d groups for class %s (%s)", len(created_groups), classroom.id, options)
    return GenerationResult(groups=created_groups, unplaced=unplaced)


def add_separation_constraint(student_a, student_b):
    """Saves a separation rule between two students. Adding an existing rule again is a no-op."""
    if student_a is None or student_b is None or student_a.id == student_b.id:
        raise GroupingError("Select two different students.")

    first, second = (student_a, student_b) if str(student_a.id) < str(student_b.id) else (student_b, student_a)
    constraint, created = SeparationConstraint.objects.get_or_create(student_a=first, student_b=second)
    if created:
        logger.info("Added separation rule %s between %s and %s", constraint.id, first.id, second.id)
    return constraint
