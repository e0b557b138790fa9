# grouping/partitioner.py
"""
Greedy partitioning of a class roster into groups.

The partitioner is a best-effort heuristic rather than an optimiser: it
walks the roster once, choosing for each open seat the candidate that best
fits the balancing options, and never places two separated students together.
Students that cannot be seated anywhere are left out of the result; the
caller decides what to do about them.
"""
import logging
import math
import random
from dataclasses import dataclass
from typing import Mapping

from .ability import BAND_UNKNOWN, UNKNOWN_PROFILE
from .constraints import violates

logger = logging.getLogger(__name__)

MIN_GROUP_SIZE = 2
DEFAULT_MAX_ATTEMPTS = 200


@dataclass(frozen=True)
class GroupingOptions:
    balance_gender: bool = False
    balance_ability: bool = False
    pair_support_partners: bool = False
    respect_separations: bool = True

    @classmethod
    def from_mapping(cls, data: Mapping):
        """Builds options from a dict, reading each flag as a plain boolean."""
        defaults = cls()
        return cls(**{
            name: bool(data.get(name, getattr(defaults, name)))
            for name in ('balance_gender', 'balance_ability', 'pair_support_partners', 'respect_separations')
        })


def normalize_gender(value):
    return (value or "").strip().lower()


def _profile(ability_by_student_id, student):
    return ability_by_student_id.get(str(student.id), UNKNOWN_PROFILE)


def _ability_sort_key(ability_by_student_id):
    def key(student):
        profile = _profile(ability_by_student_id, student)
        average = profile.average_percent if profile.average_percent is not None else -1
        return (profile.rank, average)
    return key


def pick_best_student(candidates, group, constraint_set, options, ability_by_student_id):
    """
    Chooses the next student to seat in ``group`` from ``candidates``, or
    returns None when every candidate is separated from someone in the group.

    Preference order: a gender not yet in the group, then a support partner for
    an unsupported needs-help student (or the reverse), then the ability band
    least represented in the group. Without a preference the first eligible
    candidate in pool order wins.
    """
    member_ids = [str(member.id) for member in group]
    eligible = [s for s in candidates if not violates(str(s.id), member_ids, constraint_set)]
    if not eligible:
        return None

    if options.balance_gender and group:
        group_genders = {normalize_gender(member.gender) for member in group}
        for student in eligible:
            if normalize_gender(student.gender) not in group_genders:
                return student

    if options.pair_support_partners and group:
        has_needs_help = any(member.needs_help for member in group)
        has_support_partner = any(_profile(ability_by_student_id, member).is_support_partner for member in group)

        if has_needs_help and not has_support_partner:
            for student in eligible:
                if not student.needs_help and _profile(ability_by_student_id, student).is_support_partner:
                    return student

        if has_support_partner and not has_needs_help:
            for student in eligible:
                if student.needs_help:
                    return student

    if options.balance_ability and group:
        band_counts = {}
        for member in group:
            band = _profile(ability_by_student_id, member).band or BAND_UNKNOWN
            band_counts[band] = band_counts.get(band, 0) + 1

        ability_key = _ability_sort_key(ability_by_student_id)

        def rank_key(student):
            band = _profile(ability_by_student_id, student).band or BAND_UNKNOWN
            return (band_counts.get(band, 0),) + ability_key(student)

        return min(eligible, key=rank_key)

    return eligible[0]


def _order_pool(students, options, ability_by_student_id, rng):
    pool = list(students)
    if options.balance_ability:
        pool.sort(key=_ability_sort_key(ability_by_student_id))
    elif options.pair_support_partners:
        pool.sort(key=lambda student: 0 if student.needs_help else 1)
    else:
        rng.shuffle(pool)
    return pool


class _Partition:
    """Mutable state of one partitioning run: the unplaced pool and the attempt budget."""

    def __init__(self, pool, size, constraint_set, options, ability_by_student_id, max_attempts):
        self.pool = pool
        self.size = size
        self.constraint_set = constraint_set
        self.options = options
        self.ability_by_student_id = ability_by_student_id
        self.max_attempts = max_attempts
        self.attempts = 0

    @property
    def exhausted(self):
        return self.attempts >= self.max_attempts

    def place_next(self, group):
        """Moves the best candidate for ``group`` out of the pool into it. Returns False if nobody fits."""
        candidate = pick_best_student(self.pool, group, self.constraint_set, self.options, self.ability_by_student_id)
        if candidate is None:
            return False
        group.append(candidate)
        self.pool = [student for student in self.pool if student.id != candidate.id]
        return True

    def fill_group(self):
        group = []
        while len(group) < self.size and self.pool and not self.exhausted:
            if not self.place_next(group):
                break
        return group

    def draft_round_robin(self):
        """
        Seats students one at a time across ceil(n / size) draft groups,
        sweeping the groups in order until a sweep seats nobody.
        """
        target_group_count = max(1, math.ceil(len(self.pool) / self.size))
        drafts = [[] for _ in range(target_group_count)]

        while self.pool and not self.exhausted:
            placed_this_round = 0
            for group in drafts:
                if not self.pool:
                    break
                if len(group) >= self.size:
                    continue
                self.attempts += 1
                if self.place_next(group):
                    placed_this_round += 1
            if placed_this_round == 0:
                break

        return [group for group in drafts if group]


def generate_groups(students, group_size, constraint_set, options, ability_by_student_id,
                    max_attempts=DEFAULT_MAX_ATTEMPTS, rng=None):
    """
    Splits ``students`` into groups of at most ``group_size`` (never below 2).

    With ``balance_gender`` the students are first dealt round-robin into
    ceil(n / size) draft groups; anyone still unplaced afterwards is grouped
    the plain way. Otherwise groups are filled one after another.

    ``rng`` is the random source used to shuffle the roster when neither
    ability nor support-partner ordering applies; pass a seeded
    ``random.Random`` for reproducible output. ``max_attempts`` bounds the
    work done under constraint sets that cannot be satisfied.

    Never raises: the result may leave some students out.
    """
    if not students:
        return []

    try:
        size = max(MIN_GROUP_SIZE, int(group_size))
    except (TypeError, ValueError):
        size = MIN_GROUP_SIZE
    rng = rng if rng is not None else random.Random()
    pool = _order_pool(students, options, ability_by_student_id, rng)
    run = _Partition(pool, size, constraint_set, options, ability_by_student_id, max_attempts)

    if options.balance_gender:
        groups = run.draft_round_robin()
        while run.pool and not run.exhausted:
            run.attempts += 1
            group = run.fill_group()
            if not group:
                break
            groups.append(group)
    else:
        groups = []
        while run.pool and not run.exhausted:
            run.attempts += 1
            group = run.fill_group()
            if group:
                groups.append(group)

    logger.debug(
        "Partitioned %d students into %d groups of up to %d (%d unplaced, %d attempts)",
        len(students), len(groups), size, len(run.pool), run.attempts,
    )
    return groups
