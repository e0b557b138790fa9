import random

from django.core.exceptions import ValidationError
from django.core.management.base import BaseCommand, CommandError

from classrooms.models import ClassRoom
from grouping.partitioner import GroupingOptions
from grouping.services import GroupingError, generate_and_save_groups


class Command(BaseCommand):
    help = "Generates and saves student groups for a class."

    def add_arguments(self, parser):
        parser.add_argument('class_id', help="Id of the class to group.")
        parser.add_argument('--size', type=int, required=True, help="Maximum number of students per group (2 or more).")
        parser.add_argument('--prefix', default='', help="Label for the generated group names.")
        parser.add_argument('--clear-existing', action='store_true', help="Delete the class's previous groups first.")
        parser.add_argument('--balance-gender', action='store_true')
        parser.add_argument('--balance-ability', action='store_true')
        parser.add_argument('--pair-support-partners', action='store_true')
        parser.add_argument('--ignore-separations', action='store_true', help="Do not apply separation rules.")
        parser.add_argument('--seed', type=int, help="Seed for the shuffle, for reproducible groups.")

    def handle(self, *args, **options):
        try:
            classroom = ClassRoom.objects.get(id=options['class_id'])
        except (ClassRoom.DoesNotExist, ValidationError):
            raise CommandError(f"Class {options['class_id']} was not found.")

        grouping_options = GroupingOptions(
            balance_gender=options['balance_gender'],
            balance_ability=options['balance_ability'],
            pair_support_partners=options['pair_support_partners'],
            respect_separations=not options['ignore_separations'],
        )
        rng = random.Random(options['seed']) if options['seed'] is not None else None

        try:
            result = generate_and_save_groups(
                classroom,
                options['size'],
                prefix=options['prefix'],
                clear_existing=options['clear_existing'],
                options=grouping_options,
                rng=rng,
            )
        except GroupingError as e:
            raise CommandError(str(e))

        for group in result.groups:
            names = ", ".join(student.full_name for student in group.placed_students())
            self.stdout.write(f"{group.name}: {names}")

        if result.unplaced:
            names = ", ".join(student.full_name for student in result.unplaced)
            self.stdout.write(self.style.WARNING(f"Could not place: {names}"))
        self.stdout.write(self.style.SUCCESS(f"{len(result.groups)} groups created for {classroom.name}."))
