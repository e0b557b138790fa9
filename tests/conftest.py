from types import SimpleNamespace

import pytest
from django.contrib.auth import get_user_model
from django.contrib.auth.models import Group

from classrooms.models import ClassRoom, Student


def make_student(student_id, gender="", needs_help=False, separation_list=""):
    """Plain stand-in for a roster row, for tests of the pure grouping engine."""
    return SimpleNamespace(id=student_id, gender=gender, needs_help=needs_help, separation_list=separation_list)


@pytest.fixture
def student_factory():
    return make_student


@pytest.fixture
def teacher(db, settings):
    user = get_user_model().objects.create_user(username="teacher", password="secret")
    teachers, _ = Group.objects.get_or_create(name=settings.TEACHER_GROUP_NAME)
    user.groups.add(teachers)
    return user


@pytest.fixture
def teacher_client(client, teacher):
    client.force_login(teacher)
    return client


@pytest.fixture
def classroom(db):
    return ClassRoom.objects.create(name="Year 4 Maple")


@pytest.fixture
def roster(classroom):
    """Eight students, four boys and four girls."""
    students = []
    for index in range(4):
        students.append(Student.objects.create(classroom=classroom, first_name=f"Boy{index}", last_name="A", gender="Male"))
        students.append(Student.objects.create(classroom=classroom, first_name=f"Girl{index}", last_name="B", gender="Female"))
    return students
