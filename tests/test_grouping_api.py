import json
import uuid

import pytest
from django.contrib.auth import get_user_model
from django.urls import reverse

from classrooms.models import ClassRoom, Student
from grouping.forms import GroupGenerationForm
from grouping.models import GroupMember, SeparationConstraint, StudentGroup
from grouping.services import add_separation_constraint

pytestmark = pytest.mark.django_db


def post_json(client, url, payload):
    return client.post(url, data=json.dumps(payload), content_type="application/json")


def test_generate_requires_a_teacher(client, classroom, roster):
    user = get_user_model().objects.create_user(username="pupil", password="secret")
    client.force_login(user)

    response = post_json(client, reverse("grouping:generate"), {"class_id": str(classroom.id), "size": 2})

    assert response.status_code == 403
    assert not StudentGroup.objects.exists()


def test_generate_rejects_anonymous_users(client, classroom, roster):
    response = post_json(client, reverse("grouping:generate"), {"class_id": str(classroom.id), "size": 2})

    assert response.status_code == 403


def test_generate_creates_groups(teacher_client, classroom, roster):
    response = post_json(teacher_client, reverse("grouping:generate"), {
        "class_id": str(classroom.id),
        "size": 4,
        "prefix": "Table",
        "balance_gender": True,
    })

    assert response.status_code == 201
    body = response.json()
    assert [g["name"] for g in body["groups"]] == ["Table 1", "Table 2"]
    assert sorted(len(g["students"]) for g in body["groups"]) == [4, 4]
    for group in body["groups"]:
        assert {s["gender"] for s in group["students"]} == {"Female", "Male"}
    assert body["unplaced"] == []


@pytest.mark.parametrize("overrides, message", [
    ({"class_id": None}, "Select a class to generate groups."),
    ({"class_id": "not-a-uuid"}, "Select a class to generate groups."),
    ({"size": 1}, "Group size must be 2 or more."),
    ({"size": "three"}, "Group size must be 2 or more."),
])
def test_generate_validates_the_request(teacher_client, classroom, roster, overrides, message):
    payload = {"class_id": str(classroom.id), "size": 3, **overrides}
    payload = {key: value for key, value in payload.items() if value is not None}

    response = post_json(teacher_client, reverse("grouping:generate"), payload)

    assert response.status_code == 400
    assert response.json() == {"error": message}


def test_generate_unknown_class_is_404(teacher_client):
    response = post_json(teacher_client, reverse("grouping:generate"), {"class_id": str(uuid.uuid4()), "size": 2})

    assert response.status_code == 404


def test_generate_empty_class_is_an_error(teacher_client):
    empty = ClassRoom.objects.create(name="Empty")

    response = post_json(teacher_client, reverse("grouping:generate"), {"class_id": str(empty.id), "size": 2})

    assert response.status_code == 400
    assert response.json() == {"error": "No students found in that class."}


def test_class_groups_lists_saved_groups(teacher_client, classroom, roster):
    post_json(teacher_client, reverse("grouping:generate"), {"class_id": str(classroom.id), "size": 4})

    response = teacher_client.get(reverse("grouping:class-groups", args=[classroom.id]))

    assert response.status_code == 200
    body = response.json()
    assert body["class_name"] == classroom.name
    assert len(body["groups"]) == 2


def test_constraint_create_and_delete(teacher_client, roster):
    a, b = roster[0], roster[1]

    response = post_json(teacher_client, reverse("grouping:constraint-create"), {"student_a": str(b.id), "student_b": str(a.id)})

    assert response.status_code == 201
    body = response.json()
    assert body["student_a"] < body["student_b"]

    url = reverse("grouping:constraint-delete", args=[body["id"]])
    assert teacher_client.delete(url).status_code == 200
    assert not SeparationConstraint.objects.exists()
    assert teacher_client.delete(url).status_code == 404


def test_constraint_needs_two_different_students(teacher_client, roster):
    response = post_json(teacher_client, reverse("grouping:constraint-create"), {"student_a": str(roster[0].id), "student_b": str(roster[0].id)})

    assert response.status_code == 400
    assert response.json() == {"error": "Select two different students."}


@pytest.mark.parametrize("value, expected", [
    ("on", True),
    ("1", True),
    ("yes", True),
    (True, True),
    ("0", False),
    ("off", False),
    (False, False),
])
def test_option_flags_accept_form_and_json_values(classroom, value, expected):
    form = GroupGenerationForm({"class_id": str(classroom.id), "size": 2, "balance_gender": value, "respect_separations": value})

    assert form.is_valid(), form.errors
    options = form.get_options()
    assert options.balance_gender is expected
    assert options.respect_separations is expected


def test_blank_option_flags_keep_defaults(classroom):
    form = GroupGenerationForm({"class_id": str(classroom.id), "size": 2, "respect_separations": ""})

    assert form.is_valid(), form.errors
    assert form.get_options().respect_separations is True


def test_form_encoded_request_can_switch_off_separations(teacher_client, classroom):
    ana = Student.objects.create(classroom=classroom, first_name="Ana")
    ben = Student.objects.create(classroom=classroom, first_name="Ben")
    add_separation_constraint(ana, ben)

    response = teacher_client.post(reverse("grouping:generate"), {
        "class_id": str(classroom.id),
        "size": 2,
        "respect_separations": "0",
    })

    assert response.status_code == 201
    assert [len(group["students"]) for group in response.json()["groups"]] == [2]


def test_group_members_are_listed_in_placement_order(teacher_client, classroom, roster):
    group = StudentGroup.objects.create(classroom=classroom, name="Group 1")
    seated = [roster[7], roster[0], roster[4]]
    GroupMember.objects.bulk_create(GroupMember(group=group, student=student) for student in seated)

    body = teacher_client.get(reverse("grouping:class-groups", args=[classroom.id])).json()

    assert [s["id"] for s in body["groups"][0]["students"]] == [str(student.id) for student in seated]
