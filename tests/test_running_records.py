import datetime

import pytest
from django.urls import reverse

from assessments.forms import RunningRecordForm
from assessments.metrics import LEVEL_INDEPENDENT, LEVEL_INSTRUCTIONAL
from assessments.models import RunningRecord

pytestmark = pytest.mark.django_db


@pytest.fixture
def reader(roster):
    return roster[1]


def form_data(record_student, **overrides):
    data = {
        "student": str(record_student.id),
        "record_date": "2024-03-05",
        "text_title": " The Little Red Hen ",
        "total_words": 150,
        "errors": 8,
        "self_corrections": 2,
        "notes": "",
    }
    data.update(overrides)
    return data


def test_save_derives_accuracy_level_and_ratio(reader):
    form = RunningRecordForm(data=form_data(reader))

    assert form.is_valid(), form.errors
    record = form.save()

    assert record.accuracy_pct == 94.7
    assert record.level == LEVEL_INSTRUCTIONAL
    assert record.sc_ratio == 5.0
    assert record.text_title == "The Little Red Hen"
    assert record.record_date == datetime.date(2024, 3, 5)


def test_missing_errors_and_self_corrections_default_to_zero(reader):
    form = RunningRecordForm(data=form_data(reader, errors="", self_corrections=""))

    assert form.is_valid(), form.errors
    record = form.save()

    assert record.accuracy_pct == 100.0
    assert record.level == LEVEL_INDEPENDENT
    assert record.sc_ratio is None


@pytest.mark.parametrize("overrides, field, message", [
    ({"total_words": 0}, "total_words", "Total words must be greater than 0."),
    ({"total_words": ""}, "total_words", "Total words must be greater than 0."),
    ({"student": ""}, "student", "Select a student for the running record."),
    ({"record_date": ""}, "record_date", "Enter a date for the running record (YYYY-MM-DD)."),
    ({"record_date": "5th March"}, "record_date", "Date format should be YYYY-MM-DD."),
])
def test_form_validation_messages(reader, overrides, field, message):
    form = RunningRecordForm(data=form_data(reader, **overrides))

    assert not form.is_valid()
    assert message in form.errors[field]


def test_negative_counts_are_rejected(reader):
    form = RunningRecordForm(data=form_data(reader, errors=-1))

    assert not form.is_valid()
    assert "Errors and self-corrections must be 0 or more." in form.non_field_errors()


def test_running_record_endpoint(teacher_client, reader):
    response = teacher_client.post(reverse("assessments:running-record-create"), form_data(reader, errors=5, total_words=100))

    assert response.status_code == 201
    assert response.json()["level"] == LEVEL_INDEPENDENT
    assert RunningRecord.objects.filter(student=reader).count() == 1


def test_running_record_endpoint_reports_first_error(teacher_client, reader):
    response = teacher_client.post(reverse("assessments:running-record-create"), form_data(reader, total_words=0))

    assert response.status_code == 400
    assert response.json()["error"] == "Total words must be greater than 0."
    assert not RunningRecord.objects.exists()
