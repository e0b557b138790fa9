# classrooms/models.py
import uuid

from django.db import models


GENDER_OPTIONS = ["Male", "Female", "Non-binary", "Prefer not to say"]


class ClassRoom(models.Model):
    """
    A class taught by the teacher. Students, assessments, attendance and
    generated groups all hang off a class.
    """
    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    name = models.CharField(max_length=255, unique=True, verbose_name="Class Name")
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        ordering = ['name']

    def __str__(self):
        return self.name


class Student(models.Model):
    """
    A student on a class roster. Students are records kept by the teacher,
    not user accounts.
    """
    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    classroom = models.ForeignKey(ClassRoom, on_delete=models.SET_NULL, null=True, blank=True, related_name='students', verbose_name="Class")
    first_name = models.CharField(max_length=100)
    last_name = models.CharField(max_length=100, blank=True)
    gender = models.CharField(max_length=50, blank=True, help_text="Free text, e.g. one of: " + ", ".join(GENDER_OPTIONS))
    needs_help = models.BooleanField(default=False, help_text="Benefits from sitting with a support partner.")
    separation_list = models.TextField(blank=True, help_text="Comma-separated ids of students this student must not be grouped with.")
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        ordering = ['last_name', 'first_name']

    @property
    def full_name(self):
        return f"{self.first_name} {self.last_name}".strip()

    def __str__(self):
        return self.full_name
