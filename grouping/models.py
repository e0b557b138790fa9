# grouping/models.py
from django.core.exceptions import ValidationError
from django.db import models

from classrooms.models import ClassRoom, Student


class SeparationConstraint(models.Model):
    """
    Two students who must never be placed in the same group.
    The pair is stored ordered, smaller id first, so each pair exists once.
    """
    student_a = models.ForeignKey(Student, on_delete=models.CASCADE, related_name='+')
    student_b = models.ForeignKey(Student, on_delete=models.CASCADE, related_name='+')
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        unique_together = ('student_a', 'student_b')

    def clean(self):
        if self.student_a_id and self.student_a_id == self.student_b_id:
            raise ValidationError("Select two different students.")

    def save(self, *args, **kwargs):
        if str(self.student_b_id) < str(self.student_a_id):
            self.student_a_id, self.student_b_id = self.student_b_id, self.student_a_id
        super().save(*args, **kwargs)

    def __str__(self):
        return f"{self.student_a} / {self.student_b}"


class StudentGroup(models.Model):
    """
    A generated group of students for a given class.
    """
    classroom = models.ForeignKey(ClassRoom, on_delete=models.CASCADE, related_name='student_groups', verbose_name="Class")
    name = models.CharField(max_length=255, help_text="E.g., Group 1")
    created_at = models.DateTimeField(auto_now_add=True)
    students = models.ManyToManyField(Student, through='GroupMember', related_name='student_groups')

    class Meta:
        ordering = ['created_at', 'id']

    def placed_students(self):
        """Members in the order the partitioner seated them."""
        return [member.student for member in self.members.all()]

    def __str__(self):
        return f"Group '{self.name}' for class {self.classroom.name}"


class GroupMember(models.Model):
    group = models.ForeignKey(StudentGroup, on_delete=models.CASCADE, related_name='members')
    student = models.ForeignKey(Student, on_delete=models.CASCADE, related_name='group_memberships')

    class Meta:
        # Rows are written in placement order
        ordering = ['id']
        unique_together = ('group', 'student')

    def __str__(self):
        return f"{self.student} in {self.group.name}"
