from django.db import models

from classrooms.models import ClassRoom, Student


class AttendanceSession(models.Model):
    """One register taken for a class on a given day."""
    classroom = models.ForeignKey(ClassRoom, on_delete=models.CASCADE, related_name='attendance_sessions', verbose_name="Class")
    session_date = models.DateField()
    title = models.CharField(max_length=255, blank=True)
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        ordering = ['-session_date']

    def __str__(self):
        return f"Attendance for {self.classroom} on {self.session_date.strftime('%d/%m/%Y')}"


class AttendanceEntry(models.Model):
    STATUS_CHOICES = [
        ('Present', 'Present'),
        ('Arrived late', 'Late'),
        ('Left early', 'Left early'),
        ("Didn't come", "Didn't come"),
    ]

    session = models.ForeignKey(AttendanceSession, on_delete=models.CASCADE, related_name='entries')
    student = models.ForeignKey(Student, on_delete=models.CASCADE, related_name='attendance_entries')
    status = models.CharField(max_length=20, choices=STATUS_CHOICES, default='Present')

    class Meta:
        verbose_name_plural = "Attendance entries"
        unique_together = ('session', 'student')

    def __str__(self):
        return f"{self.student}: {self.status}"
