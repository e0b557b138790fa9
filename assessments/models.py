import uuid

from django.db import models

from classrooms.models import ClassRoom, Student


class Assessment(models.Model):
    """
    A scored piece of work for a class. ``max_score`` may be left empty; see
    ``assessments.metrics.get_assessment_max_score`` for the value used then.
    """
    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    classroom = models.ForeignKey(ClassRoom, on_delete=models.CASCADE, related_name='assessments', verbose_name="Class")
    title = models.CharField(max_length=255)
    assessment_date = models.DateField(null=True, blank=True)
    max_score = models.DecimalField(max_digits=7, decimal_places=2, null=True, blank=True)

    class Meta:
        ordering = ['-assessment_date', 'title']

    def __str__(self):
        return self.title


class AssessmentEntry(models.Model):
    """A student's score on one assessment. An empty score means not graded yet."""
    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    assessment = models.ForeignKey(Assessment, on_delete=models.CASCADE, related_name='entries')
    student = models.ForeignKey(Student, on_delete=models.CASCADE, related_name='assessment_entries')
    score = models.DecimalField(max_digits=7, decimal_places=2, null=True, blank=True)

    class Meta:
        verbose_name_plural = "Assessment entries"
        unique_together = ('assessment', 'student')

    def __str__(self):
        return f"{self.student} - {self.assessment}: {self.score}"


class RunningRecord(models.Model):
    """
    A reading running record: words read, errors and self-corrections, with the
    derived accuracy, reading level and self-correction ratio.
    """
    student = models.ForeignKey(Student, on_delete=models.CASCADE, related_name='running_records')
    record_date = models.DateField()
    text_title = models.CharField(max_length=255, blank=True)
    total_words = models.PositiveIntegerField()
    errors = models.PositiveIntegerField(default=0)
    self_corrections = models.PositiveIntegerField(default=0)
    accuracy_pct = models.FloatField()
    level = models.CharField(max_length=50)
    sc_ratio = models.FloatField(null=True, blank=True)
    notes = models.TextField(blank=True)
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        ordering = ['-record_date', '-created_at']

    def __str__(self):
        return f"Running record for {self.student} on {self.record_date.strftime('%d/%m/%Y')}"
