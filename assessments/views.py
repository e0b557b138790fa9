import logging

from django.contrib.auth.decorators import user_passes_test
from django.contrib.auth.mixins import LoginRequiredMixin
from django.http import JsonResponse
from django.shortcuts import get_object_or_404
from django.utils.decorators import method_decorator
from django.views.generic import View

from classrooms.models import ClassRoom
from classrooms.permissions import is_teacher
from .forms import RunningRecordForm
from .metrics import average_from_percents, entry_to_percent, performance_band
from .models import AssessmentEntry

logger = logging.getLogger(__name__)


@method_decorator(user_passes_test(is_teacher), name='dispatch')
class RunningRecordCreateView(LoginRequiredMixin, View):
    """
    API view to save a running record for a student.
    """
    def post(self, request, *args, **kwargs):
        form = RunningRecordForm(request.POST)
        if not form.is_valid():
            # Report the first message, the way the form UI shows a single error line
            first_error = next(iter(form.errors.values()))[0]
            return JsonResponse({'error': first_error, 'errors': form.errors.get_json_data()}, status=400)

        record = form.save()
        logger.info("Saved running record %s for student %s (%s)", record.id, record.student_id, record.level)
        return JsonResponse({
            'id': record.id,
            'student_id': str(record.student_id),
            'accuracy_pct': record.accuracy_pct,
            'level': record.level,
            'sc_ratio': record.sc_ratio,
        }, status=201)


@method_decorator(user_passes_test(is_teacher), name='dispatch')
class ClassAssessmentSummaryView(LoginRequiredMixin, View):
    """
    Provides each student's average assessment percentage for a class.
    """
    def get(self, request, class_id, *args, **kwargs):
        classroom = get_object_or_404(ClassRoom, id=class_id)
        assessment_by_id = {a.id: a for a in classroom.assessments.all()}
        entries = AssessmentEntry.objects.filter(assessment__classroom=classroom, score__isnull=False)

        percents_by_student = {}
        for entry in entries:
            percent = entry_to_percent(entry, assessment_by_id)
            if percent is not None:
                percents_by_student.setdefault(entry.student_id, []).append(percent)

        summary = []
        for student in classroom.students.all():
            percents = percents_by_student.get(student.id, [])
            average = average_from_percents(percents) if percents else None
            summary.append({
                'student_id': str(student.id),
                'student_name': student.full_name,
                'graded_count': len(percents),
                'average_percent': average,
                'band': performance_band(average) if average is not None else None,
            })

        return JsonResponse({'class_name': classroom.name, 'students': summary})
