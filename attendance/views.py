from django.contrib.auth.decorators import user_passes_test
from django.contrib.auth.mixins import LoginRequiredMixin
from django.http import JsonResponse
from django.shortcuts import get_object_or_404
from django.utils.decorators import method_decorator
from django.views.generic import View

from classrooms.models import ClassRoom
from classrooms.permissions import is_teacher
from .metrics import get_attendance_rate, get_attendance_total, summarize_attendance_entries
from .models import AttendanceEntry


@method_decorator(user_passes_test(is_teacher), name='dispatch')
class ClassAttendanceSummaryView(LoginRequiredMixin, View):
    """
    Provides per-student attendance counts and rates for a class.
    """
    def get(self, request, class_id, *args, **kwargs):
        classroom = get_object_or_404(ClassRoom, id=class_id)
        entries = AttendanceEntry.objects.filter(session__classroom=classroom)

        entries_by_student = {}
        for entry in entries:
            entries_by_student.setdefault(entry.student_id, []).append(entry)

        students = []
        for student in classroom.students.all():
            summary = summarize_attendance_entries(entries_by_student.get(student.id, []))
            students.append({
                'student_id': str(student.id),
                'student_name': student.full_name,
                'summary': summary,
                'total': get_attendance_total(summary),
                'rate': get_attendance_rate(summary),
            })

        class_summary = summarize_attendance_entries(entries)
        return JsonResponse({
            'class_name': classroom.name,
            'sessions': classroom.attendance_sessions.count(),
            'summary': class_summary,
            'rate': get_attendance_rate(class_summary),
            'students': students,
        })
