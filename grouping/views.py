# grouping/views.py
import logging

from django.db import DatabaseError
from django.shortcuts import get_object_or_404
from rest_framework import status
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response
from rest_framework.views import APIView

from classrooms.models import ClassRoom, Student
from .forms import GroupGenerationForm, SeparationConstraintForm
from .models import SeparationConstraint, StudentGroup
from .permissions import IsTeacher
from .services import GroupingError, add_separation_constraint, generate_and_save_groups

logger = logging.getLogger(__name__)


def first_form_error(form):
    return next(iter(form.errors.values()))[0]


def serialize_group(group):
    return {
        'id': group.id,
        'name': group.name,
        'class_id': str(group.classroom_id),
        'students': [
            {'id': str(student.id), 'name': student.full_name, 'gender': student.gender, 'needs_help': student.needs_help}
            for student in group.placed_students()
        ],
    }


class TeacherAPIView(APIView):
    """
    Base view for the grouping API: authenticated teachers only.
    """
    permission_classes = [IsAuthenticated, IsTeacher]


class GenerateGroupsView(TeacherAPIView):
    """
    Generates and saves groups for a class from the submitted size and options.
    """
    def post(self, request, *args, **kwargs):
        form = GroupGenerationForm(request.data)
        if not form.is_valid():
            return Response({"error": first_form_error(form)}, status=status.HTTP_400_BAD_REQUEST)

        classroom = get_object_or_404(ClassRoom, id=form.cleaned_data['class_id'])
        options = form.get_options()

        try:
            result = generate_and_save_groups(
                classroom,
                form.cleaned_data['size'],
                prefix=form.cleaned_data['prefix'],
                clear_existing=bool(form.cleaned_data['clear_existing']),
                options=options,
            )
        except GroupingError as e:
            return Response({"error": str(e)}, status=status.HTTP_400_BAD_REQUEST)
        except DatabaseError:
            logger.exception("Saving generated groups failed for class %s", classroom.id)
            return Response({"error": "The groups could not be saved. Nothing was changed."}, status=status.HTTP_500_INTERNAL_SERVER_ERROR)

        groups = StudentGroup.objects.filter(id__in=[g.id for g in result.groups]).prefetch_related('members__student')
        return Response({
            "groups": [serialize_group(group) for group in groups],
            "unplaced": [{'id': str(s.id), 'name': s.full_name} for s in result.unplaced],
        }, status=status.HTTP_201_CREATED)


class ClassGroupsView(TeacherAPIView):
    """
    Lists the saved groups of a class.
    """
    def get(self, request, class_id, *args, **kwargs):
        classroom = get_object_or_404(ClassRoom, id=class_id)
        groups = StudentGroup.objects.filter(classroom=classroom).prefetch_related('members__student')
        return Response({
            "class_name": classroom.name,
            "groups": [serialize_group(group) for group in groups],
        })


class SeparationConstraintCreateView(TeacherAPIView):
    def post(self, request, *args, **kwargs):
        form = SeparationConstraintForm(request.data)
        if not form.is_valid():
            return Response({"error": first_form_error(form)}, status=status.HTTP_400_BAD_REQUEST)

        student_a = get_object_or_404(Student, id=form.cleaned_data['student_a'])
        student_b = get_object_or_404(Student, id=form.cleaned_data['student_b'])
        try:
            constraint = add_separation_constraint(student_a, student_b)
        except GroupingError as e:
            return Response({"error": str(e)}, status=status.HTTP_400_BAD_REQUEST)

        return Response({
            "id": constraint.id,
            "student_a": str(constraint.student_a_id),
            "student_b": str(constraint.student_b_id),
        }, status=status.HTTP_201_CREATED)


class SeparationConstraintDeleteView(TeacherAPIView):
    """
    API view to delete a separation rule.
    """
    def delete(self, request, *args, **kwargs):
        constraint_id = kwargs.get('constraint_id')
        try:
            constraint = SeparationConstraint.objects.get(id=constraint_id)
            constraint.delete()
            return Response({'success': True, 'message': 'Separation rule deleted.'})
        except SeparationConstraint.DoesNotExist:
            return Response({'error': 'Separation rule not found.'}, status=status.HTTP_404_NOT_FOUND)
