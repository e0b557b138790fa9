import logging

from django.contrib.auth.decorators import user_passes_test
from django.contrib.auth.mixins import LoginRequiredMixin
from django.core.exceptions import ValidationError
from django.http import JsonResponse
from django.shortcuts import get_object_or_404
from django.utils.decorators import method_decorator
from django.views.generic import View

from .models import ClassRoom, Student
from .permissions import is_teacher

logger = logging.getLogger(__name__)


def serialize_student(student):
    return {
        'id': str(student.id),
        'first_name': student.first_name,
        'last_name': student.last_name,
        'gender': student.gender,
        'needs_help': student.needs_help,
        'separation_list': student.separation_list,
        'class_id': str(student.classroom_id) if student.classroom_id else '',
    }


def parse_bool(value):
    return str(value).strip().lower() in ('1', 'true', 'on', 'yes')


def get_classroom_or_none(class_id):
    """Looks up a class by id, treating malformed ids as missing."""
    if not class_id:
        return None
    try:
        return ClassRoom.objects.get(id=class_id)
    except (ClassRoom.DoesNotExist, ValidationError, ValueError):
        return None


@method_decorator(user_passes_test(is_teacher), name='dispatch')
class ClassManagementView(LoginRequiredMixin, View):
    """
    Lists every class with its roster, plus the students not assigned to any class.
    """
    def get(self, request, *args, **kwargs):
        classes = ClassRoom.objects.prefetch_related('students')
        unassigned_students = Student.objects.filter(classroom__isnull=True)

        return JsonResponse({
            'classes': [
                {
                    'id': str(classroom.id),
                    'name': classroom.name,
                    'students': [serialize_student(s) for s in classroom.students.all()],
                }
                for classroom in classes
            ],
            'unassigned_students': [serialize_student(s) for s in unassigned_students],
        })


@method_decorator(user_passes_test(is_teacher), name='dispatch')
class ClassCreateView(LoginRequiredMixin, View):
    def post(self, request, *args, **kwargs):
        class_name = (request.POST.get('class_name') or '').strip()
        if not class_name:
            return JsonResponse({'error': 'Class name is required.'}, status=400)
        if ClassRoom.objects.filter(name=class_name).exists():
            return JsonResponse({'error': 'A class with this name already exists.'}, status=400)

        new_class = ClassRoom.objects.create(name=class_name)
        logger.info("Created class %s (%s)", new_class.name, new_class.id)
        return JsonResponse({'id': str(new_class.id), 'name': new_class.name})


@method_decorator(user_passes_test(is_teacher), name='dispatch')
class ClassActionView(LoginRequiredMixin, View):
    def post(self, request, class_id, *args, **kwargs):
        action = request.POST.get('action')
        classroom = get_object_or_404(ClassRoom, id=class_id)

        if action == 'rename':
            new_name = (request.POST.get('new_name') or '').strip()
            if not new_name:
                return JsonResponse({'error': 'New name is required.'}, status=400)
            if ClassRoom.objects.filter(name=new_name).exclude(id=classroom.id).exists():
                return JsonResponse({'error': 'A class with this name already exists.'}, status=400)
            classroom.name = new_name
            classroom.save()
            return JsonResponse({'id': str(classroom.id), 'name': classroom.name})

        elif action == 'delete':
            if classroom.students.exists():
                return JsonResponse({'error': 'Cannot delete a non-empty class.'}, status=400)
            classroom.delete()
            return JsonResponse({'success': True, 'id': str(class_id)})

        return JsonResponse({'error': 'Invalid action.'}, status=400)


@method_decorator(user_passes_test(is_teacher), name='dispatch')
class StudentCreateView(LoginRequiredMixin, View):
    def post(self, request, *args, **kwargs):
        first_name = (request.POST.get('first_name') or '').strip()
        if not first_name:
            return JsonResponse({'error': 'First name is required.'}, status=400)

        student = Student.objects.create(
            first_name=first_name,
            last_name=(request.POST.get('last_name') or '').strip(),
            gender=(request.POST.get('gender') or '').strip(),
            needs_help=parse_bool(request.POST.get('needs_help', '')),
            separation_list=(request.POST.get('separation_list') or '').strip(),
            # The student is created but not assigned when the class is unknown
            classroom=get_classroom_or_none(request.POST.get('class_id')),
        )
        return JsonResponse(serialize_student(student))


@method_decorator(user_passes_test(is_teacher), name='dispatch')
class StudentActionView(LoginRequiredMixin, View):
    EDITABLE_FIELDS = ('first_name', 'last_name', 'gender', 'separation_list')

    def post(self, request, student_id, *args, **kwargs):
        action = request.POST.get('action')
        student = get_object_or_404(Student, id=student_id)

        if action == 'move':
            target_class_id = request.POST.get('target_class_id')
            if target_class_id:
                target_class = get_classroom_or_none(target_class_id)
                if target_class is None:
                    return JsonResponse({'error': 'Target class not found.'}, status=404)
                student.classroom = target_class
            else:
                student.classroom = None
            student.save(update_fields=['classroom'])
            return JsonResponse({'success': True, 'student_id': str(student.id), 'target_class_id': target_class_id or ''})

        elif action == 'update':
            for field in self.EDITABLE_FIELDS:
                if field in request.POST:
                    setattr(student, field, request.POST[field].strip())
            if 'needs_help' in request.POST:
                student.needs_help = parse_bool(request.POST['needs_help'])
            if not student.first_name:
                return JsonResponse({'error': 'First name is required.'}, status=400)
            student.save()
            return JsonResponse(serialize_student(student))

        elif action == 'delete':
            # Deletes the student's assessment, attendance and group records too
            student.delete()
            return JsonResponse({'success': True, 'student_id': str(student_id)})

        return JsonResponse({'error': 'Invalid action.'}, status=400)
