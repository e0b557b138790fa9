from rest_framework.permissions import BasePermission

from classrooms.permissions import is_teacher


class IsTeacher(BasePermission):
    """Allows access only to members of the teacher group."""
    message = "Only teachers can manage groups."

    def has_permission(self, request, view):
        return is_teacher(request.user)
