from django.urls import path

from .views import ClassActionView, ClassCreateView, ClassManagementView, StudentActionView, StudentCreateView

app_name = 'classrooms'

urlpatterns = [
    path('manage/', ClassManagementView.as_view(), name='manage-classes'),
    path('api/classes/create/', ClassCreateView.as_view(), name='class-create'),
    path('api/classes/<uuid:class_id>/action/', ClassActionView.as_view(), name='class-action'),
    path('api/students/create/', StudentCreateView.as_view(), name='student-create'),
    path('api/students/<uuid:student_id>/action/', StudentActionView.as_view(), name='student-action'),
]
