from django.urls import path

from .views import ClassAttendanceSummaryView

app_name = 'attendance'

urlpatterns = [
    path('api/classes/<uuid:class_id>/summary/', ClassAttendanceSummaryView.as_view(), name='class-summary'),
]
