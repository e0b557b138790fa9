from django.urls import path

from .views import ClassAssessmentSummaryView, RunningRecordCreateView

app_name = 'assessments'

urlpatterns = [
    path('api/running-records/', RunningRecordCreateView.as_view(), name='running-record-create'),
    path('api/classes/<uuid:class_id>/summary/', ClassAssessmentSummaryView.as_view(), name='class-summary'),
]
