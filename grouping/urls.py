from django.urls import path

from .views import ClassGroupsView, GenerateGroupsView, SeparationConstraintCreateView, SeparationConstraintDeleteView

app_name = 'grouping'

urlpatterns = [
    path('api/generate/', GenerateGroupsView.as_view(), name='generate'),
    path('api/classes/<uuid:class_id>/', ClassGroupsView.as_view(), name='class-groups'),
    path('api/constraints/', SeparationConstraintCreateView.as_view(), name='constraint-create'),
    path('api/constraints/<int:constraint_id>/', SeparationConstraintDeleteView.as_view(), name='constraint-delete'),
]
