from django.contrib.auth import views as auth_views
from django.urls import include, path

urlpatterns = [
    path("accounts/login/", auth_views.LoginView.as_view(), name="login"),
    path("accounts/logout/", auth_views.LogoutView.as_view(), name="logout"),
    path("classes/", include("classrooms.urls")),
    path("assessments/", include("assessments.urls")),
    path("attendance/", include("attendance.urls")),
    path("groups/", include("grouping.urls")),
]
