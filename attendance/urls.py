from django.urls import path, include
from rest_framework.routers import SimpleRouter
from .views import FixtureStudentViewSet, SubjectAttendanceAPI, photo_list

router = SimpleRouter(trailing_slash=False)
router.register('students', FixtureStudentViewSet, basename='fixture-student')

urlpatterns = [
    path('subjects/<str:subject_name>', SubjectAttendanceAPI.as_view(), name='subject-attendance'),
    path('photos', photo_list, name='photo-list'),
    path('', include(router.urls)),
]
