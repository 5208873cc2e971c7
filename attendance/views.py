from collections.abc import Mapping

from django.http import QueryDict
from rest_framework import viewsets, status
from rest_framework.decorators import action, api_view, permission_classes
from rest_framework.permissions import AllowAny
from rest_framework.response import Response
from rest_framework.views import APIView

from .photos import PhotoService
from .services import AttendanceService


def get_photo_service():
    return PhotoService()


def get_attendance_service():
    return AttendanceService(photo_service=get_photo_service())


def request_payload(request):
    """Request body as a plain dict, or None when the body is not an object."""
    data = request.data
    if isinstance(data, QueryDict):
        return data.dict()
    if isinstance(data, Mapping):
        return dict(data)
    return None


class FixtureStudentViewSet(viewsets.ViewSet):
    """Read-through to the fixture students. Writes are echoed, never stored."""
    permission_classes = [AllowAny]

    def list(self, request):
        service = get_attendance_service()
        grade = request.query_params.get('grade')
        section = request.query_params.get('section')

        if grade and section:
            students = service.get_students_by_grade_and_section(grade, section)
        elif grade:
            students = service.get_students_by_grade(grade)
        elif section:
            students = service.get_students_by_section(section)
        else:
            students = service.get_data()
        return Response(students)

    def retrieve(self, request, pk=None):
        student = get_attendance_service().get_student_by_id(pk)
        if student is None:
            return Response({'error': 'Student not found'}, status=status.HTTP_404_NOT_FOUND)
        return Response(student)

    def create(self, request):
        payload = request_payload(request)
        if payload is None:
            return Response({'error': 'Student must be an object'}, status=status.HTTP_400_BAD_REQUEST)
        student = get_attendance_service().add_student(payload)
        return Response(student, status=status.HTTP_201_CREATED)

    @action(detail=True, methods=['post'])
    def attendance(self, request, pk=None):
        """Record attendance for a student (echoed back, not persisted)"""
        payload = request_payload(request)
        if payload is None:
            return Response({'error': 'Attendance record must be an object'}, status=status.HTTP_400_BAD_REQUEST)
        record = get_attendance_service().record_attendance(pk, payload)
        return Response(record, status=status.HTTP_201_CREATED)


class SubjectAttendanceAPI(APIView):
    permission_classes = [AllowAny]

    def get(self, request, subject_name):
        records = get_attendance_service().get_attendance_for_subject(subject_name)
        return Response(records)


@api_view(['GET'])
@permission_classes([AllowAny])
def photo_list(request):
    return Response(get_photo_service().get_data())
