import logging

from rest_framework import viewsets, filters, status
from rest_framework.permissions import AllowAny
from rest_framework.response import Response
from django_filters.rest_framework import DjangoFilterBackend

from .models import Grade
from .serializers import GradeSerializer

logger = logging.getLogger(__name__)


class GradeViewSet(viewsets.ModelViewSet):
    queryset = Grade.objects.prefetch_related('sections').all()
    serializer_class = GradeSerializer
    permission_classes = [AllowAny]
    filter_backends = [DjangoFilterBackend, filters.SearchFilter]
    filterset_fields = ['is_active']
    search_fields = ['name', 'code']

    def destroy(self, request, *args, **kwargs):
        """Grades are never removed; DELETE only disables the row."""
        grade = self.get_object()
        grade.deactivate()
        logger.info("Grade %s (%s) deactivated", grade.pk, grade.name)
        return Response(status=status.HTTP_204_NO_CONTENT)
