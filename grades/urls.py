from rest_framework.routers import SimpleRouter
from .views import GradeViewSet

# Mounted under /api by backend.urls, which owns the API root
router = SimpleRouter(trailing_slash=False)
router.register('grades', GradeViewSet)
