from rest_framework.routers import SimpleRouter
from .views import SectionViewSet

# No trailing slash: SectionService calls /api/sections and /api/sections/<id>
router = SimpleRouter(trailing_slash=False)
router.register('sections', SectionViewSet)
