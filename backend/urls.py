from django.contrib import admin
from django.urls import path, include
from rest_framework.routers import DefaultRouter

from grades.urls import router as grades_router
from sections.urls import router as sections_router

# One browsable root at /api listing every resource
api_router = DefaultRouter(trailing_slash=False)
api_router.registry.extend(grades_router.registry)
api_router.registry.extend(sections_router.registry)

urlpatterns = [
    # /admin belongs to the page route table
    path('backoffice/', admin.site.urls),
    path('api/attendance/', include('attendance.urls')),
    path('api/', include(api_router.urls)),
    path('', include('pages.urls')),
]
