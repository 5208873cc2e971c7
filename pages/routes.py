"""
Page route table

Two layouts, each with its child pages. Child paths are absolute (the layout
path only groups them) and views are given as dotted paths, imported the
first time their route is hit.
"""

import logging
from dataclasses import dataclass, field

from django.urls import path
from django.utils.functional import cached_property
from django.utils.module_loading import import_string

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Route:
    path: str
    name: str
    view: str


@dataclass(frozen=True)
class Layout:
    path: str
    name: str
    template: str
    children: list = field(default_factory=list)


class LazyView:
    """Callable standing in for a class-based view until its first request."""

    def __init__(self, dotted_path):
        self.dotted_path = dotted_path

    @cached_property
    def view(self):
        logger.debug("Loading view %s", self.dotted_path)
        return import_string(self.dotted_path).as_view()

    @property
    def is_loaded(self):
        return 'view' in self.__dict__

    def __call__(self, request, *args, **kwargs):
        return self.view(request, *args, **kwargs)

    def __repr__(self):
        return f"<LazyView {self.dotted_path}>"


ROUTES = [
    Layout('/', 'app', 'layout/app_layout.html', children=[
        Route('/', 'dashboard', 'pages.views.DashboardView'),
        Route('/pages/attendance', 'attendance', 'pages.views.AttendanceView'),
        Route('/pages/report', 'report', 'pages.views.ReportView'),
        Route('/pages/section', 'section', 'pages.views.SectionView'),
        Route('/pages/settings', 'settings', 'pages.views.SettingsView'),
    ]),
    Layout('/admin', 'admin', 'layout/admin_layout.html', children=[
        Route('/admin', 'admin-dashboard', 'pages.admin_views.AdminDashboardView'),
        Route('/admin-graph', 'admin-graph', 'pages.admin_views.AdminGraphView'),
        Route('/admin-teacher', 'admin-teacher', 'pages.admin_views.AdminTeacherView'),
        Route('/admin-student', 'admin-student', 'pages.admin_views.AdminStudentView'),
        Route('/admin-section', 'admin-section', 'pages.admin_views.AdminSectionView'),
        Route('/admin-settings', 'admin-settings', 'pages.admin_views.AdminSettingsView'),
    ]),
]


def build_urlpatterns(routes):
    """Flatten the layouts into Django url patterns, in table order."""
    patterns = []
    for layout in routes:
        for route in layout.children:
            patterns.append(path(
                route.path.lstrip('/'),
                LazyView(route.view),
                {'layout': layout.name, 'layout_template': layout.template},
                name=route.name,
            ))
    return patterns
