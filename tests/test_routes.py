import pytest
from django.test import RequestFactory
from django.urls import Resolver404, resolve, reverse
from pytest_django.asserts import assertContains, assertNotContains, assertTemplateUsed

from pages.routes import ROUTES, LazyView, Layout, Route, build_urlpatterns
from sections.models import Section


def test_admin_student_resolves_under_admin_layout():
    match = resolve('/admin-student')

    assert match.url_name == 'admin-student'
    assert isinstance(match.func, LazyView)
    assert match.func.dotted_path == 'pages.admin_views.AdminStudentView'
    assert match.kwargs == {'layout': 'admin', 'layout_template': 'layout/admin_layout.html'}


def test_section_page_resolves_under_app_layout():
    match = resolve('/pages/section')

    assert match.url_name == 'section'
    assert match.func.dotted_path == 'pages.views.SectionView'
    assert match.kwargs['layout'] == 'app'
    assert match.kwargs['layout_template'] == 'layout/app_layout.html'


def test_every_route_resolves_to_its_own_entry():
    for layout in ROUTES:
        for route in layout.children:
            match = resolve(route.path)
            assert match.url_name == route.name
            assert match.func.dotted_path == route.view
            assert match.kwargs['layout'] == layout.name
            assert reverse(route.name) == route.path


def test_route_table_surface():
    paths = [route.path for layout in ROUTES for route in layout.children]

    assert [layout.path for layout in ROUTES] == ['/', '/admin']
    assert paths == [
        '/', '/pages/attendance', '/pages/report', '/pages/section', '/pages/settings',
        '/admin', '/admin-graph', '/admin-teacher', '/admin-student', '/admin-section', '/admin-settings',
    ]


@pytest.mark.parametrize('path', ['/pages/unknown', '/admin-unknown', '/pages'])
def test_unknown_paths_do_not_resolve(path):
    with pytest.raises(Resolver404):
        resolve(path)


def test_django_admin_moved_off_admin_path():
    assert resolve('/backoffice/').app_name == 'admin'
    assert resolve('/admin').url_name == 'admin-dashboard'


def test_first_match_wins():
    patterns = build_urlpatterns([
        Layout('/', 'app', 'layout/app_layout.html', children=[
            Route('/pages/report', 'first', 'pages.views.ReportView'),
        ]),
        Layout('/admin', 'admin', 'layout/admin_layout.html', children=[
            Route('/pages/report', 'second', 'pages.admin_views.AdminGraphView'),
        ]),
    ])

    matched = next(p for p in patterns if p.resolve('pages/report'))
    assert matched.name == 'first'


def test_lazy_view_imports_on_first_call():
    view = LazyView('pages.views.ReportView')
    assert not view.is_loaded

    request = RequestFactory().get('/pages/report')
    response = view(request, layout='app', layout_template='layout/app_layout.html')

    assert view.is_loaded
    assert response.status_code == 200


def test_lazy_view_with_bad_path_fails_only_when_called():
    view = LazyView('pages.views.DoesNotExist')

    with pytest.raises(ImportError):
        view(RequestFactory().get('/'))


@pytest.mark.django_db
class TestRenderedPages:

    @pytest.mark.parametrize('path', ['/', '/pages/attendance', '/pages/report', '/pages/section', '/pages/settings'])
    def test_app_pages_use_app_layout(self, client, path):
        response = client.get(path)

        assert response.status_code == 200
        assertTemplateUsed(response, 'layout/app_layout.html')

    @pytest.mark.parametrize('path', [
        '/admin', '/admin-graph', '/admin-teacher', '/admin-student', '/admin-section', '/admin-settings',
    ])
    def test_admin_pages_use_admin_layout(self, client, path):
        response = client.get(path)

        assert response.status_code == 200
        assertTemplateUsed(response, 'layout/admin_layout.html')

    def test_admin_student_lists_fixture_students(self, client):
        response = client.get('/admin-student')

        assertTemplateUsed(response, 'admin_pages/student.html')
        assertContains(response, 'Gabriela Silang Rivera')

    def test_attendance_page_filters_by_grade(self, client):
        response = client.get('/pages/attendance', {'grade': 3})

        assertContains(response, 'Diego Silang Mendoza')
        assertNotContains(response, 'Jose Andres Reyes')

    def test_attendance_page_shows_subject_records(self, client):
        response = client.get('/pages/attendance', {'subject': 'Math', 'section': 'E'})

        assertContains(response, 'Traffic')
        assert [s['id'] for s in response.context['students']] == [1005, 1010]

    def test_section_page_lists_active_sections(self, client, grade):
        Section.objects.create(grade=grade, name='Sampaguita')
        Section.objects.create(grade=grade, name='Ilang-Ilang', is_active=False)

        response = client.get('/pages/section')

        assertTemplateUsed(response, 'pages/section.html')
        assertContains(response, 'Sampaguita')
        assertNotContains(response, 'Ilang-Ilang')

    def test_admin_graph_counts_students_per_grade(self, client):
        response = client.get('/admin-graph')

        assert response.context['chart'] == {
            'labels': ['Grade 2', 'Grade 3', 'Grade 4', 'Grade 5', 'Grade 6'],
            'data': [2, 2, 2, 2, 2],
        }
