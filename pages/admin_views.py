from collections import Counter

from django.db.models import Count

from grades.models import Grade
from sections.models import Section
from .views import LayoutPageView


class AdminDashboardView(LayoutPageView):
    template_name = 'admin_pages/dashboard.html'

    def get_context_data(self, **kwargs):
        context = super().get_context_data(**kwargs)
        context.update({
            'grade_count': Grade.objects.filter(is_active=True).count(),
            'section_count': Section.objects.filter(is_active=True).count(),
            'student_count': len(self.get_attendance_service().get_data()),
        })
        return context


class AdminGraphView(LayoutPageView):
    template_name = 'admin_pages/graph.html'

    def get_context_data(self, **kwargs):
        context = super().get_context_data(**kwargs)
        students = self.get_attendance_service().get_data()
        by_grade = Counter(s['gradeLevel'] for s in students)
        labels = sorted(by_grade)
        context['chart'] = {
            'labels': [f"Grade {g}" for g in labels],
            'data': [by_grade[g] for g in labels],
        }
        return context


class AdminTeacherView(LayoutPageView):
    template_name = 'admin_pages/teacher.html'


class AdminStudentView(LayoutPageView):
    template_name = 'admin_pages/student.html'

    def get_context_data(self, **kwargs):
        context = super().get_context_data(**kwargs)
        context['students'] = self.get_attendance_service().get_data()
        return context


class AdminSectionView(LayoutPageView):
    template_name = 'admin_pages/section.html'

    def get_context_data(self, **kwargs):
        context = super().get_context_data(**kwargs)
        context['sections'] = Section.objects.select_related('grade').all()
        context['grades'] = Grade.objects.annotate(num_sections=Count('sections'))
        return context


class AdminSettingsView(LayoutPageView):
    template_name = 'admin_pages/settings.html'

    def get_context_data(self, **kwargs):
        context = super().get_context_data(**kwargs)
        context['grades'] = Grade.objects.all()
        return context
