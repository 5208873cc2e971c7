from collections import Counter

from django.views.generic import TemplateView

from attendance.services import AttendanceService
from grades.models import Grade
from sections.models import Section


class LayoutPageView(TemplateView):
    """Base for routed pages; the route table supplies ``layout_template``."""

    def get_attendance_service(self):
        return AttendanceService()


class DashboardView(LayoutPageView):
    template_name = 'pages/dashboard.html'

    def get_context_data(self, **kwargs):
        context = super().get_context_data(**kwargs)
        students = self.get_attendance_service().get_data()
        context['students'] = students
        context['total_students'] = len(students)
        context['gender_counts'] = dict(Counter(s['gender'] for s in students))
        context['grade_counts'] = sorted(Counter(s['gradeLevel'] for s in students).items())
        return context


class AttendanceView(LayoutPageView):
    template_name = 'pages/attendance.html'

    def get_context_data(self, **kwargs):
        context = super().get_context_data(**kwargs)
        service = self.get_attendance_service()
        grade = self.request.GET.get('grade')
        section = self.request.GET.get('section')
        subject = self.request.GET.get('subject')

        if grade and section:
            students = service.get_students_by_grade_and_section(grade, section)
        elif grade:
            students = service.get_students_by_grade(grade)
        elif section:
            students = service.get_students_by_section(section)
        else:
            students = service.get_data()

        context.update({
            'students': students,
            'grade': grade,
            'section': section,
            'subject': subject,
            'subject_records': service.get_attendance_for_subject(subject) if subject else [],
        })
        return context


class ReportView(LayoutPageView):
    template_name = 'pages/report.html'

    def get_context_data(self, **kwargs):
        context = super().get_context_data(**kwargs)
        subject = self.request.GET.get('subject', '')
        records = self.get_attendance_service().get_attendance_for_subject(subject)
        context['subject'] = subject
        context['records'] = records
        context['status_counts'] = dict(Counter(r['status'] for r in records))
        return context


class SectionView(LayoutPageView):
    template_name = 'pages/section.html'

    def get_context_data(self, **kwargs):
        context = super().get_context_data(**kwargs)
        context['sections'] = Section.objects.select_related('grade').filter(is_active=True)
        return context


class SettingsView(LayoutPageView):
    template_name = 'pages/settings.html'

    def get_context_data(self, **kwargs):
        context = super().get_context_data(**kwargs)
        context['grades'] = Grade.objects.filter(is_active=True)
        return context
