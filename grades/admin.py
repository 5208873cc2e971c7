import logging

from django.contrib import admin
from .models import Grade

logger = logging.getLogger(__name__)


@admin.register(Grade)
class GradeAdmin(admin.ModelAdmin):
    list_display = ['id', 'name', 'code', 'display_order', 'is_active']
    list_filter = ['is_active']
    search_fields = ['name', 'code']
    ordering = ['display_order', 'name']
    actions = ['deactivate_grades']

    def has_delete_permission(self, request, obj=None):
        # Grades are disabled, never deleted (sections cascade)
        return False

    @admin.action(description='Deactivate selected grades')
    def deactivate_grades(self, request, queryset):
        count = 0
        for grade in queryset.filter(is_active=True):
            grade.deactivate()
            logger.info("Grade %s (%s) deactivated from admin", grade.pk, grade.name)
            count += 1
        self.message_user(request, f"{count} grade(s) deactivated.")
