from django.contrib import admin
from .models import Section


@admin.register(Section)
class SectionAdmin(admin.ModelAdmin):
    list_display = ['id', 'grade', 'name', 'is_active']
    list_filter = ['grade', 'is_active']
    search_fields = ['name']
