from rest_framework import serializers
from .models import Grade


class GradeSerializer(serializers.ModelSerializer):
    section_count = serializers.SerializerMethodField()

    class Meta:
        model = Grade
        fields = ['id', 'name', 'code', 'is_active', 'display_order', 'section_count', 'created_at', 'updated_at']
        read_only_fields = ['created_at', 'updated_at']

    def get_section_count(self, obj):
        return obj.sections.count()
