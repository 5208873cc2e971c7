from rest_framework import serializers
from grades.models import Grade
from .models import Section


class SectionSerializer(serializers.ModelSerializer):
    grade = serializers.PrimaryKeyRelatedField(queryset=Grade.objects.all())
    grade_name = serializers.CharField(source='grade.name', read_only=True)

    class Meta:
        model = Section
        fields = ['id', 'grade', 'grade_name', 'name', 'description', 'is_active', 'created_at', 'updated_at']
        read_only_fields = ['created_at', 'updated_at']
