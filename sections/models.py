from django.db import models
from grades.models import Grade


class Section(models.Model):
    grade = models.ForeignKey(Grade, on_delete=models.CASCADE, related_name='sections')
    name = models.CharField(max_length=50)  # e.g., A, B
    description = models.TextField(blank=True, null=True)
    is_active = models.BooleanField(default=True)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = 'sections'
        unique_together = ('grade', 'name')
        ordering = ['grade__display_order', 'name']

    def __str__(self):
        return f"{self.grade.name} - {self.name}"
