from django.db import models


class Grade(models.Model):
    """A grade level (e.g. Kinder, Grade 1). Disabled rather than deleted."""

    name = models.CharField(max_length=255, unique=True)
    code = models.CharField(max_length=255, blank=True, null=True)
    is_active = models.BooleanField(default=True)
    display_order = models.IntegerField(default=0)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = 'grades'
        ordering = ['display_order', 'name']

    def __str__(self):
        return self.name

    def deactivate(self):
        self.is_active = False
        self.save(update_fields=['is_active', 'updated_at'])
