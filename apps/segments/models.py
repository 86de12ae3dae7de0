from django.db import models


class Segment(models.Model):
    name = models.CharField(max_length=100)
    description = models.TextField(null=True, blank=True)
    definition = models.JSONField()  # one of the shapes in apps.segments.definitions
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    def __str__(self):
        return self.name
