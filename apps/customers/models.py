from django.db import models


class Customer(models.Model):
    # Stored normalized: trimmed and lowercased
    email = models.EmailField(unique=True)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    def __str__(self):
        return self.email
