"""
Service model: the offerings a business sells and performs as works.
"""

from django.db import models
from django.conf import settings


class Service(models.Model):
    """An offering in the owner's service catalog."""

    owner = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name='services',
    )
    name = models.CharField(max_length=200)
    description = models.TextField(blank=True)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        verbose_name = 'service'
        verbose_name_plural = 'services'
        ordering = ['name']

    def __str__(self):
        return self.name
