"""
Customer model.

Customers belong to one business owner. Works reference them for
display and filtering.
"""

from django.db import models
from django.conf import settings


class Customer(models.Model):
    """A client of the business."""

    owner = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name='customers',
    )
    name = models.CharField(max_length=200)
    email = models.EmailField(blank=True)
    phone = models.CharField(max_length=30, blank=True)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        verbose_name = 'customer'
        verbose_name_plural = 'customers'
        ordering = ['name']
        indexes = [
            models.Index(fields=['owner', 'name'], name='customer_owner_name_idx'),
        ]

    def __str__(self):
        return self.name
