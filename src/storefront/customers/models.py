"""Customer model.

Customers are master data owned by another subsystem; the order
workflow only asks whether one exists.  Soft-deleted customers are
treated as absent.
"""

from __future__ import annotations

from django.db import models

from storefront.core.models import SoftDeleteModel


class Customer(SoftDeleteModel):
    """Customer aggregate root."""

    name = models.CharField(max_length=255)
    email = models.EmailField(max_length=254, unique=True)

    class Meta:
        db_table = "customers"
        ordering = ["-created_at"]
        indexes = [
            models.Index(fields=["-created_at"], name="customers_created_idx"),
        ]

    def __str__(self) -> str:
        return f"{self.name} <{self.email}>"
