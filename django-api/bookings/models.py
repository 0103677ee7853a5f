"""Django ORM models (persistence layer).

These models handle database concerns. Domain logic lives in domain/models.py.
"""

from django.db import models

from catalog.models import Event


class Booking(models.Model):
    """Persistence model for finalized bookings."""

    class Status(models.TextChoices):
        PENDING = "Pending"
        PAID = "Paid"
        CANCELLED = "Cancelled"

    id = models.CharField(primary_key=True, max_length=16, editable=False)
    event = models.ForeignKey(
        Event, on_delete=models.PROTECT, related_name="bookings"
    )
    ticket_type_code = models.SlugField(max_length=50)
    ticket_type_name = models.CharField(max_length=100)
    unit_price = models.DecimalField(max_digits=10, decimal_places=2)
    quantity = models.PositiveSmallIntegerField()
    total_price = models.DecimalField(max_digits=12, decimal_places=2)
    status = models.CharField(
        max_length=16, choices=Status.choices, default=Status.PENDING
    )
    payment_method = models.JSONField(default=dict)
    customer_name = models.CharField(max_length=255, blank=True, default="")
    customer_email = models.EmailField(blank=True, default="")
    created_at = models.DateTimeField()
    paid_at = models.DateTimeField(blank=True, null=True)

    class Meta:
        ordering = ["created_at"]
        indexes = [
            models.Index(fields=["event", "status"], name="bookings_event_status_idx"),
        ]

    def __str__(self) -> str:
        return f"{self.id} - {self.ticket_type_name} x{self.quantity}"
