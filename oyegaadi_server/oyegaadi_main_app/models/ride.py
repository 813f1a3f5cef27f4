"""Ride-related models"""
from django.db import models
from django.db.models import F, Q
from django.contrib.auth.models import User

from ..utils.constants import RideStatus


class Ride(models.Model):
    driver = models.ForeignKey(User, on_delete=models.PROTECT, related_name='rides')
    from_location = models.CharField(max_length=200)
    to_location = models.CharField(max_length=200)
    departure_date = models.DateTimeField(db_index=True)
    estimated_arrival_date = models.DateTimeField(null=True, blank=True)
    ride_type = models.JSONField(default=list)
    price = models.IntegerField()
    total_seats = models.IntegerField()
    available_seats = models.IntegerField()
    vehicle_type = models.CharField(max_length=50)
    vehicle_number = models.CharField(max_length=20)
    description = models.TextField(blank=True, null=True)
    status = models.CharField(max_length=20, choices=RideStatus.CHOICES, default=RideStatus.ACTIVE)
    cancellation_reason = models.TextField(blank=True, null=True)
    completed_at = models.DateTimeField(null=True, blank=True)
    cancelled_at = models.DateTimeField(null=True, blank=True)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        indexes = [
            models.Index(fields=['status', 'departure_date'], name='ride_status_departure_idx'),
            models.Index(fields=['driver', '-created_at'], name='ride_driver_created_idx'),
        ]
        constraints = [
            models.CheckConstraint(condition=Q(total_seats__gte=1), name='ride_total_seats_positive'),
            models.CheckConstraint(condition=Q(price__gte=1), name='ride_price_positive'),
            models.CheckConstraint(
                condition=Q(available_seats__gte=0) & Q(available_seats__lte=F('total_seats')),
                name='ride_available_seats_in_range',
            ),
        ]

    def __str__(self):
        return f"{self.from_location} → {self.to_location} ({self.departure_date:%Y-%m-%d})"
