"""Booking-related models"""
from django.db import models
from django.db.models import Q
from django.contrib.auth.models import User

from ..utils.constants import BookingStatus


class Booking(models.Model):
    customer = models.ForeignKey(User, on_delete=models.CASCADE, related_name='bookings')
    ride = models.ForeignKey('Ride', on_delete=models.PROTECT, related_name='bookings')
    number_of_seats = models.IntegerField(default=1)
    status = models.CharField(max_length=20, choices=BookingStatus.CHOICES, default=BookingStatus.PENDING)
    booking_fee = models.IntegerField(default=0)
    is_paid = models.BooleanField(default=False)
    cancellation_reason = models.TextField(blank=True, null=True)
    cancelled_by = models.ForeignKey(User, on_delete=models.SET_NULL, related_name='cancelled_bookings', null=True, blank=True)
    customer_has_rated = models.BooleanField(default=False)
    driver_has_rated = models.BooleanField(default=False)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)
    confirmed_at = models.DateTimeField(null=True, blank=True)
    completed_at = models.DateTimeField(null=True, blank=True)
    cancelled_at = models.DateTimeField(null=True, blank=True)

    class Meta:
        indexes = [
            models.Index(fields=['ride', 'status'], name='booking_ride_status_idx'),
            models.Index(fields=['customer', '-created_at'], name='booking_customer_created_idx'),
        ]
        constraints = [
            models.UniqueConstraint(
                fields=['customer', 'ride'],
                condition=~Q(status=BookingStatus.CANCELLED),
                name='booking_one_open_per_customer_ride',
            ),
            models.CheckConstraint(condition=Q(number_of_seats__gte=1), name='booking_seats_positive'),
        ]

    def __str__(self):
        return f"Booking {self.id} by {self.customer.username} on ride {self.ride_id}"
