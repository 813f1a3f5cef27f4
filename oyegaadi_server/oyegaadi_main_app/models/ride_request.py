"""Ride request models"""
from django.db import models
from django.contrib.auth.models import User

from ..utils.constants import RideRequestStatus


class RideRequest(models.Model):
    """A customer asking the platform for a ride that nobody has published yet"""
    user = models.ForeignKey(User, on_delete=models.CASCADE, related_name='ride_requests')
    from_location = models.CharField(max_length=200)
    to_location = models.CharField(max_length=200)
    preferred_date = models.DateField()
    preferred_time = models.CharField(max_length=20, blank=True, null=True)
    number_of_passengers = models.IntegerField(default=1)
    max_budget = models.IntegerField(blank=True, null=True)
    contact_number = models.CharField(max_length=15)
    additional_notes = models.TextField(blank=True, null=True)
    status = models.CharField(max_length=20, choices=RideRequestStatus.CHOICES, default=RideRequestStatus.PENDING)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ['-created_at']
        indexes = [models.Index(fields=['status', '-created_at'], name='ride_request_status_idx')]

    def __str__(self):
        return f"{self.from_location} to {self.to_location} on {self.preferred_date} ({self.status})"
