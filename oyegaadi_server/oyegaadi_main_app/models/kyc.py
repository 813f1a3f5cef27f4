"""KYC verification models"""
from django.db import models
from django.contrib.auth.models import User

from ..utils.constants import KycStatus


class KycVerification(models.Model):
    user = models.ForeignKey(User, on_delete=models.CASCADE, related_name='kyc_verifications')
    document_type = models.CharField(max_length=50)
    document_id = models.CharField(max_length=50)
    document_url = models.URLField(max_length=500)
    vehicle_type = models.CharField(max_length=50, blank=True, null=True)
    vehicle_number = models.CharField(max_length=20, blank=True, null=True)
    driving_license_url = models.URLField(max_length=500, blank=True, null=True)
    selfie_url = models.URLField(max_length=500, blank=True, null=True)
    status = models.CharField(max_length=20, choices=KycStatus.CHOICES, default=KycStatus.PENDING)
    remarks = models.TextField(blank=True, null=True)
    reviewed_by = models.ForeignKey(User, on_delete=models.SET_NULL, null=True, blank=True, related_name='reviewed_kyc')
    reviewed_at = models.DateTimeField(null=True, blank=True)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ['-created_at']
        indexes = [models.Index(fields=['status', '-created_at'], name='kyc_status_created_idx')]

    def __str__(self):
        return f"KYC {self.id} - {self.user.username} ({self.status})"
