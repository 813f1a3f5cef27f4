"""KYC serializers"""
from rest_framework import serializers
from ..models import KycVerification
from ..utils.constants import KycStatus
from .user_serializers import PublicUserSerializer


class KycVerificationSerializer(serializers.ModelSerializer):
    user = PublicUserSerializer(read_only=True)

    class Meta:
        model = KycVerification
        fields = ['id', 'user', 'document_type', 'document_id', 'document_url', 'vehicle_type', 'vehicle_number',
                  'driving_license_url', 'selfie_url', 'status', 'remarks', 'reviewed_at', 'created_at', 'updated_at']
        read_only_fields = fields


class KycSubmitSerializer(serializers.ModelSerializer):
    class Meta:
        model = KycVerification
        fields = ['document_type', 'document_id', 'document_url', 'vehicle_type', 'vehicle_number',
                  'driving_license_url', 'selfie_url']


class KycReviewSerializer(serializers.Serializer):
    status = serializers.ChoiceField(choices=KycStatus.CHOICES)
    remarks = serializers.CharField(required=False, allow_blank=True, allow_null=True)
