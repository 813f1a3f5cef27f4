"""Ride request serializers"""
from rest_framework import serializers
from ..models import RideRequest
from ..utils.constants import RideRequestStatus
from .user_serializers import PublicUserSerializer


class RideRequestSerializer(serializers.ModelSerializer):
    user = PublicUserSerializer(read_only=True)

    class Meta:
        model = RideRequest
        fields = ['id', 'user', 'from_location', 'to_location', 'preferred_date', 'preferred_time',
                  'number_of_passengers', 'max_budget', 'contact_number', 'additional_notes', 'status',
                  'created_at', 'updated_at']
        read_only_fields = fields


class RideRequestCreateSerializer(serializers.ModelSerializer):
    class Meta:
        model = RideRequest
        fields = ['from_location', 'to_location', 'preferred_date', 'preferred_time', 'number_of_passengers',
                  'max_budget', 'contact_number', 'additional_notes']


class RideRequestStatusSerializer(serializers.Serializer):
    status = serializers.ChoiceField(choices=RideRequestStatus.CHOICES)
