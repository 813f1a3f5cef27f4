"""Ride-related serializers"""
from rest_framework import serializers
from ..models import Ride
from ..utils.constants import RideType
from .user_serializers import PublicUserSerializer


class RideSerializer(serializers.ModelSerializer):
    driver = PublicUserSerializer(read_only=True)

    class Meta:
        model = Ride
        fields = ['id', 'driver', 'from_location', 'to_location', 'departure_date', 'estimated_arrival_date',
                  'ride_type', 'price', 'total_seats', 'available_seats', 'vehicle_type', 'vehicle_number',
                  'description', 'status', 'cancellation_reason', 'created_at', 'updated_at']
        read_only_fields = fields


class RideSummarySerializer(serializers.ModelSerializer):
    class Meta:
        model = Ride
        fields = ['id', 'from_location', 'to_location', 'departure_date', 'price', 'ride_type',
                  'vehicle_type', 'vehicle_number', 'status']
        read_only_fields = fields


class RidePublishSerializer(serializers.Serializer):
    from_location = serializers.CharField(max_length=200)
    to_location = serializers.CharField(max_length=200)
    departure_date = serializers.DateTimeField()
    estimated_arrival_date = serializers.DateTimeField(required=False, allow_null=True)
    ride_type = serializers.ListField(child=serializers.ChoiceField(choices=RideType.CHOICES), allow_empty=False)
    price = serializers.IntegerField(min_value=1)
    total_seats = serializers.IntegerField(min_value=1)
    vehicle_type = serializers.CharField(max_length=50)
    vehicle_number = serializers.CharField(max_length=20)
    description = serializers.CharField(required=False, allow_blank=True, allow_null=True)

    def validate(self, data):
        arrival = data.get('estimated_arrival_date')
        if arrival and arrival < data['departure_date']:
            raise serializers.ValidationError({'estimated_arrival_date': 'Estimated arrival must be after departure'})
        return data


class RideCancelSerializer(serializers.Serializer):
    reason = serializers.CharField(required=False, allow_blank=True, allow_null=True)
