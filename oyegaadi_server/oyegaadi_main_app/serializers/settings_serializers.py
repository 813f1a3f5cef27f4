"""App settings serializers"""
from rest_framework import serializers


class BookingFeeSerializer(serializers.Serializer):
    enabled = serializers.BooleanField()
    amount = serializers.IntegerField(min_value=0, required=False)
