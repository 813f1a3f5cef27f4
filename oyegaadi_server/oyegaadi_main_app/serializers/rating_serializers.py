"""Rating-related serializers"""
from rest_framework import serializers
from ..models import Rating
from ..utils.constants import BusinessRules
from .user_serializers import PublicUserSerializer


class RatingSerializer(serializers.ModelSerializer):
    from_user = PublicUserSerializer(read_only=True)

    class Meta:
        model = Rating
        fields = ['id', 'from_user', 'to_user', 'booking', 'rating', 'review', 'created_at']
        read_only_fields = fields


class RatingCreateSerializer(serializers.Serializer):
    booking = serializers.IntegerField()
    to_user = serializers.IntegerField(required=False, allow_null=True)
    rating = serializers.IntegerField(min_value=BusinessRules.MIN_RATING, max_value=BusinessRules.MAX_RATING)
    review = serializers.CharField(required=False, allow_blank=True, allow_null=True)
