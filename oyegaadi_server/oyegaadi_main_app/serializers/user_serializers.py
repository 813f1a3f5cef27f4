"""User-related serializers"""
from rest_framework import serializers
from django.contrib.auth.models import User
from ..models import Profile


class UserSerializer(serializers.ModelSerializer):
    class Meta:
        model = User
        fields = ["id", "username", "email", "first_name", "last_name"]


class ProfileSerializer(serializers.ModelSerializer):
    user = UserSerializer(read_only=True)

    class Meta:
        model = Profile
        fields = ['id', 'user', 'mobile_number', 'full_name', 'role', 'is_kyc_verified', 'is_suspended',
                  'average_rating', 'total_ratings', 'emergency_contact']
        read_only_fields = ['role', 'is_kyc_verified', 'is_suspended', 'average_rating', 'total_ratings']


class PublicUserSerializer(serializers.Serializer):
    """What other parties of a ride may see about a user"""
    id = serializers.IntegerField(read_only=True)
    full_name = serializers.SerializerMethodField()
    role = serializers.SerializerMethodField()
    average_rating = serializers.SerializerMethodField()
    is_kyc_verified = serializers.SerializerMethodField()

    def _profile(self, obj):
        return getattr(obj, 'profile', None)

    def get_full_name(self, obj):
        profile = self._profile(obj)
        return profile.full_name if profile and profile.full_name else obj.get_full_name() or obj.username

    def get_role(self, obj):
        profile = self._profile(obj)
        return profile.role if profile else None

    def get_average_rating(self, obj):
        profile = self._profile(obj)
        return float(profile.average_rating) if profile else 0.0

    def get_is_kyc_verified(self, obj):
        profile = self._profile(obj)
        return bool(profile and profile.is_kyc_verified)


class RegisterSerializer(serializers.Serializer):
    """Shape only; required fields, formats and uniqueness are checked by UserService"""
    username = serializers.CharField(max_length=150, required=False, allow_blank=True)
    password = serializers.CharField(write_only=True, required=False, allow_blank=True, trim_whitespace=False)
    email = serializers.CharField(max_length=254, required=False, allow_blank=True)
    mobile_number = serializers.CharField(max_length=15, required=False, allow_blank=True)
    full_name = serializers.CharField(max_length=100, required=False, allow_blank=True)
    role = serializers.CharField(max_length=20, required=False, allow_blank=True)
