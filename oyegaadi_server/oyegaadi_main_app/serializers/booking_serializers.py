"""Booking-related serializers"""
from rest_framework import serializers
from ..models import Booking
from ..services.booking_service import CancelBooking, CompleteBooking, ConfirmBooking
from ..utils.constants import BookingStatus
from .ride_serializers import RideSummarySerializer
from .user_serializers import PublicUserSerializer


class BookingSerializer(serializers.ModelSerializer):
    customer = PublicUserSerializer(read_only=True)
    ride = RideSummarySerializer(read_only=True)
    driver = serializers.SerializerMethodField()

    class Meta:
        model = Booking
        fields = ['id', 'customer', 'ride', 'driver', 'number_of_seats', 'status', 'booking_fee', 'is_paid',
                  'cancellation_reason', 'customer_has_rated', 'driver_has_rated', 'created_at', 'updated_at',
                  'confirmed_at', 'completed_at', 'cancelled_at']
        read_only_fields = fields

    def get_driver(self, obj):
        driver = obj.ride.driver
        data = PublicUserSerializer(driver).data
        # Contact details only once the driver has accepted the booking
        if obj.status in (BookingStatus.CONFIRMED, BookingStatus.COMPLETED):
            profile = getattr(driver, 'profile', None)
            data['mobile'] = profile.mobile_number if profile else None
        return data


class DriverBookingSerializer(BookingSerializer):
    customer_mobile = serializers.SerializerMethodField()

    class Meta(BookingSerializer.Meta):
        fields = BookingSerializer.Meta.fields + ['customer_mobile']
        read_only_fields = fields

    def get_customer_mobile(self, obj):
        profile = getattr(obj.customer, 'profile', None)
        return profile.mobile_number if profile else None


class BookingCreateSerializer(serializers.Serializer):
    ride = serializers.IntegerField()
    number_of_seats = serializers.IntegerField(min_value=1, required=False)


class BookingStatusUpdateSerializer(serializers.Serializer):
    """Validated request for ``PUT /bookings/:id/status``, one variant per status"""
    STATUS_CHOICES = [BookingStatus.CONFIRMED, BookingStatus.CANCELLED, BookingStatus.COMPLETED]

    status = serializers.ChoiceField(choices=STATUS_CHOICES)
    reason = serializers.CharField(required=False, allow_blank=True, allow_null=True)

    def validate(self, data):
        if data['status'] == BookingStatus.CANCELLED and not (data.get('reason') or '').strip():
            raise serializers.ValidationError({'reason': 'Cancellation reason is required'})
        return data

    def to_command(self):
        status = self.validated_data['status']
        if status == BookingStatus.CONFIRMED:
            return ConfirmBooking()
        if status == BookingStatus.CANCELLED:
            return CancelBooking(reason=self.validated_data['reason'].strip())
        return CompleteBooking()
