"""Runtime settings views"""
from rest_framework.permissions import AllowAny
from rest_framework.response import Response
from rest_framework.views import APIView
from rest_framework_simplejwt.authentication import JWTAuthentication

from ..permissions import IsPlatformAdmin
from ..serializers import BookingFeeSerializer
from ..services import SettingsService


class BookingFeeView(APIView):
    permission_classes = [AllowAny]

    def get(self, request):
        return Response(SettingsService().get_booking_fee_setting())


class AdminBookingFeeView(APIView):
    authentication_classes = [JWTAuthentication]
    permission_classes = [IsPlatformAdmin]

    def get(self, request):
        return Response(SettingsService().get_booking_fee_setting())

    def patch(self, request):
        serializer = BookingFeeSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        value = SettingsService().update_booking_fee_setting(
            serializer.validated_data['enabled'],
            serializer.validated_data.get('amount'),
        )
        return Response({'message': 'Booking fee updated successfully', 'booking_fee': value})


__all__ = ['BookingFeeView', 'AdminBookingFeeView']
