"""Admin dashboard counters"""
from rest_framework.response import Response
from rest_framework.views import APIView
from rest_framework_simplejwt.authentication import JWTAuthentication

from ..permissions import IsPlatformAdmin
from ..serializers import BookingSerializer, KycVerificationSerializer
from ..services import StatsService


class AdminStatsView(APIView):
    authentication_classes = [JWTAuthentication]
    permission_classes = [IsPlatformAdmin]


class AdminUserStatsView(AdminStatsView):
    def get(self, request):
        return Response(StatsService().user_stats())


class AdminKycStatsView(AdminStatsView):
    def get(self, request):
        stats = StatsService().kyc_stats()
        stats['recent'] = KycVerificationSerializer(stats['recent'], many=True).data
        return Response(stats)


class AdminRideStatsView(AdminStatsView):
    def get(self, request):
        return Response(StatsService().ride_stats())


class AdminBookingStatsView(AdminStatsView):
    def get(self, request):
        stats = StatsService().booking_stats()
        stats['recent'] = BookingSerializer(stats['recent'], many=True).data
        return Response(stats)


__all__ = ['AdminUserStatsView', 'AdminKycStatsView', 'AdminRideStatsView', 'AdminBookingStatsView']
