"""Stats service - counters for the admin dashboard"""
from django.contrib.auth.models import User
from django.db.models import Count, Q

from ..models import Booking, KycVerification, Ride
from ..utils.constants import BookingStatus, BusinessRules, KycStatus, RideStatus, UserRole


class StatsService:
    """Read-only aggregates. Each ``*_stats`` method runs one COUNT query plus,
    where it has one, a query for the most recent records."""

    def __init__(self, recent_limit=BusinessRules.STATS_RECENT_LIMIT):
        self.recent_limit = recent_limit

    def user_stats(self):
        return User.objects.aggregate(
            total=Count('id'),
            drivers=Count('id', filter=Q(profile__role=UserRole.DRIVER)),
            customers=Count('id', filter=Q(profile__role=UserRole.CUSTOMER)),
            admins=Count('id', filter=Q(profile__role=UserRole.ADMIN)),
        )

    def kyc_stats(self):
        stats = KycVerification.objects.aggregate(
            total=Count('id'),
            pending=Count('id', filter=Q(status=KycStatus.PENDING)),
            approved=Count('id', filter=Q(status=KycStatus.APPROVED)),
            rejected=Count('id', filter=Q(status=KycStatus.REJECTED)),
        )
        stats['recent'] = list(
            KycVerification.objects.select_related('user__profile').order_by('-created_at')[:self.recent_limit]
        )
        return stats

    def ride_stats(self):
        return Ride.objects.aggregate(
            total=Count('id'),
            active=Count('id', filter=Q(status=RideStatus.ACTIVE)),
            completed=Count('id', filter=Q(status=RideStatus.COMPLETED)),
            cancelled=Count('id', filter=Q(status=RideStatus.CANCELLED)),
        )

    def booking_stats(self):
        stats = Booking.objects.aggregate(
            total=Count('id'),
            pending=Count('id', filter=Q(status=BookingStatus.PENDING)),
            confirmed=Count('id', filter=Q(status=BookingStatus.CONFIRMED)),
            completed=Count('id', filter=Q(status=BookingStatus.COMPLETED)),
            cancelled=Count('id', filter=Q(status=BookingStatus.CANCELLED)),
        )
        stats['recent'] = list(
            Booking.objects.select_related('customer__profile', 'ride__driver__profile')
            .order_by('-created_at')[:self.recent_limit]
        )
        return stats
