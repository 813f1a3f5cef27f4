"""Views package - HTTP request handlers"""

# Import from domain-specific view files
from .user_views import ProfileView, RegisterView
from .ride_views import RideViewSet
from .booking_views import BookingViewSet
from .rating_views import RatingViewSet
from .kyc_views import KycViewSet, AdminKycViewSet
from .ride_request_views import RideRequestViewSet, AdminRideRequestViewSet
from .stats_views import AdminUserStatsView, AdminKycStatsView, AdminRideStatsView, AdminBookingStatsView
from .settings_views import BookingFeeView, AdminBookingFeeView

__all__ = [
    'ProfileView', 'RegisterView',
    'RideViewSet',
    'BookingViewSet',
    'RatingViewSet',
    'KycViewSet', 'AdminKycViewSet',
    'RideRequestViewSet', 'AdminRideRequestViewSet',
    'AdminUserStatsView', 'AdminKycStatsView', 'AdminRideStatsView', 'AdminBookingStatsView',
    'BookingFeeView', 'AdminBookingFeeView',
]
