"""Serializers package - imports from domain-specific modules"""

# User serializers
from .user_serializers import (
    UserSerializer,
    ProfileSerializer,
    PublicUserSerializer,
    RegisterSerializer,
)

# Ride serializers
from .ride_serializers import (
    RideSerializer,
    RideSummarySerializer,
    RidePublishSerializer,
    RideCancelSerializer,
)

# Booking serializers
from .booking_serializers import (
    BookingSerializer,
    DriverBookingSerializer,
    BookingCreateSerializer,
    BookingStatusUpdateSerializer,
)

# Rating serializers
from .rating_serializers import (
    RatingSerializer,
    RatingCreateSerializer,
)

# KYC serializers
from .kyc_serializers import (
    KycVerificationSerializer,
    KycSubmitSerializer,
    KycReviewSerializer,
)

# Ride request serializers
from .ride_request_serializers import (
    RideRequestSerializer,
    RideRequestCreateSerializer,
    RideRequestStatusSerializer,
)

# Settings serializers
from .settings_serializers import (
    BookingFeeSerializer,
)

__all__ = [
    'UserSerializer',
    'ProfileSerializer',
    'PublicUserSerializer',
    'RegisterSerializer',
    'RideSerializer',
    'RideSummarySerializer',
    'RidePublishSerializer',
    'RideCancelSerializer',
    'BookingSerializer',
    'DriverBookingSerializer',
    'BookingCreateSerializer',
    'BookingStatusUpdateSerializer',
    'RatingSerializer',
    'RatingCreateSerializer',
    'KycVerificationSerializer',
    'KycSubmitSerializer',
    'KycReviewSerializer',
    'RideRequestSerializer',
    'RideRequestCreateSerializer',
    'RideRequestStatusSerializer',
    'BookingFeeSerializer',
]
