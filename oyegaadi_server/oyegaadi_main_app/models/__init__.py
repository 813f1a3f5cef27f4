"""Models package - domain-based organization"""

# User models
from .user import Profile

# KYC models
from .kyc import KycVerification

# Ride models
from .ride import Ride

# Booking models
from .booking import Booking

# Rating models
from .rating import Rating

# Ride request models
from .ride_request import RideRequest

# Settings models
from .app_setting import AppSetting

__all__ = [
    'Profile', 'KycVerification', 'Ride', 'Booking', 'Rating', 'AppSetting', 'RideRequest',
]
