"""Services package - business logic layer"""

from .inventory_service import InventoryService
from .booking_service import BookingService
from .ride_service import RideService
from .rating_service import RatingService
from .kyc_service import KycService
from .settings_service import SettingsService
from .ride_request_service import RideRequestService
from .stats_service import StatsService
from .user_service import UserService
from .notification_service import NotificationService

__all__ = [
    'InventoryService',
    'BookingService',
    'RideService',
    'RatingService',
    'KycService',
    'SettingsService',
    'RideRequestService',
    'StatsService',
    'UserService',
    'NotificationService',
]
