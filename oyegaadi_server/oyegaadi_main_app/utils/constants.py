"""Centralized constants and business rules"""

class UserRole:
    CUSTOMER = 'customer'
    DRIVER = 'driver'
    ADMIN = 'admin'

    CHOICES = [
        (CUSTOMER, 'Customer'),
        (DRIVER, 'Driver'),
        (ADMIN, 'Admin'),
    ]

class RideStatus:
    ACTIVE = 'active'
    COMPLETED = 'completed'
    CANCELLED = 'cancelled'

    CHOICES = [
        (ACTIVE, 'Active'),
        (COMPLETED, 'Completed'),
        (CANCELLED, 'Cancelled'),
    ]

class RideType:
    ONE_WAY = 'one-way'
    SHARING = 'sharing'

    CHOICES = [
        (ONE_WAY, 'One Way'),
        (SHARING, 'Sharing'),
    ]
    VALUES = [ONE_WAY, SHARING]

class BookingStatus:
    PENDING = 'pending'
    CONFIRMED = 'confirmed'
    CANCELLED = 'cancelled'
    COMPLETED = 'completed'

    CHOICES = [
        (PENDING, 'Pending'),
        (CONFIRMED, 'Confirmed'),
        (CANCELLED, 'Cancelled'),
        (COMPLETED, 'Completed'),
    ]
    # Statuses that hold seats on the ride
    OPEN = [PENDING, CONFIRMED]

class KycStatus:
    PENDING = 'pending'
    APPROVED = 'approved'
    REJECTED = 'rejected'

    CHOICES = [
        (PENDING, 'Pending Review'),
        (APPROVED, 'Approved'),
        (REJECTED, 'Rejected'),
    ]

class RideRequestStatus:
    PENDING = 'pending'
    RESPONDED = 'responded'
    CLOSED = 'closed'

    CHOICES = [
        (PENDING, 'Pending'),
        (RESPONDED, 'Responded'),
        (CLOSED, 'Closed'),
    ]
    VALUES = [PENDING, RESPONDED, CLOSED]

class SettingKeys:
    BOOKING_FEE = 'booking_fee'

class BusinessRules:
    """Business rules and limits"""
    MIN_RATING = 1
    MAX_RATING = 5
    POPULAR_RIDES_LIMIT = 6
    EXPIRED_RIDE_REASON = 'Automatically cancelled: departure date passed with no confirmed bookings'
    RIDE_CANCELLED_BY_DRIVER_PREFIX = 'Ride cancelled by driver: '
    RIDE_CANCELLED_BY_ADMIN_PREFIX = 'Ride cancelled by admin: '
    RIDE_REQUEST_MAX_PASSENGERS = 8
    STATS_RECENT_LIMIT = 5
