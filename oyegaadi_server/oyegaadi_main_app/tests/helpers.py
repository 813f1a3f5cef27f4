"""Shared fixtures for the lifecycle tests"""
from datetime import timedelta
from itertools import count

from django.contrib.auth.models import User
from django.db.models import Sum
from django.utils import timezone

from ..models import Booking, Profile, Ride
from ..utils.constants import BookingStatus, RideStatus, RideType, UserRole

_mobile_numbers = count(9000000000)


def make_user(username, role=UserRole.CUSTOMER, kyc_verified=True, email=None, **profile_fields):
    user = User.objects.create_user(username, email=email if email is not None else f'{username}@example.com')
    Profile.objects.create(
        user=user,
        mobile_number=str(next(_mobile_numbers)),
        full_name=username.title(),
        role=role,
        is_kyc_verified=kyc_verified,
        **profile_fields
    )
    return user


def make_ride(driver, total_seats=4, departure_in=timedelta(days=2), **fields):
    """Insert an active ride directly, bypassing publish validation"""
    values = {
        'from_location': 'Delhi',
        'to_location': 'Jaipur',
        'departure_date': timezone.now() + departure_in,
        'ride_type': [RideType.ONE_WAY],
        'price': 1500,
        'total_seats': total_seats,
        'available_seats': total_seats,
        'vehicle_type': 'Sedan',
        'vehicle_number': 'DL01AB1234',
        'status': RideStatus.ACTIVE,
    }
    values.update(fields)
    return Ride.objects.create(driver=driver, **values)


def ride_details(**overrides):
    details = {
        'from_location': 'Delhi',
        'to_location': 'Jaipur',
        'departure_date': timezone.now() + timedelta(days=3),
        'ride_type': [RideType.ONE_WAY, RideType.SHARING],
        'price': 1200,
        'total_seats': 4,
        'vehicle_type': 'SUV',
        'vehicle_number': 'RJ14CD5678',
        'description': 'AC, two bags per passenger',
    }
    details.update(overrides)
    return details


def booked_seats(ride):
    """Seats held by every non-cancelled booking on the ride"""
    total = (Booking.objects.filter(ride=ride)
             .exclude(status=BookingStatus.CANCELLED)
             .aggregate(total=Sum('number_of_seats'))['total'])
    return total or 0
