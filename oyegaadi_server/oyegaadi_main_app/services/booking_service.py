"""Booking service - business logic for booking operations"""
import logging
from dataclasses import dataclass
from typing import Union

from django.conf import settings
from django.db import IntegrityError, transaction
from django.utils import timezone

from ..exceptions import (
    DuplicateBooking, InvalidState, KycRequired, NotFound, PermissionDenied, ValidationError,
)
from ..models import Booking, Profile, Ride
from ..utils.constants import BookingStatus, RideStatus
from ..utils.role_utils import is_admin, is_kyc_verified, is_suspended
from .inventory_service import InventoryService
from .notification_service import NotificationService

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ConfirmBooking:
    pass


@dataclass(frozen=True)
class CancelBooking:
    reason: str


@dataclass(frozen=True)
class CompleteBooking:
    pass


BookingStatusCommand = Union[ConfirmBooking, CancelBooking, CompleteBooking]


def lock_booking(booking_id):
    """
    Lock a booking's ride row, then the booking row, and return the booking.

    Every writer that touches both rows takes them in this order. Only the
    ride and booking tables are locked, never the joined auth_user rows.
    """
    ride_id = Booking.objects.filter(id=booking_id).values_list('ride_id', flat=True).first()
    if ride_id is None:
        raise NotFound("Booking not found")
    ride = Ride.objects.select_for_update(of=('self',)).select_related('driver').get(id=ride_id)
    booking = Booking.objects.select_for_update(of=('self',)).select_related('customer').get(id=booking_id)
    booking.ride = ride
    return booking


class BookingService:
    """Service for booking operations.

    Lock order is always ride row, then booking rows, the same order
    ``RideService`` uses for its cascades.
    """

    def __init__(self, inventory=None, notifications=None):
        self.inventory = inventory or InventoryService()
        self.notifications = notifications or NotificationService()

    @transaction.atomic
    def create_booking(self, customer, ride_id, booking_fee, number_of_seats=None):
        """
        Reserve seats on a ride and create a pending booking

        Args:
            customer: User making the booking
            ride_id: Ride ID
            booking_fee: Fee snapshot stored on the booking
            number_of_seats: Requested seats; ignored while
                FULL_VEHICLE_BOOKING is on (the whole vehicle is booked)

        Returns:
            Booking object

        Raises:
            KycRequired: unverified customer who already has a booking
            NotFound, InvalidState, DuplicateBooking, InsufficientCapacity
        """
        if is_suspended(customer):
            raise PermissionDenied("Your account is suspended")

        # Serializes concurrent first bookings by the same customer
        Profile.objects.select_for_update().filter(user=customer).first()
        if not is_kyc_verified(customer) and Booking.objects.filter(customer=customer).exists():
            raise KycRequired("KYC verification required after your first booking")

        ride = Ride.objects.select_related('driver').filter(id=ride_id).first()
        if ride is None:
            raise NotFound("Ride not found")
        if ride.status != RideStatus.ACTIVE:
            raise InvalidState(f"Cannot book a ride that is {ride.status}")
        if ride.driver_id == customer.id:
            raise PermissionDenied("You cannot book your own ride")

        if Booking.objects.filter(customer=customer, ride=ride).exclude(status=BookingStatus.CANCELLED).exists():
            raise DuplicateBooking()

        if settings.FULL_VEHICLE_BOOKING or number_of_seats is None:
            seats = ride.total_seats
        else:
            seats = number_of_seats

        self.inventory.reserve(ride.id, seats)

        try:
            with transaction.atomic():
                booking = Booking.objects.create(
                    customer=customer,
                    ride=ride,
                    number_of_seats=seats,
                    status=BookingStatus.PENDING,
                    booking_fee=booking_fee,
                    is_paid=False,
                )
        except IntegrityError:
            raise DuplicateBooking()

        ride.refresh_from_db(fields=['available_seats', 'updated_at'])
        logger.info("Booking %s created by user %s on ride %s (%s seats, fee %s)",
                    booking.id, customer.id, ride.id, seats, booking_fee)
        self.notifications.notify_booking_created(booking)
        return booking

    @transaction.atomic
    def confirm_booking(self, booking_id, actor):
        booking = lock_booking(booking_id)
        ride = booking.ride

        if ride.driver_id != actor.id and not is_admin(actor):
            raise PermissionDenied("Only the driver of this ride can confirm bookings")
        if booking.status != BookingStatus.PENDING:
            raise InvalidState(f"Only pending bookings can be confirmed (booking is {booking.status})")
        if ride.status != RideStatus.ACTIVE:
            raise InvalidState(f"Cannot confirm a booking on a ride that is {ride.status}")

        self._transition(booking, [BookingStatus.PENDING], BookingStatus.CONFIRMED, confirmed_at=timezone.now())
        logger.info("Booking %s confirmed by user %s", booking.id, actor.id)
        self.notifications.notify_booking_confirmed(booking)
        return booking

    @transaction.atomic
    def cancel_booking(self, booking_id, actor, reason):
        """Cancel booking and restore seats atomically"""
        reason = (reason or '').strip()
        if not reason:
            raise ValidationError({'reason': ['Cancellation reason is required']})

        booking = lock_booking(booking_id)
        ride = booking.ride

        if actor.id == booking.customer_id:
            cancelled_by_role = 'customer'
        elif actor.id == ride.driver_id:
            cancelled_by_role = 'driver'
        elif is_admin(actor):
            cancelled_by_role = 'admin'
        else:
            raise PermissionDenied("Not authorized to update this booking")

        if booking.status not in BookingStatus.OPEN:
            raise InvalidState(f"Cannot cancel a booking that is {booking.status}")

        self._cancel(booking, actor, reason)
        logger.info("Booking %s cancelled by %s %s", booking.id, cancelled_by_role, actor.id)
        self.notifications.notify_booking_cancelled(booking, cancelled_by_role)
        return booking

    @transaction.atomic
    def complete_booking(self, booking_id, actor):
        booking = lock_booking(booking_id)
        ride = booking.ride

        if ride.driver_id != actor.id and not is_admin(actor):
            raise PermissionDenied("Only the driver of this ride can complete bookings")
        if booking.status != BookingStatus.CONFIRMED:
            raise InvalidState(f"Only confirmed bookings can be completed (booking is {booking.status})")
        if ride.status == RideStatus.CANCELLED:
            raise InvalidState("Cannot complete a booking on a cancelled ride")

        self._transition(booking, [BookingStatus.CONFIRMED], BookingStatus.COMPLETED, completed_at=timezone.now())
        logger.info("Booking %s completed by user %s", booking.id, actor.id)
        self.notifications.notify_booking_completed(booking)
        return booking

    def apply_status_update(self, booking_id, actor, command: BookingStatusCommand):
        """Dispatch a validated status-update request to its transition"""
        if isinstance(command, ConfirmBooking):
            return self.confirm_booking(booking_id, actor)
        if isinstance(command, CancelBooking):
            return self.cancel_booking(booking_id, actor, command.reason)
        if isinstance(command, CompleteBooking):
            return self.complete_booking(booking_id, actor)
        raise ValidationError({'status': ['Invalid status']})

    # Cascades, called by RideService while it holds the ride lock

    def cancel_open_bookings_for_ride(self, ride, actor, reason):
        bookings = list(
            Booking.objects.select_for_update(of=('self',))
            .select_related('customer')
            .filter(ride=ride, status__in=BookingStatus.OPEN)
            .order_by('id')
        )
        for booking in bookings:
            booking.ride = ride
            self._cancel(booking, actor, reason)
        return bookings

    def complete_confirmed_bookings_for_ride(self, ride):
        bookings = list(
            Booking.objects.select_for_update(of=('self',))
            .select_related('customer')
            .filter(ride=ride, status=BookingStatus.CONFIRMED)
            .order_by('id')
        )
        now = timezone.now()
        for booking in bookings:
            booking.ride = ride
            self._transition(booking, [BookingStatus.CONFIRMED], BookingStatus.COMPLETED, completed_at=now)
            self.notifications.notify_booking_completed(booking)
        return bookings

    # Queries

    def get_customer_bookings(self, customer):
        return (Booking.objects.filter(customer=customer)
                .select_related('ride', 'ride__driver__profile')
                .order_by('-created_at'))

    def get_driver_bookings(self, driver):
        return (Booking.objects.filter(ride__driver=driver)
                .select_related('ride', 'customer__profile')
                .order_by('-created_at'))

    # Internals

    def _cancel(self, booking, actor, reason):
        self._transition(
            booking,
            BookingStatus.OPEN,
            BookingStatus.CANCELLED,
            cancellation_reason=reason,
            cancelled_by=actor,
            cancelled_at=timezone.now(),
        )
        self.inventory.release(booking.ride_id, booking.number_of_seats)

    def _transition(self, booking, from_statuses, to_status, **fields):
        fields['updated_at'] = timezone.now()
        updated = Booking.objects.filter(id=booking.id, status__in=from_statuses).update(status=to_status, **fields)
        if updated == 0:
            raise InvalidState(f"Booking {booking.id} is no longer {' or '.join(from_statuses)}")
        booking.status = to_status
        for name, value in fields.items():
            setattr(booking, name, value)
