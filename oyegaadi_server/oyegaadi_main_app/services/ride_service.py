"""Ride service - business logic for ride operations"""
import logging

from django.db import DatabaseError, transaction
from django.utils import timezone

from ..exceptions import InvalidState, NotFound, PermissionDenied, ValidationError
from ..models import Ride
from ..utils.constants import BookingStatus, BusinessRules, RideStatus, RideType
from ..utils.role_utils import is_admin, is_kyc_verified, is_suspended
from .booking_service import BookingService
from .notification_service import NotificationService

logger = logging.getLogger(__name__)

RIDE_FIELDS = (
    'from_location', 'to_location', 'departure_date', 'estimated_arrival_date', 'ride_type',
    'price', 'total_seats', 'vehicle_type', 'vehicle_number', 'description',
)


class RideService:
    """Service for ride operations"""

    def __init__(self, bookings=None, notifications=None):
        self.notifications = notifications or NotificationService()
        self.bookings = bookings or BookingService(notifications=self.notifications)

    @transaction.atomic
    def publish_ride(self, driver, **ride_details):
        """Create an active ride with every seat available"""
        if not is_kyc_verified(driver):
            raise PermissionDenied("KYC verification required to publish rides")
        if is_suspended(driver):
            raise PermissionDenied("Your account is suspended")

        details = {name: ride_details[name] for name in RIDE_FIELDS if name in ride_details}
        self._validate_ride_details(details)

        ride = Ride.objects.create(
            driver=driver,
            status=RideStatus.ACTIVE,
            available_seats=details['total_seats'],
            **details
        )
        logger.info("Ride %s published by driver %s: %s", ride.id, driver.id, ride)
        self.notifications.notify_ride_published(ride)
        return ride

    @transaction.atomic
    def cancel_ride(self, ride_id, actor, reason):
        """Cancel ride and every open booking on it"""
        reason = (reason or '').strip()
        if not reason:
            raise ValidationError({'reason': ['Cancellation reason is required']})

        ride = self._lock_ride(ride_id)
        if ride.driver_id != actor.id and not is_admin(actor):
            raise PermissionDenied("You can only cancel your own rides")
        if ride.status != RideStatus.ACTIVE:
            raise InvalidState(f"Cannot cancel a ride that is {ride.status}")
        if ride.bookings.filter(status=BookingStatus.COMPLETED).exists():
            raise InvalidState("Cannot cancel a ride that already has completed bookings")

        if ride.driver_id == actor.id:
            prefix = BusinessRules.RIDE_CANCELLED_BY_DRIVER_PREFIX
        else:
            prefix = BusinessRules.RIDE_CANCELLED_BY_ADMIN_PREFIX
        cancelled = self._cancel(ride, actor, reason, prefix + reason)
        logger.info("Ride %s cancelled by user %s; %s booking(s) cancelled", ride.id, actor.id, len(cancelled))
        return ride

    @transaction.atomic
    def complete_ride(self, ride_id, actor):
        """
        Mark ride as completed and complete its confirmed bookings.

        Pending bookings are left pending.
        """
        ride = self._lock_ride(ride_id)
        if ride.driver_id != actor.id:
            raise PermissionDenied("You can only mark your own rides as completed")
        if ride.status != RideStatus.ACTIVE:
            raise InvalidState(f"Cannot complete a ride that is {ride.status}")

        completed = self._complete(ride)
        logger.info("Ride %s completed by driver %s; %s booking(s) completed", ride.id, actor.id, len(completed))
        return ride, len(completed)

    def sweep_expired(self, now=None):
        """
        Resolve active rides whose departure date has passed.

        Rides with confirmed (or already completed) bookings are completed,
        the rest are cancelled. Each ride is handled in its own transaction and
        re-checked under lock, so a second run or a concurrent manual
        cancel/complete leaves nothing to do.
        """
        now = now or timezone.now()
        ride_ids = list(
            Ride.objects.filter(status=RideStatus.ACTIVE, departure_date__lt=now)
            .order_by('departure_date')
            .values_list('id', flat=True)
        )

        result = {'processed': 0, 'cancelled': 0, 'completed': 0}
        for ride_id in ride_ids:
            try:
                outcome = self._expire_ride(ride_id, now)
            except DatabaseError:
                logger.exception("Failed to expire ride %s", ride_id)
                continue
            if outcome:
                result['processed'] += 1
                result[outcome] += 1

        if result['processed']:
            logger.info("Expired rides sweep: %s", result)
        else:
            logger.debug("Expired rides sweep: nothing to do")
        return result

    # Queries

    def get_ride(self, ride_id):
        ride = Ride.objects.select_related('driver__profile').filter(id=ride_id).first()
        if ride is None:
            raise NotFound("Ride not found")
        return ride

    def search_rides(self, from_location, to_location, date=None, ride_type=None):
        """Active rides with seats left, matching route substrings, newest first"""
        from_location = (from_location or '').strip()
        to_location = (to_location or '').strip()
        if not from_location or not to_location:
            raise ValidationError({'from': ['From and To locations are required']})

        rides = Ride.objects.filter(
            from_location__icontains=from_location,
            to_location__icontains=to_location,
            available_seats__gt=0,
            status=RideStatus.ACTIVE,
        ).select_related('driver__profile').order_by('-created_at')

        if date:
            rides = rides.filter(departure_date__date=date)

        rides = list(rides)
        # ride_type is a JSON list; filtered here since SQLite has no JSON containment lookup
        if ride_type and ride_type != 'all':
            rides = [ride for ride in rides if ride_type in (ride.ride_type or [])]
        return rides

    def get_popular_rides(self, limit=BusinessRules.POPULAR_RIDES_LIMIT):
        return list(
            Ride.objects.filter(
                status=RideStatus.ACTIVE,
                available_seats__gt=0,
                departure_date__gt=timezone.now(),
            ).select_related('driver__profile').order_by('departure_date')[:limit]
        )

    def get_driver_rides(self, driver):
        rides = Ride.objects.filter(driver=driver).exclude(status=RideStatus.CANCELLED)
        active = rides.filter(status=RideStatus.ACTIVE).order_by('-created_at')
        completed = rides.filter(status=RideStatus.COMPLETED).order_by('-departure_date')
        return list(active) + list(completed)

    # Internals

    @transaction.atomic
    def _expire_ride(self, ride_id, now):
        ride = (Ride.objects.select_for_update(of=('self',))
                .select_related('driver')
                .filter(id=ride_id, status=RideStatus.ACTIVE, departure_date__lt=now)
                .first())
        if ride is None:
            return None

        has_riders = ride.bookings.filter(
            status__in=[BookingStatus.CONFIRMED, BookingStatus.COMPLETED]
        ).exists()
        if has_riders:
            self._complete(ride, now=now)
            logger.info("Auto-completed past ride %s (%s)", ride.id, ride)
            return 'completed'

        reason = BusinessRules.EXPIRED_RIDE_REASON
        self._cancel(ride, None, reason, reason, now=now)
        logger.info("Auto-cancelled past ride %s (%s)", ride.id, ride)
        return 'cancelled'

    def _lock_ride(self, ride_id):
        ride = Ride.objects.select_for_update(of=('self',)).select_related('driver').filter(id=ride_id).first()
        if ride is None:
            raise NotFound("Ride not found")
        return ride

    def _cancel(self, ride, actor, reason, booking_reason, now=None):
        self._transition(ride, RideStatus.CANCELLED, cancellation_reason=reason,
                         cancelled_at=now or timezone.now())
        cancelled = self.bookings.cancel_open_bookings_for_ride(ride, actor, booking_reason)
        ride.refresh_from_db(fields=['available_seats'])
        self.notifications.notify_ride_cancelled(ride, cancelled)
        if actor is not None and actor.id != ride.driver_id:
            self.notifications.notify_ride_cancelled_for_driver(ride, actor)
        return cancelled

    def _complete(self, ride, now=None):
        self._transition(ride, RideStatus.COMPLETED, completed_at=now or timezone.now())
        return self.bookings.complete_confirmed_bookings_for_ride(ride)

    def _transition(self, ride, to_status, **fields):
        fields['updated_at'] = timezone.now()
        updated = Ride.objects.filter(id=ride.id, status=RideStatus.ACTIVE).update(status=to_status, **fields)
        if updated == 0:
            raise InvalidState(f"Ride {ride.id} is no longer active")
        ride.status = to_status
        for name, value in fields.items():
            setattr(ride, name, value)

    def _validate_ride_details(self, details):
        errors = {}
        for name in ('from_location', 'to_location', 'departure_date', 'ride_type', 'price',
                     'total_seats', 'vehicle_type', 'vehicle_number'):
            value = details.get(name)
            if value is None or value == '' or value == []:
                errors[name] = [f"{name.replace('_', ' ').capitalize()} is required"]

        if 'total_seats' not in errors and details['total_seats'] < 1:
            errors['total_seats'] = ['At least one seat must be available']
        if 'price' not in errors and details['price'] < 1:
            errors['price'] = ['Price must be greater than 0']
        if 'ride_type' not in errors:
            unknown = [t for t in details['ride_type'] if t not in RideType.VALUES]
            if unknown:
                errors['ride_type'] = [f"Unknown ride type(s): {', '.join(unknown)}"]

        arrival = details.get('estimated_arrival_date')
        if arrival and 'departure_date' not in errors and arrival < details['departure_date']:
            errors['estimated_arrival_date'] = ['Estimated arrival must be after departure']

        if errors:
            raise ValidationError(errors)
