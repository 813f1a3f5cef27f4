"""Inventory service - seat accounting for rides"""
import logging

from django.db import transaction
from django.db.models import F
from django.db.models.functions import Least
from django.utils import timezone

from ..exceptions import InsufficientCapacity, InvalidState, NotFound, ValidationError
from ..models import Ride
from ..utils.constants import RideStatus

logger = logging.getLogger(__name__)


class InventoryService:
    """The only code that writes ``Ride.available_seats``.

    Both operations are single conditional UPDATE statements, so concurrent
    callers are serialized by the database row lock instead of a
    read-then-write in Python. Callers run them inside the transaction of the
    booking transition that triggered them.
    """

    @transaction.atomic
    def reserve(self, ride_id, seats):
        """
        Take ``seats`` from an active ride.

        Raises:
            NotFound: ride does not exist
            InvalidState: ride is not active
            InsufficientCapacity: fewer than ``seats`` seats left
        """
        if seats < 1:
            raise ValidationError({'number_of_seats': ['At least one seat is required']})

        updated = Ride.objects.filter(
            id=ride_id,
            status=RideStatus.ACTIVE,
            available_seats__gte=seats,
        ).update(available_seats=F('available_seats') - seats, updated_at=timezone.now())

        if updated == 0:
            ride = Ride.objects.filter(id=ride_id).only('status', 'available_seats').first()
            if ride is None:
                raise NotFound("Ride not found")
            if ride.status != RideStatus.ACTIVE:
                raise InvalidState(f"Cannot book a ride that is {ride.status}")
            logger.info("Reserve of %s seat(s) on ride %s rejected: %s left", seats, ride_id, ride.available_seats)
            raise InsufficientCapacity()

        logger.debug("Reserved %s seat(s) on ride %s", seats, ride_id)

    @transaction.atomic
    def release(self, ride_id, seats):
        """Return ``seats`` to the ride, never going above ``total_seats``."""
        updated = Ride.objects.filter(id=ride_id).update(
            available_seats=Least(F('available_seats') + seats, F('total_seats')),
            updated_at=timezone.now(),
        )
        if updated == 0:
            raise NotFound("Ride not found")

        logger.debug("Released %s seat(s) on ride %s", seats, ride_id)
