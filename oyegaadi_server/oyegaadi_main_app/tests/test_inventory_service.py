"""Tests for inventory service"""

from django.test import TestCase

from ..exceptions import InsufficientCapacity, InvalidState, NotFound, ValidationError
from ..models import Ride
from ..services import InventoryService
from ..utils.constants import RideStatus, UserRole
from .helpers import make_ride, make_user


class InventoryServiceTest(TestCase):
    def setUp(self):
        self.driver = make_user('driver', role=UserRole.DRIVER)
        self.ride = make_ride(self.driver, total_seats=4)
        self.service = InventoryService()

    def test_reserve_decrements_available_seats(self):
        self.service.reserve(self.ride.id, 3)
        self.ride.refresh_from_db()
        self.assertEqual(self.ride.available_seats, 1)

    def test_reserve_more_than_available_fails(self):
        with self.assertRaises(InsufficientCapacity) as ctx:
            self.service.reserve(self.ride.id, 5)
        self.assertEqual(ctx.exception.message, 'Seats are no longer available for this ride')
        self.ride.refresh_from_db()
        self.assertEqual(self.ride.available_seats, 4)

    def test_reserve_uses_current_row_not_stale_read(self):
        stale = Ride.objects.get(id=self.ride.id)
        self.service.reserve(self.ride.id, 3)

        # The in-memory copy still shows 4 seats; the conditional update must not trust it
        self.assertEqual(stale.available_seats, 4)
        with self.assertRaises(InsufficientCapacity):
            self.service.reserve(stale.id, 2)

        self.ride.refresh_from_db()
        self.assertEqual(self.ride.available_seats, 1)

    def test_reserve_on_inactive_ride(self):
        Ride.objects.filter(id=self.ride.id).update(status=RideStatus.CANCELLED)
        with self.assertRaises(InvalidState):
            self.service.reserve(self.ride.id, 1)

    def test_reserve_missing_ride(self):
        with self.assertRaises(NotFound):
            self.service.reserve(999999, 1)

    def test_reserve_requires_positive_seats(self):
        with self.assertRaises(ValidationError):
            self.service.reserve(self.ride.id, 0)

    def test_release_restores_seats(self):
        self.service.reserve(self.ride.id, 4)
        self.service.release(self.ride.id, 4)
        self.ride.refresh_from_db()
        self.assertEqual(self.ride.available_seats, 4)

    def test_release_is_capped_at_total_seats(self):
        self.service.reserve(self.ride.id, 2)
        self.service.release(self.ride.id, 2)
        self.service.release(self.ride.id, 2)
        self.ride.refresh_from_db()
        self.assertEqual(self.ride.available_seats, 4)

    def test_release_missing_ride(self):
        with self.assertRaises(NotFound):
            self.service.release(999999, 1)
