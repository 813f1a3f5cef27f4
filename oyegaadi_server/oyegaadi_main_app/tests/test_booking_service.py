"""Tests for booking service"""
from unittest import mock

from django.core import mail
from django.db import connection
from django.test import TestCase, override_settings
from django.test.utils import CaptureQueriesContext

from ..exceptions import (
    DuplicateBooking, InsufficientCapacity, InvalidState, KycRequired, NotFound, PermissionDenied, ValidationError,
)
from ..models import Booking, Ride
from ..services import BookingService
from ..services.booking_service import CancelBooking, CompleteBooking, ConfirmBooking, lock_booking
from ..utils.constants import BookingStatus, RideStatus, UserRole
from .helpers import booked_seats, make_ride, make_user


class BookingServiceTest(TestCase):
    def setUp(self):
        self.driver = make_user('driver', role=UserRole.DRIVER)
        self.customer = make_user('customer')
        self.other_customer = make_user('other')
        self.admin = make_user('admin', role=UserRole.ADMIN)
        self.ride = make_ride(self.driver, total_seats=4)
        self.service = BookingService()

    def assertSeatsConsistent(self, ride):
        ride.refresh_from_db()
        self.assertEqual(ride.available_seats, ride.total_seats - booked_seats(ride))

    def _book(self, customer=None, ride=None, fee=200, seats=None):
        return self.service.create_booking(customer or self.customer, (ride or self.ride).id, fee, seats)

    def test_create_booking_reserves_whole_vehicle(self):
        booking = self._book()

        self.assertEqual(booking.status, BookingStatus.PENDING)
        self.assertEqual(booking.number_of_seats, 4)
        self.assertEqual(booking.booking_fee, 200)
        self.assertFalse(booking.is_paid)
        self.ride.refresh_from_db()
        self.assertEqual(self.ride.available_seats, 0)
        self.assertSeatsConsistent(self.ride)

    def test_second_customer_gets_insufficient_capacity(self):
        self._book()
        with self.assertRaises(InsufficientCapacity):
            self._book(customer=self.other_customer)
        self.assertEqual(Booking.objects.filter(ride=self.ride).count(), 1)

    def test_fee_is_a_snapshot(self):
        booking = self._book(fee=0)
        self.assertEqual(booking.booking_fee, 0)

    @override_settings(FULL_VEHICLE_BOOKING=False)
    def test_partial_booking_when_full_vehicle_disabled(self):
        booking = self._book(seats=2)
        self._book(customer=self.other_customer, seats=2)

        self.assertEqual(booking.number_of_seats, 2)
        self.ride.refresh_from_db()
        self.assertEqual(self.ride.available_seats, 0)
        self.assertSeatsConsistent(self.ride)

    def test_duplicate_booking_rejected(self):
        self._book()
        with self.assertRaises(DuplicateBooking):
            self._book()

    def test_can_book_again_after_cancelling(self):
        booking = self._book()
        self.service.cancel_booking(booking.id, self.customer, 'Plans changed')

        again = self._book()
        self.assertEqual(again.status, BookingStatus.PENDING)
        self.assertSeatsConsistent(self.ride)

    def test_unverified_customer_gets_one_booking(self):
        newbie = make_user('newbie', kyc_verified=False)
        other_ride = make_ride(self.driver, total_seats=2)

        self._book(customer=newbie)
        with self.assertRaises(KycRequired):
            self._book(customer=newbie, ride=other_ride)

    def test_cannot_book_missing_ride(self):
        with self.assertRaises(NotFound):
            self.service.create_booking(self.customer, 999999, 200)

    def test_cannot_book_inactive_ride(self):
        Ride.objects.filter(id=self.ride.id).update(status=RideStatus.CANCELLED)
        with self.assertRaises(InvalidState):
            self._book()

    def test_driver_cannot_book_own_ride(self):
        with self.assertRaises(PermissionDenied):
            self._book(customer=self.driver)

    def test_suspended_customer_cannot_book(self):
        suspended = make_user('suspended', is_suspended=True)
        with self.assertRaises(PermissionDenied):
            self._book(customer=suspended)

    def test_confirm_by_driver(self):
        booking = self._book()
        booking = self.service.confirm_booking(booking.id, self.driver)

        self.assertEqual(booking.status, BookingStatus.CONFIRMED)
        self.assertIsNotNone(booking.confirmed_at)
        self.ride.refresh_from_db()
        self.assertEqual(self.ride.available_seats, 0)

    def test_confirm_by_customer_denied(self):
        booking = self._book()
        with self.assertRaises(PermissionDenied):
            self.service.confirm_booking(booking.id, self.customer)

    def test_confirm_twice_is_invalid_state(self):
        booking = self._book()
        self.service.confirm_booking(booking.id, self.driver)
        with self.assertRaises(InvalidState):
            self.service.confirm_booking(booking.id, self.driver)

    def test_confirm_missing_booking(self):
        with self.assertRaises(NotFound):
            self.service.confirm_booking(999999, self.driver)

    def test_customer_cancel_releases_seats(self):
        booking = self._book()
        booking = self.service.cancel_booking(booking.id, self.customer, 'Found another ride')

        self.assertEqual(booking.status, BookingStatus.CANCELLED)
        self.assertEqual(booking.cancellation_reason, 'Found another ride')
        self.assertEqual(booking.cancelled_by, self.customer)
        self.ride.refresh_from_db()
        self.assertEqual(self.ride.available_seats, 4)
        self.assertSeatsConsistent(self.ride)

    def test_driver_and_admin_can_cancel(self):
        booking = self._book()
        self.service.confirm_booking(booking.id, self.driver)
        self.service.cancel_booking(booking.id, self.driver, 'Vehicle unavailable')

        second = self._book(customer=self.other_customer)
        self.service.cancel_booking(second.id, self.admin, 'Reported as fraud')
        self.assertSeatsConsistent(self.ride)

    def test_cancel_requires_reason(self):
        booking = self._book()
        with self.assertRaises(ValidationError) as ctx:
            self.service.cancel_booking(booking.id, self.customer, '   ')
        self.assertIn('reason', ctx.exception.errors)

        booking.refresh_from_db()
        self.assertEqual(booking.status, BookingStatus.PENDING)

    def test_stranger_cannot_cancel(self):
        booking = self._book()
        with self.assertRaises(PermissionDenied):
            self.service.cancel_booking(booking.id, self.other_customer, 'Not mine')

    def test_cancel_twice_is_invalid_state(self):
        booking = self._book()
        self.service.cancel_booking(booking.id, self.customer, 'Plans changed')
        with self.assertRaises(InvalidState):
            self.service.cancel_booking(booking.id, self.customer, 'Plans changed again')
        self.assertSeatsConsistent(self.ride)

    def test_complete_requires_confirmed(self):
        booking = self._book()
        with self.assertRaises(InvalidState):
            self.service.complete_booking(booking.id, self.driver)

        self.service.confirm_booking(booking.id, self.driver)
        booking = self.service.complete_booking(booking.id, self.driver)
        self.assertEqual(booking.status, BookingStatus.COMPLETED)
        self.assertIsNotNone(booking.completed_at)

    def test_completed_booking_cannot_be_cancelled(self):
        booking = self._book()
        self.service.confirm_booking(booking.id, self.driver)
        self.service.complete_booking(booking.id, self.driver)
        with self.assertRaises(InvalidState):
            self.service.cancel_booking(booking.id, self.customer, 'Too late')
        self.assertSeatsConsistent(self.ride)

    def test_apply_status_update_dispatches_by_command(self):
        booking = self._book()

        booking = self.service.apply_status_update(booking.id, self.driver, ConfirmBooking())
        self.assertEqual(booking.status, BookingStatus.CONFIRMED)
        booking = self.service.apply_status_update(booking.id, self.driver, CompleteBooking())
        self.assertEqual(booking.status, BookingStatus.COMPLETED)

        other = self._book(customer=self.other_customer, ride=make_ride(self.driver, total_seats=2))
        other = self.service.apply_status_update(other.id, self.other_customer, CancelBooking(reason='Sick'))
        self.assertEqual(other.status, BookingStatus.CANCELLED)

    def test_lifecycle_emails_sent_after_commit(self):
        with self.captureOnCommitCallbacks(execute=True):
            booking = self._book()
        self.assertEqual(len(mail.outbox), 2)
        self.assertEqual({m.to[0] for m in mail.outbox}, {'driver@example.com', 'customer@example.com'})

        mail.outbox.clear()
        with self.captureOnCommitCallbacks(execute=True):
            self.service.cancel_booking(booking.id, self.customer, 'Plans changed')
        self.assertEqual(len(mail.outbox), 2)
        self.assertIn('cancelled by the customer', mail.outbox[0].body)

    def test_email_failure_does_not_break_booking(self):
        target = 'oyegaadi_main_app.services.notification_service.send_mail'
        with mock.patch(target, side_effect=ConnectionError('smtp down')) as send_mail:
            with self.captureOnCommitCallbacks(execute=True):
                booking = self._book()

        self.assertTrue(send_mail.called)
        booking.refresh_from_db()
        self.assertEqual(booking.status, BookingStatus.PENDING)

    def test_customer_and_driver_booking_lists(self):
        booking = self._book()
        self.assertEqual(list(self.service.get_customer_bookings(self.customer)), [booking])
        self.assertEqual(list(self.service.get_driver_bookings(self.driver)), [booking])
        self.assertEqual(list(self.service.get_customer_bookings(self.other_customer)), [])

    def test_lock_booking_reads_ride_before_booking(self):
        booking = self._book()
        with CaptureQueriesContext(connection) as ctx:
            locked = lock_booking(booking.id)

        sqls = [query['sql'] for query in ctx.captured_queries]
        ride_at = next(i for i, sql in enumerate(sqls) if f'FROM "{Ride._meta.db_table}"' in sql)
        booking_at = max(i for i, sql in enumerate(sqls) if f'FROM "{Booking._meta.db_table}"' in sql)
        self.assertLess(ride_at, booking_at)
        self.assertEqual(locked.ride, self.ride)
        self.assertEqual(locked.customer, self.customer)

    def test_lock_booking_missing(self):
        with self.assertRaises(NotFound):
            lock_booking(999999)
