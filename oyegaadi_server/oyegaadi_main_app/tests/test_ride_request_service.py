"""Tests for ride request service"""
from datetime import timedelta

from django.core import mail
from django.test import TestCase
from django.utils import timezone

from ..exceptions import NotFound, PermissionDenied, ValidationError
from ..services import RideRequestService
from ..utils.constants import RideRequestStatus, UserRole
from .helpers import make_user


def request_details(**overrides):
    details = {
        'from_location': 'Delhi',
        'to_location': 'Manali',
        'preferred_date': timezone.localdate() + timedelta(days=5),
        'preferred_time': '08:00',
        'number_of_passengers': 3,
        'contact_number': '9876543210',
        'additional_notes': 'Prefer an SUV',
    }
    details.update(overrides)
    return details


class RideRequestServiceTest(TestCase):
    def setUp(self):
        self.customer = make_user('customer')
        self.other = make_user('other')
        self.admin = make_user('admin', role=UserRole.ADMIN)
        self.service = RideRequestService()

    def test_create_request_is_pending(self):
        with self.captureOnCommitCallbacks(execute=True):
            ride_request = self.service.create_request(self.customer, **request_details())

        self.assertEqual(ride_request.status, RideRequestStatus.PENDING)
        self.assertEqual(ride_request.user, self.customer)
        self.assertEqual(ride_request.number_of_passengers, 3)
        self.assertEqual([m.subject for m in mail.outbox], ['Ride request received'])

    def test_passengers_default_to_one(self):
        details = request_details()
        del details['number_of_passengers']
        ride_request = self.service.create_request(self.customer, **details)
        self.assertEqual(ride_request.number_of_passengers, 1)

    def test_required_fields(self):
        with self.assertRaises(ValidationError) as ctx:
            self.service.create_request(self.customer, from_location='  ', number_of_passengers=2)
        self.assertEqual(
            set(ctx.exception.errors),
            {'from_location', 'to_location', 'preferred_date', 'contact_number'},
        )

    def test_rejects_bad_values(self):
        details = request_details(
            preferred_date=timezone.localdate() - timedelta(days=1),
            number_of_passengers=9,
            max_budget=-10,
            contact_number='12345',
        )
        with self.assertRaises(ValidationError) as ctx:
            self.service.create_request(self.customer, **details)
        self.assertEqual(
            set(ctx.exception.errors),
            {'preferred_date', 'number_of_passengers', 'max_budget', 'contact_number'},
        )

    def test_suspended_user_cannot_request(self):
        suspended = make_user('suspended', is_suspended=True)
        with self.assertRaises(PermissionDenied):
            self.service.create_request(suspended, **request_details())

    def test_user_sees_only_own_requests(self):
        mine = self.service.create_request(self.customer, **request_details())
        self.service.create_request(self.other, **request_details(to_location='Shimla'))

        self.assertEqual(list(self.service.get_user_requests(self.customer)), [mine])
        self.assertEqual(self.service.list_requests().count(), 2)
        self.assertEqual(self.service.list_requests(status=RideRequestStatus.CLOSED).count(), 0)

    def test_admin_updates_status(self):
        ride_request = self.service.create_request(self.customer, **request_details())

        updated = self.service.update_status(ride_request.id, self.admin, RideRequestStatus.RESPONDED)

        self.assertEqual(updated.status, RideRequestStatus.RESPONDED)
        ride_request.refresh_from_db()
        self.assertEqual(ride_request.status, RideRequestStatus.RESPONDED)

    def test_update_status_checks(self):
        ride_request = self.service.create_request(self.customer, **request_details())

        with self.assertRaises(PermissionDenied):
            self.service.update_status(ride_request.id, self.customer, RideRequestStatus.CLOSED)
        with self.assertRaises(ValidationError) as ctx:
            self.service.update_status(ride_request.id, self.admin, 'archived')
        self.assertEqual(ctx.exception.message, 'Invalid status value')
        with self.assertRaises(NotFound):
            self.service.update_status(999999, self.admin, RideRequestStatus.CLOSED)
