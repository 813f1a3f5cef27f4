"""Tests for admin dashboard stats"""
from django.test import TestCase

from ..models import KycVerification
from ..services import BookingService, RideService, StatsService
from ..utils.constants import KycStatus, UserRole
from .helpers import make_ride, make_user


class StatsServiceTest(TestCase):
    def setUp(self):
        self.driver = make_user('driver', role=UserRole.DRIVER)
        self.customer = make_user('customer')
        self.second = make_user('second')
        self.admin = make_user('admin', role=UserRole.ADMIN)
        self.service = StatsService()

    def test_user_stats(self):
        self.assertEqual(self.service.user_stats(), {'total': 4, 'drivers': 1, 'customers': 2, 'admins': 1})

    def test_kyc_stats(self):
        for status in (KycStatus.PENDING, KycStatus.PENDING, KycStatus.APPROVED, KycStatus.REJECTED):
            KycVerification.objects.create(user=self.customer, document_type='aadhaar', document_id='1234',
                                           document_url='https://files.example.com/a.jpg', status=status)

        stats = self.service.kyc_stats()

        self.assertEqual((stats['total'], stats['pending'], stats['approved'], stats['rejected']), (4, 2, 1, 1))
        self.assertEqual(len(stats['recent']), 4)

    def test_ride_and_booking_stats(self):
        rides = RideService()
        bookings = BookingService()
        active = make_ride(self.driver)
        cancelled = make_ride(self.driver)
        completed = make_ride(self.driver)

        pending = bookings.create_booking(self.customer, active.id, 200)
        confirmed = bookings.create_booking(self.second, completed.id, 200)
        bookings.confirm_booking(confirmed.id, self.driver)
        rides.complete_ride(completed.id, self.driver)
        rides.cancel_ride(cancelled.id, self.driver, 'Change of plans')

        self.assertEqual(self.service.ride_stats(), {'total': 3, 'active': 1, 'completed': 1, 'cancelled': 1})

        stats = self.service.booking_stats()
        self.assertEqual(stats['total'], 2)
        self.assertEqual((stats['pending'], stats['completed']), (1, 1))
        self.assertEqual({booking.id for booking in stats['recent']}, {pending.id, confirmed.id})

    def test_recent_is_limited(self):
        for index in range(3):
            KycVerification.objects.create(user=self.customer, document_type='pan', document_id=str(index),
                                           document_url='https://files.example.com/p.jpg')
        stats = StatsService(recent_limit=2).kyc_stats()
        self.assertEqual(stats['total'], 3)
        self.assertEqual(len(stats['recent']), 2)
