"""Tests for settings service"""

from django.test import TestCase, override_settings

from ..exceptions import ValidationError
from ..services import SettingsService


class SettingsServiceTest(TestCase):
    def setUp(self):
        self.service = SettingsService()

    @override_settings(DEFAULT_BOOKING_FEE=200)
    def test_default_fee_when_unset(self):
        self.assertEqual(self.service.get_booking_fee_setting(), {'enabled': True, 'amount': 200})
        self.assertEqual(self.service.get_booking_fee(), 200)

    def test_update_fee(self):
        self.service.update_booking_fee_setting(True, 150)
        self.assertEqual(self.service.get_booking_fee_setting(), {'enabled': True, 'amount': 150})
        self.assertEqual(self.service.get_booking_fee(), 150)

    def test_disabled_fee_is_zero(self):
        self.service.update_booking_fee_setting(False, 150)
        self.assertEqual(self.service.get_booking_fee(), 0)

    def test_update_validates_values(self):
        with self.assertRaises(ValidationError) as ctx:
            self.service.update_booking_fee_setting('yes', -5)
        self.assertEqual(set(ctx.exception.errors), {'enabled', 'amount'})
