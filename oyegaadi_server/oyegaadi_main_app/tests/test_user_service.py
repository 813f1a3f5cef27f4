"""Tests for user registration"""
from django.contrib.auth.models import User
from django.core import mail
from django.test import TestCase

from ..exceptions import ValidationError
from ..services import UserService
from ..utils.constants import UserRole
from .helpers import make_user


def registration(**overrides):
    data = {
        'username': 'asha',
        'password': 'Monsoon-Trip-2026',
        'email': 'asha@example.com',
        'mobile_number': '9812345678',
        'full_name': 'Asha Verma',
        'role': UserRole.DRIVER,
    }
    data.update(overrides)
    return data


class UserServiceTest(TestCase):
    def setUp(self):
        self.service = UserService()

    def test_register_creates_user_and_profile(self):
        with self.captureOnCommitCallbacks(execute=True):
            user = self.service.register_user(**registration())

        self.assertTrue(user.check_password('Monsoon-Trip-2026'))
        self.assertEqual(user.email, 'asha@example.com')
        self.assertEqual(user.profile.role, UserRole.DRIVER)
        self.assertEqual(user.profile.mobile_number, '9812345678')
        self.assertFalse(user.profile.is_kyc_verified)
        self.assertEqual(mail.outbox[0].subject, 'Welcome to OyeGaadi - Registration Successful')
        self.assertEqual(mail.outbox[0].to, ['asha@example.com'])

    def test_missing_fields(self):
        with self.assertRaises(ValidationError) as ctx:
            self.service.register_user(username='asha')
        self.assertEqual(
            set(ctx.exception.errors),
            {'password', 'email', 'mobile_number', 'full_name', 'role'},
        )
        self.assertFalse(User.objects.filter(username='asha').exists())

    def test_invalid_email_and_role(self):
        with self.assertRaises(ValidationError) as ctx:
            self.service.register_user(**registration(email='not-an-email', role=UserRole.ADMIN))
        self.assertEqual(ctx.exception.errors['email'], ['Invalid email format'])
        self.assertEqual(ctx.exception.errors['role'], ["Invalid role. Must be 'driver' or 'customer'"])

    def test_duplicates_rejected(self):
        existing = make_user('asha', email='asha@example.com')
        mobile = existing.profile.mobile_number

        with self.assertRaises(ValidationError) as ctx:
            self.service.register_user(**registration(username='ASHA', mobile_number=mobile))
        self.assertEqual(ctx.exception.errors['username'], ['Username already taken'])
        self.assertEqual(ctx.exception.errors['email'], ['Email address already registered'])
        self.assertEqual(ctx.exception.errors['mobile_number'], ['Mobile number already registered'])
        self.assertEqual(User.objects.count(), 1)

    def test_weak_password_rejected(self):
        with self.assertRaises(ValidationError) as ctx:
            self.service.register_user(**registration(password='123'))
        self.assertIn('password', ctx.exception.errors)
