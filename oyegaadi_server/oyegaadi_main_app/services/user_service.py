"""User service - account registration"""
import logging

from django.contrib.auth import password_validation
from django.contrib.auth.models import User
from django.core.exceptions import ValidationError as DjangoValidationError
from django.core.validators import validate_email
from django.db import IntegrityError, transaction

from ..exceptions import ValidationError
from ..models import Profile
from ..utils.constants import UserRole
from .notification_service import NotificationService

logger = logging.getLogger(__name__)

REQUIRED_FIELDS = {
    'username': 'Username is required',
    'password': 'Password is required',
    'email': 'Email is required',
    'mobile_number': 'Mobile number is required',
    'full_name': 'Full name is required',
    'role': 'Role is required',
}
# Admins are created through the Django admin, never by self-registration
REGISTRATION_ROLES = (UserRole.CUSTOMER, UserRole.DRIVER)


class UserService:

    def __init__(self, notifications=None):
        self.notifications = notifications or NotificationService()

    @transaction.atomic
    def register_user(self, **data):
        """
        Create a User with its Profile and send the welcome email.

        Raises:
            ValidationError: missing or malformed field, weak password, or a
                username, email or mobile number that is already registered
        """
        fields = {name: (data.get(name) or '').strip() for name in REQUIRED_FIELDS if name != 'password'}
        fields['password'] = data.get('password') or ''

        errors = {name: [message] for name, message in REQUIRED_FIELDS.items() if not fields[name]}
        if errors:
            raise ValidationError(errors)
        self._validate(fields)

        try:
            with transaction.atomic():
                user = User.objects.create_user(fields['username'], email=fields['email'],
                                                password=fields['password'])
                Profile.objects.create(
                    user=user,
                    mobile_number=fields['mobile_number'],
                    full_name=fields['full_name'],
                    role=fields['role'],
                )
        except IntegrityError:
            # Lost a race against a concurrent registration with the same details
            raise ValidationError({'username': ['Username or mobile number already registered']})

        logger.info("User %s registered as %s", user.id, fields['role'])
        self.notifications.notify_user_registered(user)
        return user

    def _validate(self, fields):
        errors = {}
        try:
            validate_email(fields['email'])
        except DjangoValidationError:
            errors['email'] = ['Invalid email format']
        if fields['role'] not in REGISTRATION_ROLES:
            errors['role'] = ["Invalid role. Must be 'driver' or 'customer'"]

        if User.objects.filter(username__iexact=fields['username']).exists():
            errors['username'] = ['Username already taken']
        if 'email' not in errors and User.objects.filter(email__iexact=fields['email']).exists():
            errors['email'] = ['Email address already registered']
        if Profile.objects.filter(mobile_number=fields['mobile_number']).exists():
            errors['mobile_number'] = ['Mobile number already registered']

        try:
            password_validation.validate_password(
                fields['password'], User(username=fields['username'], email=fields['email'])
            )
        except DjangoValidationError as exc:
            errors['password'] = list(exc.messages)

        if errors:
            raise ValidationError(errors)
