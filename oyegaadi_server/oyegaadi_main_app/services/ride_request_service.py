"""Ride request service - customers asking for rides that nobody has published"""
import logging

from django.db import transaction
from django.utils import timezone

from ..exceptions import NotFound, PermissionDenied, ValidationError
from ..models import RideRequest
from ..utils.constants import BusinessRules, RideRequestStatus
from ..utils.role_utils import is_admin, is_suspended
from .notification_service import NotificationService

logger = logging.getLogger(__name__)

REQUEST_FIELDS = (
    'from_location', 'to_location', 'preferred_date', 'preferred_time', 'number_of_passengers',
    'max_budget', 'contact_number', 'additional_notes',
)
REQUIRED_FIELDS = {
    'from_location': 'From location is required',
    'to_location': 'To location is required',
    'preferred_date': 'Preferred date is required',
    'contact_number': 'Valid contact number required',
}


class RideRequestService:

    def __init__(self, notifications=None):
        self.notifications = notifications or NotificationService()

    @transaction.atomic
    def create_request(self, user, **data):
        """Store a pending ride request for the admins to follow up on"""
        if is_suspended(user):
            raise PermissionDenied("Your account is suspended")

        fields = {name: data[name] for name in REQUEST_FIELDS if data.get(name) not in (None, '')}
        for name in ('from_location', 'to_location', 'contact_number'):
            if name in fields:
                fields[name] = fields[name].strip()
        self._validate(fields)

        ride_request = RideRequest.objects.create(user=user, status=RideRequestStatus.PENDING, **fields)
        logger.info("Ride request %s created by user %s: %s", ride_request.id, user.id, ride_request)
        self.notifications.notify_ride_request_received(ride_request)
        return ride_request

    @transaction.atomic
    def update_status(self, request_id, admin, status):
        if not is_admin(admin):
            raise PermissionDenied("Only admins can update ride requests")
        if status not in RideRequestStatus.VALUES:
            raise ValidationError({'status': ['Invalid status value']})

        ride_request = RideRequest.objects.select_for_update(of=('self',)).select_related('user').filter(
            id=request_id
        ).first()
        if ride_request is None:
            raise NotFound("Ride request not found")

        ride_request.status = status
        ride_request.save(update_fields=['status', 'updated_at'])
        logger.info("Ride request %s marked %s by admin %s", ride_request.id, status, admin.id)
        return ride_request

    def get_user_requests(self, user):
        return RideRequest.objects.filter(user=user)

    def list_requests(self, status=None):
        queryset = RideRequest.objects.select_related('user__profile')
        if status:
            queryset = queryset.filter(status=status)
        return queryset

    def _validate(self, fields):
        errors = {name: [message] for name, message in REQUIRED_FIELDS.items() if not fields.get(name)}

        if 'preferred_date' not in errors and fields['preferred_date'] < timezone.localdate():
            errors['preferred_date'] = ['Preferred date cannot be in the past']

        passengers = fields.setdefault('number_of_passengers', 1)
        if not 1 <= passengers <= BusinessRules.RIDE_REQUEST_MAX_PASSENGERS:
            errors['number_of_passengers'] = [
                f'Between 1 and {BusinessRules.RIDE_REQUEST_MAX_PASSENGERS} passengers allowed'
            ]
        if fields.get('max_budget') is not None and fields['max_budget'] < 0:
            errors['max_budget'] = ['Budget must be positive']
        if 'contact_number' not in errors and len(fields['contact_number']) < 10:
            errors['contact_number'] = ['Valid contact number required']

        if errors:
            raise ValidationError(errors)
