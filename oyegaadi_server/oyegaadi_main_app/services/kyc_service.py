"""KYC service - identity verification submissions and admin review"""
import logging

from django.db import transaction
from django.utils import timezone

from ..exceptions import NotFound, PermissionDenied, ValidationError
from ..models import KycVerification, Profile
from ..utils.constants import KycStatus, UserRole
from ..utils.role_utils import get_role, is_admin
from .notification_service import NotificationService

logger = logging.getLogger(__name__)

REQUIRED_FIELDS = {
    'document_type': 'Document type is required',
    'document_id': 'Document number is required',
    'document_url': 'Document image is required',
}
OPTIONAL_FIELDS = ('vehicle_type', 'vehicle_number', 'driving_license_url', 'selfie_url')


class KycService:

    def __init__(self, notifications=None):
        self.notifications = notifications or NotificationService()

    @transaction.atomic
    def submit_kyc(self, user, **data):
        if get_role(user) not in (UserRole.CUSTOMER, UserRole.DRIVER):
            raise PermissionDenied("Only customers and drivers can submit KYC documents")

        errors = {field: [message] for field, message in REQUIRED_FIELDS.items() if not data.get(field)}
        if errors:
            raise ValidationError(errors)

        fields = {name: data[name] for name in (*REQUIRED_FIELDS, *OPTIONAL_FIELDS) if data.get(name)}
        kyc = KycVerification.objects.create(user=user, status=KycStatus.PENDING, **fields)
        logger.info("KYC %s submitted by user %s (%s)", kyc.id, user.id, kyc.document_type)
        self.notifications.notify_kyc_submitted(kyc)
        return kyc

    @transaction.atomic
    def review_kyc(self, kyc_id, reviewer, status, remarks=None):
        """Approve or reject a submission; approval marks the user KYC-verified"""
        if not is_admin(reviewer):
            raise PermissionDenied("Only admins can review KYC submissions")
        if status not in dict(KycStatus.CHOICES):
            raise ValidationError({'status': ['Invalid status value']})

        kyc = KycVerification.objects.select_for_update().select_related('user').filter(id=kyc_id).first()
        if kyc is None:
            raise NotFound("KYC verification not found")

        kyc.status = status
        kyc.remarks = remarks
        kyc.reviewed_by = reviewer
        kyc.reviewed_at = timezone.now()
        kyc.save(update_fields=['status', 'remarks', 'reviewed_by', 'reviewed_at', 'updated_at'])

        if status == KycStatus.APPROVED:
            Profile.objects.filter(user=kyc.user).update(is_kyc_verified=True)
            self.notifications.notify_kyc_approved(kyc)
        elif status == KycStatus.REJECTED:
            self.notifications.notify_kyc_rejected(kyc)

        logger.info("KYC %s marked %s by admin %s", kyc.id, status, reviewer.id)
        return kyc

    def get_user_kyc(self, user):
        return KycVerification.objects.filter(user=user)

    def list_kyc(self, status=None):
        queryset = KycVerification.objects.select_related('user__profile')
        if status:
            queryset = queryset.filter(status=status)
        return queryset
