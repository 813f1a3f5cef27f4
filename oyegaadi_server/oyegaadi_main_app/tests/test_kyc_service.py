"""Tests for KYC service"""

from django.core import mail
from django.test import TestCase

from ..exceptions import NotFound, PermissionDenied, ValidationError
from ..services import KycService
from ..utils.constants import KycStatus, UserRole
from .helpers import make_user

DOCUMENTS = {
    'document_type': 'aadhaar',
    'document_id': '1234-5678-9012',
    'document_url': 'https://files.example.com/kyc/aadhaar.jpg',
}


class KycServiceTest(TestCase):
    def setUp(self):
        self.customer = make_user('customer', kyc_verified=False)
        self.admin = make_user('admin', role=UserRole.ADMIN)
        self.service = KycService()

    def test_submit_creates_pending_submission(self):
        with self.captureOnCommitCallbacks(execute=True):
            kyc = self.service.submit_kyc(self.customer, **DOCUMENTS)

        self.assertEqual(kyc.status, KycStatus.PENDING)
        self.assertEqual(kyc.document_id, '1234-5678-9012')
        self.assertEqual(len(mail.outbox), 1)
        self.assertEqual(mail.outbox[0].subject, 'KYC documents received')

    def test_submit_requires_documents(self):
        with self.assertRaises(ValidationError) as ctx:
            self.service.submit_kyc(self.customer, document_type='aadhaar')
        self.assertEqual(set(ctx.exception.errors), {'document_id', 'document_url'})

    def test_admin_cannot_submit(self):
        with self.assertRaises(PermissionDenied):
            self.service.submit_kyc(self.admin, **DOCUMENTS)

    def test_approval_verifies_user(self):
        kyc = self.service.submit_kyc(self.customer, **DOCUMENTS)
        with self.captureOnCommitCallbacks(execute=True):
            kyc = self.service.review_kyc(kyc.id, self.admin, KycStatus.APPROVED)

        self.assertEqual(kyc.status, KycStatus.APPROVED)
        self.assertEqual(kyc.reviewed_by, self.admin)
        self.customer.profile.refresh_from_db()
        self.assertTrue(self.customer.profile.is_kyc_verified)
        self.assertEqual(mail.outbox[-1].subject, 'KYC approved')

    def test_rejection_keeps_user_unverified(self):
        kyc = self.service.submit_kyc(self.customer, **DOCUMENTS)
        with self.captureOnCommitCallbacks(execute=True):
            self.service.review_kyc(kyc.id, self.admin, KycStatus.REJECTED, remarks='Photo is blurry')

        self.customer.profile.refresh_from_db()
        self.assertFalse(self.customer.profile.is_kyc_verified)
        self.assertIn('Photo is blurry', mail.outbox[-1].body)

    def test_only_admin_reviews(self):
        kyc = self.service.submit_kyc(self.customer, **DOCUMENTS)
        with self.assertRaises(PermissionDenied):
            self.service.review_kyc(kyc.id, self.customer, KycStatus.APPROVED)

    def test_review_validates_status_and_id(self):
        kyc = self.service.submit_kyc(self.customer, **DOCUMENTS)
        with self.assertRaises(ValidationError):
            self.service.review_kyc(kyc.id, self.admin, 'maybe')
        with self.assertRaises(NotFound):
            self.service.review_kyc(999999, self.admin, KycStatus.APPROVED)

    def test_list_filters_by_status(self):
        first = self.service.submit_kyc(self.customer, **DOCUMENTS)
        self.service.submit_kyc(self.customer, **DOCUMENTS)
        self.service.review_kyc(first.id, self.admin, KycStatus.REJECTED)

        self.assertEqual(self.service.list_kyc().count(), 2)
        self.assertEqual(list(self.service.list_kyc(status=KycStatus.REJECTED)), [first])
        self.assertEqual(self.service.get_user_kyc(self.customer).count(), 2)
