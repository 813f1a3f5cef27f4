"""Settings service - admin-editable runtime settings"""
import logging

from django.conf import settings

from ..exceptions import ValidationError
from ..models import AppSetting
from ..utils.constants import SettingKeys

logger = logging.getLogger(__name__)


class SettingsService:

    def _default_booking_fee(self):
        return {'enabled': True, 'amount': settings.DEFAULT_BOOKING_FEE}

    def get_booking_fee_setting(self):
        setting = AppSetting.objects.filter(key=SettingKeys.BOOKING_FEE).first()
        if setting is None or not isinstance(setting.value, dict):
            return self._default_booking_fee()
        return {
            'enabled': bool(setting.value.get('enabled', False)),
            'amount': int(setting.value.get('amount') or 0),
        }

    def get_booking_fee(self):
        """Fee to snapshot onto a new booking: the amount when enabled, else 0."""
        fee = self.get_booking_fee_setting()
        return fee['amount'] if fee['enabled'] else 0

    def update_booking_fee_setting(self, enabled, amount=None):
        errors = {}
        if not isinstance(enabled, bool):
            errors['enabled'] = ['Enabled must be a boolean']
        if amount is not None and (isinstance(amount, bool) or not isinstance(amount, int) or amount < 0):
            errors['amount'] = ['Amount must be a non-negative integer']
        if errors:
            raise ValidationError(errors)

        value = {'enabled': enabled, 'amount': amount or 0}
        AppSetting.objects.update_or_create(key=SettingKeys.BOOKING_FEE, defaults={'value': value})
        logger.info("Booking fee setting updated: %s", value)
        return value
