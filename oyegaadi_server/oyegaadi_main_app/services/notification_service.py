"""Notification service for lifecycle emails"""
import logging

from django.conf import settings
from django.core.mail import send_mail
from django.db import transaction

logger = logging.getLogger(__name__)


def _display_name(user):
    profile = getattr(user, 'profile', None)
    if profile is not None and profile.full_name:
        return profile.full_name
    return user.get_full_name() or user.username


def _route(ride):
    return f"{ride.from_location} to {ride.to_location} on {ride.departure_date:%d %b %Y %H:%M}"


class NotificationService:
    """Fire-and-forget emails.

    Every ``notify_*`` method only schedules delivery for after the current
    transaction commits. A failed delivery is logged and never reaches the
    caller, so it cannot roll back the transition that triggered it.
    """

    def _send(self, user, subject, body):
        if not user.email:
            logger.debug("Skipping '%s' for user %s: no email address", subject, user.pk)
            return False
        try:
            send_mail(subject, body, settings.DEFAULT_FROM_EMAIL, [user.email], fail_silently=False)
        except Exception:
            logger.exception("Failed to send '%s' to user %s", subject, user.pk)
            return False
        logger.info("Sent '%s' to user %s", subject, user.pk)
        return True

    def _schedule(self, user, subject, body):
        transaction.on_commit(lambda: self._send(user, subject, body))

    def notify_ride_published(self, ride):
        self._schedule(
            ride.driver,
            "Your ride has been published",
            f"Hello {_display_name(ride.driver)},\n\n"
            f"Your ride from {_route(ride)} is now live with "
            f"{ride.available_seats} seat(s) at {ride.price} per seat.",
        )

    def notify_booking_created(self, booking):
        ride = booking.ride
        self._schedule(
            ride.driver,
            "New booking request",
            f"Hello {_display_name(ride.driver)},\n\n"
            f"{_display_name(booking.customer)} requested {booking.number_of_seats} seat(s) "
            f"on your ride from {_route(ride)} (booking #{booking.id}).",
        )
        self._schedule(
            booking.customer,
            "Booking request received",
            f"Hello {_display_name(booking.customer)},\n\n"
            f"Your booking #{booking.id} for the ride from {_route(ride)} is waiting for "
            f"the driver's confirmation. Booking fee: {booking.booking_fee}.",
        )

    def notify_booking_confirmed(self, booking):
        ride = booking.ride
        driver_mobile = getattr(getattr(ride.driver, 'profile', None), 'mobile_number', '')
        self._schedule(
            booking.customer,
            "Booking confirmed",
            f"Hello {_display_name(booking.customer)},\n\n"
            f"{_display_name(ride.driver)} confirmed booking #{booking.id} for the ride from "
            f"{_route(ride)}. Vehicle: {ride.vehicle_type} {ride.vehicle_number}. "
            f"Driver mobile: {driver_mobile}.",
        )
        self._schedule(
            ride.driver,
            "Booking confirmed",
            f"Hello {_display_name(ride.driver)},\n\n"
            f"You confirmed booking #{booking.id} by {_display_name(booking.customer)}.",
        )

    def notify_booking_cancelled(self, booking, cancelled_by_role):
        ride = booking.ride
        for recipient in (ride.driver, booking.customer):
            self._schedule(
                recipient,
                "Booking cancelled",
                f"Hello {_display_name(recipient)},\n\n"
                f"Booking #{booking.id} for the ride from {_route(ride)} was cancelled "
                f"by the {cancelled_by_role}. Reason: {booking.cancellation_reason}",
            )

    def notify_booking_completed(self, booking):
        ride = booking.ride
        for recipient in (ride.driver, booking.customer):
            self._schedule(
                recipient,
                "Ride completed",
                f"Hello {_display_name(recipient)},\n\n"
                f"The ride from {_route(ride)} (booking #{booking.id}) is complete. "
                f"You can now rate your trip.",
            )

    def notify_ride_cancelled(self, ride, bookings):
        for booking in bookings:
            self._schedule(
                booking.customer,
                "Your ride was cancelled",
                f"Hello {_display_name(booking.customer)},\n\n"
                f"The ride from {_route(ride)} was cancelled. "
                f"Reason: {ride.cancellation_reason}",
            )

    def notify_ride_cancelled_for_driver(self, ride, actor):
        """Tell the driver their ride was cancelled by someone else (an admin)"""
        self._schedule(
            ride.driver,
            "Your ride was cancelled",
            f"Hello {_display_name(ride.driver)},\n\n"
            f"Your ride from {_route(ride)} was cancelled by {_display_name(actor)}. "
            f"Reason: {ride.cancellation_reason}",
        )

    def notify_user_registered(self, user):
        self._schedule(
            user,
            "Welcome to OyeGaadi - Registration Successful",
            f"Hello {_display_name(user)},\n\n"
            f"Thank you for registering with OyeGaadi. Your account has been created successfully. "
            f"You can now search and book rides, or publish your own rides if you are a driver.",
        )

    def notify_ride_request_received(self, ride_request):
        self._schedule(
            ride_request.user,
            "Ride request received",
            f"Hello {_display_name(ride_request.user)},\n\n"
            f"We received your request for a ride from {ride_request.from_location} to "
            f"{ride_request.to_location} on {ride_request.preferred_date:%d %b %Y}. "
            f"Our team will contact you soon.",
        )

    def notify_kyc_submitted(self, kyc):
        self._schedule(
            kyc.user,
            "KYC documents received",
            f"Hello {_display_name(kyc.user)},\n\n"
            f"We received your {kyc.document_type} and will review it shortly.",
        )

    def notify_kyc_approved(self, kyc):
        self._schedule(
            kyc.user,
            "KYC approved",
            f"Hello {_display_name(kyc.user)},\n\nYour identity verification was approved.",
        )

    def notify_kyc_rejected(self, kyc):
        remarks = kyc.remarks or 'Please review and resubmit your documents.'
        self._schedule(
            kyc.user,
            "KYC rejected",
            f"Hello {_display_name(kyc.user)},\n\n"
            f"Your identity verification was rejected. {remarks}",
        )
