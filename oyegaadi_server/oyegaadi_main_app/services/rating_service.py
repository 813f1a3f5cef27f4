"""Rating service - one rating per party per completed booking"""
import logging

from django.db import IntegrityError, transaction
from django.db.models import Avg, Count
from django.utils import timezone

from ..exceptions import DuplicateRating, InvalidState, NotFound, PermissionDenied, ValidationError
from ..models import Booking, Profile, Rating
from ..utils.constants import BookingStatus, BusinessRules
from ..utils.role_utils import is_suspended
from .booking_service import lock_booking

logger = logging.getLogger(__name__)


def _parse_user_id(value):
    try:
        return int(value)
    except (TypeError, ValueError):
        raise ValidationError({'to_user': ['A valid user id is required']})


class RatingService:

    @transaction.atomic
    def submit_rating(self, from_user, booking_id, rating, review=None, to_user_id=None):
        """
        Rate the other party of a completed booking.

        ``to_user_id`` may be omitted, the other party is derived from the
        booking. The rated user's average is refreshed by the post_save
        signal on Rating, inside this transaction.

        Raises:
            ValidationError: rating out of range, or to_user is not the other party
            NotFound: booking does not exist
            PermissionDenied: from_user is not the booking's customer or driver
            InvalidState: booking is not completed
            DuplicateRating: from_user already rated this booking
        """
        if isinstance(rating, bool) or not isinstance(rating, int) or \
                not BusinessRules.MIN_RATING <= rating <= BusinessRules.MAX_RATING:
            raise ValidationError({'rating': [
                f'Rating must be between {BusinessRules.MIN_RATING} and {BusinessRules.MAX_RATING}'
            ]})
        if is_suspended(from_user):
            raise PermissionDenied("Your account is suspended")

        booking = lock_booking(booking_id)

        if from_user.id == booking.customer_id:
            other_party_id = booking.ride.driver_id
            rated_flag = 'customer_has_rated'
        elif from_user.id == booking.ride.driver_id:
            other_party_id = booking.customer_id
            rated_flag = 'driver_has_rated'
        else:
            raise PermissionDenied("You can only rate your own bookings")

        if to_user_id is not None and _parse_user_id(to_user_id) != other_party_id:
            raise ValidationError({'to_user': ['You can only rate the other party of this booking']})
        if booking.status != BookingStatus.COMPLETED:
            raise InvalidState("Can only rate completed bookings")
        if Rating.objects.filter(from_user=from_user, booking=booking).exists():
            raise DuplicateRating()

        try:
            with transaction.atomic():
                created = Rating.objects.create(
                    from_user=from_user,
                    to_user_id=other_party_id,
                    booking=booking,
                    rating=rating,
                    review=review or None,
                )
        except IntegrityError:
            raise DuplicateRating()

        Booking.objects.filter(id=booking.id).update(**{rated_flag: True, 'updated_at': timezone.now()})
        setattr(booking, rated_flag, True)
        logger.info("User %s rated user %s %s/5 for booking %s", from_user.id, other_party_id, rating, booking.id)
        return created

    def recalculate_average_rating(self, user_id):
        """Store the mean of every rating addressed to the user on their profile"""
        stats = Rating.objects.filter(to_user_id=user_id).aggregate(avg=Avg('rating'), total=Count('id'))
        average = round(stats['avg'], 2) if stats['avg'] else 0.00
        Profile.objects.filter(user_id=user_id).update(average_rating=average, total_ratings=stats['total'])
        return average

    def get_ratings_for_user(self, user_id):
        return Rating.objects.filter(to_user_id=user_id).select_related('from_user__profile').order_by('-created_at')

    def get_ratings_for_booking(self, booking_id):
        if not Booking.objects.filter(id=booking_id).exists():
            raise NotFound("Booking not found")
        return Rating.objects.filter(booking_id=booking_id).select_related('from_user__profile').order_by('created_at')
