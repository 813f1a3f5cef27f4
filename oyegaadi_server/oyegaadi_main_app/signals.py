from django.db.models.signals import post_save
from django.dispatch import receiver
import logging

from .models import Rating

logger = logging.getLogger(__name__)

@receiver(post_save, sender=Rating)
def update_average_rating_on_rating(sender, instance, created, **kwargs):
    """Auto-update cached average rating when a rating is created"""
    if not created:
        return

    from .services.rating_service import RatingService
    average = RatingService().recalculate_average_rating(instance.to_user_id)
    logger.debug(f'[SIGNAL] Rating {instance.id} saved: user {instance.to_user_id} average now {average}')
