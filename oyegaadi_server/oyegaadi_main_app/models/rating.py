"""Rating-related models"""
from django.db import models
from django.db.models import Q
from django.contrib.auth.models import User


class Rating(models.Model):
    from_user = models.ForeignKey(User, on_delete=models.CASCADE, related_name='ratings_given')
    to_user = models.ForeignKey(User, on_delete=models.CASCADE, related_name='ratings_received')
    booking = models.ForeignKey('Booking', on_delete=models.CASCADE, related_name='ratings')
    rating = models.PositiveSmallIntegerField()
    review = models.TextField(blank=True, null=True)
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        indexes = [models.Index(fields=['to_user', '-created_at'], name='rating_to_user_created_idx')]
        constraints = [
            models.UniqueConstraint(fields=['from_user', 'booking'], name='rating_one_per_rater_booking'),
            models.CheckConstraint(condition=Q(rating__gte=1) & Q(rating__lte=5), name='rating_in_range'),
        ]

    def __str__(self):
        return f"Rating {self.id} for Booking {self.booking_id}"
