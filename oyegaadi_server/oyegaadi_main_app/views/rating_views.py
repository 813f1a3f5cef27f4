"""Rating-related views"""
from rest_framework import status, viewsets
from rest_framework.decorators import action
from rest_framework.permissions import AllowAny, IsAuthenticated
from rest_framework.response import Response
from rest_framework_simplejwt.authentication import JWTAuthentication

from ..serializers import RatingCreateSerializer, RatingSerializer
from ..services import RatingService


class RatingViewSet(viewsets.ViewSet):
    authentication_classes = [JWTAuthentication]

    def get_permissions(self):
        if self.action == 'user_ratings':
            return [AllowAny()]
        return [IsAuthenticated()]

    def create(self, request):
        serializer = RatingCreateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        data = serializer.validated_data

        rating = RatingService().submit_rating(
            request.user,
            data['booking'],
            data['rating'],
            review=data.get('review'),
            to_user_id=data.get('to_user'),
        )
        return Response(RatingSerializer(rating).data, status=status.HTTP_201_CREATED)

    @action(detail=False, methods=['get'], url_path=r'user/(?P<user_id>\d+)')
    def user_ratings(self, request, user_id=None):
        ratings = RatingService().get_ratings_for_user(user_id)
        return Response(RatingSerializer(ratings, many=True).data)

    @action(detail=False, methods=['get'], url_path=r'booking/(?P<booking_id>\d+)')
    def booking_ratings(self, request, booking_id=None):
        ratings = RatingService().get_ratings_for_booking(booking_id)
        return Response(RatingSerializer(ratings, many=True).data)


__all__ = ['RatingViewSet']
