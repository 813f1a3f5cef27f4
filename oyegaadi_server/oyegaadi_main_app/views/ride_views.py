"""Ride-related views using RideService"""
from datetime import datetime

from rest_framework import status, viewsets
from rest_framework.decorators import action
from rest_framework.permissions import AllowAny, IsAuthenticated
from rest_framework.response import Response
from rest_framework_simplejwt.authentication import JWTAuthentication

from ..exceptions import ValidationError
from ..permissions import IsDriver
from ..serializers import RideCancelSerializer, RidePublishSerializer, RideSerializer
from ..services import RideService


class RideViewSet(viewsets.ViewSet):
    authentication_classes = [JWTAuthentication]
    lookup_value_regex = r'\d+'

    def get_permissions(self):
        if self.action in ['retrieve', 'search', 'popular']:
            return [AllowAny()]
        if self.action in ['create', 'my_rides', 'mark_completed']:
            return [IsDriver()]
        return [IsAuthenticated()]

    def create(self, request):
        serializer = RidePublishSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        ride = RideService().publish_ride(request.user, **serializer.validated_data)
        return Response(RideSerializer(ride).data, status=status.HTTP_201_CREATED)

    def retrieve(self, request, pk=None):
        ride = RideService().get_ride(pk)
        return Response(RideSerializer(ride).data)

    @action(detail=False, methods=['get'], url_path='search')
    def search(self, request):
        params = request.query_params
        date = params.get('date')
        if date:
            try:
                date = datetime.strptime(date, '%Y-%m-%d').date()
            except ValueError:
                raise ValidationError({'date': ['Date must be in YYYY-MM-DD format']})

        rides = RideService().search_rides(
            params.get('from'),
            params.get('to'),
            date=date,
            ride_type=params.get('type'),
        )
        return Response(RideSerializer(rides, many=True).data)

    @action(detail=False, methods=['get'], url_path='popular')
    def popular(self, request):
        rides = RideService().get_popular_rides()
        return Response(RideSerializer(rides, many=True).data)

    @action(detail=False, methods=['get'], url_path='my-rides')
    def my_rides(self, request):
        rides = RideService().get_driver_rides(request.user)
        return Response(RideSerializer(rides, many=True).data)

    @action(detail=True, methods=['patch'], url_path='cancel')
    def cancel(self, request, pk=None):
        serializer = RideCancelSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        ride = RideService().cancel_ride(pk, request.user, serializer.validated_data.get('reason'))
        return Response({
            'message': 'Ride cancelled successfully',
            'ride': RideSerializer(ride).data,
        })

    @action(detail=True, methods=['post'], url_path='mark-completed')
    def mark_completed(self, request, pk=None):
        ride, completed_bookings = RideService().complete_ride(pk, request.user)
        return Response({
            'message': 'Ride marked as completed',
            'completed_bookings': completed_bookings,
            'ride': RideSerializer(ride).data,
        })


__all__ = ['RideViewSet']
