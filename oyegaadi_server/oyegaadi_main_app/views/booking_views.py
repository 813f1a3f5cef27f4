"""Booking-related views using BookingService"""
from rest_framework import status, viewsets
from rest_framework.decorators import action
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response
from rest_framework_simplejwt.authentication import JWTAuthentication

from ..permissions import IsCustomer, IsDriver
from ..serializers import (
    BookingCreateSerializer, BookingSerializer, BookingStatusUpdateSerializer, DriverBookingSerializer,
)
from ..services import BookingService, SettingsService


class BookingViewSet(viewsets.ViewSet):
    authentication_classes = [JWTAuthentication]
    lookup_value_regex = r'\d+'

    def get_permissions(self):
        if self.action in ['create', 'my_bookings']:
            return [IsCustomer()]
        if self.action == 'ride_bookings':
            return [IsDriver()]
        return [IsAuthenticated()]

    def create(self, request):
        serializer = BookingCreateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        booking = BookingService().create_booking(
            request.user,
            serializer.validated_data['ride'],
            booking_fee=SettingsService().get_booking_fee(),
            number_of_seats=serializer.validated_data.get('number_of_seats'),
        )
        return Response(BookingSerializer(booking).data, status=status.HTTP_201_CREATED)

    @action(detail=True, methods=['put'], url_path='status')
    def update_status(self, request, pk=None):
        serializer = BookingStatusUpdateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        booking = BookingService().apply_status_update(pk, request.user, serializer.to_command())
        return Response({
            'message': f'Booking {booking.status} successfully',
            'booking': BookingSerializer(booking).data,
        })

    @action(detail=False, methods=['get'], url_path='my-bookings')
    def my_bookings(self, request):
        bookings = BookingService().get_customer_bookings(request.user)
        return Response(BookingSerializer(bookings, many=True).data)

    @action(detail=False, methods=['get'], url_path='ride-bookings')
    def ride_bookings(self, request):
        bookings = BookingService().get_driver_bookings(request.user)
        return Response(DriverBookingSerializer(bookings, many=True).data)


__all__ = ['BookingViewSet']
