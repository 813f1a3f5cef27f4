"""Ride request views for customers and admins"""
from rest_framework import status, viewsets
from rest_framework.decorators import action
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response
from rest_framework_simplejwt.authentication import JWTAuthentication

from ..permissions import IsPlatformAdmin
from ..serializers import RideRequestCreateSerializer, RideRequestSerializer, RideRequestStatusSerializer
from ..services import RideRequestService


class RideRequestViewSet(viewsets.ViewSet):
    authentication_classes = [JWTAuthentication]
    permission_classes = [IsAuthenticated]

    def create(self, request):
        serializer = RideRequestCreateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        ride_request = RideRequestService().create_request(request.user, **serializer.validated_data)
        return Response(RideRequestSerializer(ride_request).data, status=status.HTTP_201_CREATED)

    @action(detail=False, methods=['get'], url_path='my-requests')
    def my_requests(self, request):
        requests = RideRequestService().get_user_requests(request.user)
        return Response(RideRequestSerializer(requests, many=True).data)


class AdminRideRequestViewSet(viewsets.ViewSet):
    authentication_classes = [JWTAuthentication]
    lookup_value_regex = r'\d+'
    permission_classes = [IsPlatformAdmin]

    def list(self, request):
        requests = RideRequestService().list_requests(status=request.query_params.get('status'))
        return Response(RideRequestSerializer(requests, many=True).data)

    @action(detail=True, methods=['patch'], url_path='status')
    def update_status(self, request, pk=None):
        serializer = RideRequestStatusSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        ride_request = RideRequestService().update_status(pk, request.user, serializer.validated_data['status'])
        return Response(RideRequestSerializer(ride_request).data)


__all__ = ['RideRequestViewSet', 'AdminRideRequestViewSet']
