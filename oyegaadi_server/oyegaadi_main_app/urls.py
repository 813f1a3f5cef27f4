from django.urls import path, include
from rest_framework import routers

from .views import (
    RideViewSet, BookingViewSet, RatingViewSet,
    KycViewSet, AdminKycViewSet,
    RideRequestViewSet, AdminRideRequestViewSet,
    AdminUserStatsView, AdminKycStatsView, AdminRideStatsView, AdminBookingStatsView,
    BookingFeeView, AdminBookingFeeView, ProfileView, RegisterView,
)

router = routers.DefaultRouter()
router.register(r"rides", RideViewSet, basename="rides")
router.register(r"bookings", BookingViewSet, basename="bookings")
router.register(r"ratings", RatingViewSet, basename="ratings")
router.register(r"kyc", KycViewSet, basename="kyc")
router.register(r"ride-requests", RideRequestViewSet, basename="ride-requests")

# Admin endpoints
router.register(r"admin/kyc", AdminKycViewSet, basename="admin-kyc")
router.register(r"admin/ride-requests", AdminRideRequestViewSet, basename="admin-ride-requests")

urlpatterns = [
    path('', include(router.urls)),
    path('auth/register/', RegisterView.as_view(), name='register'),
    path('profile/', ProfileView.as_view(), name='profile'),
    path('settings/booking-fee/', BookingFeeView.as_view(), name='booking-fee'),
    path('admin/settings/booking-fee/', AdminBookingFeeView.as_view(), name='admin-booking-fee'),
    path('admin/users/stats/', AdminUserStatsView.as_view(), name='admin-user-stats'),
    path('admin/kyc/stats/', AdminKycStatsView.as_view(), name='admin-kyc-stats'),
    path('admin/rides/stats/', AdminRideStatsView.as_view(), name='admin-ride-stats'),
    path('admin/bookings/stats/', AdminBookingStatsView.as_view(), name='admin-booking-stats'),
    path('api-auth/', include('rest_framework.urls')),    # to login in rest_framework
]
