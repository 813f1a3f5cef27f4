from django.contrib import admin
from .models import Profile, KycVerification, Ride, Booking, Rating, AppSetting, RideRequest
from .services import KycService, RideRequestService
from .utils.constants import KycStatus, RideRequestStatus

# Customize admin site
admin.site.site_header = "OyeGaadi Administration"
admin.site.site_title = "OyeGaadi Admin"
admin.site.index_title = "Welcome to OyeGaadi Admin Panel"


@admin.register(Profile)
class ProfileAdmin(admin.ModelAdmin):
    list_display = ['id', 'user', 'get_email', 'mobile_number', 'full_name', 'role', 'is_kyc_verified',
                    'is_suspended', 'average_rating', 'created_at']
    list_filter = ['role', 'is_kyc_verified', 'is_suspended', 'created_at']
    search_fields = ['user__username', 'user__email', 'mobile_number', 'full_name']
    ordering = ['-created_at']
    date_hierarchy = 'created_at'
    list_per_page = 50
    readonly_fields = ['average_rating', 'total_ratings', 'created_at', 'updated_at']
    actions = ['suspend_users', 'unsuspend_users']

    def get_email(self, obj):
        return obj.user.email
    get_email.short_description = 'Email'
    get_email.admin_order_field = 'user__email'

    def suspend_users(self, request, queryset):
        updated = queryset.update(is_suspended=True)
        self.message_user(request, f"{updated} users suspended.")
    suspend_users.short_description = "Suspend selected users"

    def unsuspend_users(self, request, queryset):
        updated = queryset.update(is_suspended=False)
        self.message_user(request, f"{updated} users unsuspended.")
    unsuspend_users.short_description = "Unsuspend selected users"


@admin.register(KycVerification)
class KycVerificationAdmin(admin.ModelAdmin):
    list_display = ['id', 'user', 'document_type', 'document_id', 'status', 'created_at', 'reviewed_at']
    list_filter = ['status', 'document_type', 'created_at']
    search_fields = ['user__username', 'user__profile__mobile_number', 'document_id']
    readonly_fields = ['status', 'reviewed_by', 'reviewed_at', 'created_at', 'updated_at']
    actions = ['approve_submissions', 'reject_submissions']

    def _review(self, request, queryset, status):
        service = KycService()
        for kyc in queryset.exclude(status=status):
            service.review_kyc(kyc.id, request.user, status)
        self.message_user(request, f"Selected KYC submissions marked {status}.")

    def approve_submissions(self, request, queryset):
        self._review(request, queryset, KycStatus.APPROVED)
    approve_submissions.short_description = "Approve selected KYC submissions"

    def reject_submissions(self, request, queryset):
        self._review(request, queryset, KycStatus.REJECTED)
    reject_submissions.short_description = "Reject selected KYC submissions"


@admin.register(Ride)
class RideAdmin(admin.ModelAdmin):
    list_display = ['id', 'from_location', 'to_location', 'departure_date', 'driver', 'price',
                    'available_seats', 'total_seats', 'status', 'created_at']
    list_filter = ['status', 'departure_date', 'created_at']
    search_fields = ['from_location', 'to_location', 'vehicle_number', 'driver__username']
    ordering = ['-departure_date', '-created_at']
    date_hierarchy = 'departure_date'
    list_per_page = 50
    # Lifecycle fields only change through RideService
    readonly_fields = ['status', 'available_seats', 'total_seats', 'cancellation_reason', 'completed_at',
                       'cancelled_at', 'created_at', 'updated_at']


@admin.register(Booking)
class BookingAdmin(admin.ModelAdmin):
    list_display = ['id', 'customer', 'ride', 'get_from_location', 'get_to_location', 'number_of_seats',
                    'status', 'booking_fee', 'is_paid', 'created_at']
    list_filter = ['status', 'is_paid', 'created_at']
    search_fields = ['customer__username', 'ride__from_location', 'ride__to_location']
    ordering = ['-created_at']
    list_per_page = 50
    readonly_fields = ['customer', 'ride', 'number_of_seats', 'status', 'booking_fee', 'cancellation_reason',
                       'cancelled_by', 'customer_has_rated', 'driver_has_rated', 'created_at', 'updated_at',
                       'confirmed_at', 'completed_at', 'cancelled_at']

    def get_from_location(self, obj):
        return obj.ride.from_location
    get_from_location.short_description = 'From'

    def get_to_location(self, obj):
        return obj.ride.to_location
    get_to_location.short_description = 'To'


@admin.register(Rating)
class RatingAdmin(admin.ModelAdmin):
    list_display = ['id', 'booking', 'from_user', 'to_user', 'rating', 'created_at']
    list_filter = ['rating', 'created_at']
    search_fields = ['from_user__username', 'to_user__username', 'review']
    readonly_fields = ['from_user', 'to_user', 'booking', 'rating', 'created_at']


@admin.register(RideRequest)
class RideRequestAdmin(admin.ModelAdmin):
    list_display = ['id', 'user', 'from_location', 'to_location', 'preferred_date', 'number_of_passengers',
                    'contact_number', 'status', 'created_at']
    list_filter = ['status', 'preferred_date', 'created_at']
    search_fields = ['user__username', 'from_location', 'to_location', 'contact_number']
    ordering = ['-created_at']
    list_per_page = 50
    readonly_fields = ['user', 'status', 'created_at', 'updated_at']
    actions = ['mark_responded', 'mark_closed']

    def _mark(self, request, queryset, status):
        service = RideRequestService()
        for ride_request in queryset.exclude(status=status):
            service.update_status(ride_request.id, request.user, status)
        self.message_user(request, f"Selected ride requests marked {status}.")

    def mark_responded(self, request, queryset):
        self._mark(request, queryset, RideRequestStatus.RESPONDED)
    mark_responded.short_description = "Mark selected ride requests as responded"

    def mark_closed(self, request, queryset):
        self._mark(request, queryset, RideRequestStatus.CLOSED)
    mark_closed.short_description = "Close selected ride requests"


@admin.register(AppSetting)
class AppSettingAdmin(admin.ModelAdmin):
    list_display = ['key', 'value', 'updated_at']
    search_fields = ['key']
    readonly_fields = ['created_at', 'updated_at']
