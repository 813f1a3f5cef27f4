"""Lifecycle errors raised by the service layer.

Every error carries an HTTP status and a stable ``code`` so the REST layer can
render it without knowing which service raised it (see
``utils.exception_handler``).
"""


class RideShareError(Exception):
    """Base class for all lifecycle failures."""
    status_code = 400
    code = 'error'
    default_message = 'Request could not be processed'

    def __init__(self, message=None):
        self.message = message or self.default_message
        super().__init__(self.message)


class NotFound(RideShareError):
    """Raised when a ride, booking, rating or KYC record does not exist."""
    status_code = 404
    code = 'not_found'
    default_message = 'Not found'


class InvalidState(RideShareError):
    """Raised when a transition is not legal from the current status."""
    status_code = 409
    code = 'invalid_state'
    default_message = 'Operation not allowed in the current state'


class InsufficientCapacity(RideShareError):
    """Raised when the ride does not have enough seats left."""
    status_code = 409
    code = 'insufficient_capacity'
    default_message = 'Seats are no longer available for this ride'


class DuplicateBooking(RideShareError):
    status_code = 409
    code = 'duplicate_booking'
    default_message = 'You have already booked this ride. Check your bookings.'


class DuplicateRating(RideShareError):
    status_code = 409
    code = 'duplicate_rating'
    default_message = 'You have already rated this booking'


class PermissionDenied(RideShareError):
    status_code = 403
    code = 'permission_denied'
    default_message = 'You are not allowed to perform this action'


class KycRequired(RideShareError):
    status_code = 403
    code = 'kyc_required'
    default_message = 'KYC verification required'


class ValidationError(RideShareError):
    """Malformed input. ``errors`` maps field names to lists of messages."""
    status_code = 400
    code = 'validation_error'
    default_message = 'Validation failed'

    def __init__(self, errors=None, message=None):
        self.errors = errors or {}
        if message is None and len(self.errors) == 1:
            _, messages = next(iter(self.errors.items()))
            message = messages[0] if isinstance(messages, (list, tuple)) else messages
        super().__init__(message)
