from .errors import BookingError, ValidationError, ScopeError, StorageError
