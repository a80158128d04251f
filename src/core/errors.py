class WaitlistError(Exception):
    """Base class for waitlist workflow failures"""

class StoreError(WaitlistError):
    """Persistence failure other than a duplicate email"""

class NotifyError(WaitlistError):
    """Welcome email could not be delivered to the provider"""
