from fastapi import Request

from src.infrastructure.email.resend_client import ResendNotifier
from src.infrastructure.storage.waitlist_store import WaitlistStore

def get_waitlist_store(request: Request) -> WaitlistStore:
    """Waitlist store constructed once by create_app"""
    return request.app.state.waitlist_store

def get_notifier(request: Request) -> ResendNotifier:
    """Welcome email notifier constructed once by create_app"""
    return request.app.state.notifier
