from typing import Dict, Any
import time

from fastapi.concurrency import run_in_threadpool

from src.core.errors import StoreError
from src.utils.logger import get_logger

logger = get_logger(__name__)

async def check_database(store) -> Dict[str, Any]:
    """Check the waitlist database answers"""
    start_time = time.time()
    try:
        await run_in_threadpool(store.ping)
        return {
            "status": "healthy",
            "latency_ms": round((time.time() - start_time) * 1000, 2)
        }
    except StoreError as e:
        logger.error(f"Database health check failed: {str(e)}")
        return {
            "status": "unhealthy",
            "error": "database unavailable"
        }

def check_email(notifier) -> Dict[str, Any]:
    """Report whether the email provider is configured"""
    if getattr(notifier, "api_key", None):
        return {"status": "healthy"}
    return {
        "status": "degraded",
        "error": "email provider not configured"
    }
