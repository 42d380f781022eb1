"""
Health Router - Health checks and configuration status endpoints
"""

from fastapi import APIRouter
from typing import Dict, Any

from invoice_dashboard.settings import get_settings

router = APIRouter()


@router.get("/ready")
async def health_check_ready() -> Dict[str, Any]:
    """
    Kubernetes readiness probe.

    Returns ready=True once the backend API URL is configured.
    """
    cfg = get_settings()
    api_url_configured = cfg.backend.url is not None

    return {
        "ready": api_url_configured,
        "details": {
            "env": cfg.env,
            "api_url_configured": api_url_configured,
            "verify_ssl": cfg.verify_ssl,
        }
    }
