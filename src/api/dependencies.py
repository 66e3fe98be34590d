"""FastAPI dependencies for the tip board components."""

from fastapi import HTTPException, Request, status

from src.services.subscription_ledger import SubscriptionLedger
from src.services.tip_rotation import TipRotationController


def _component(request: Request, name: str):
    component = getattr(request.app.state, name, None)
    if component is None:
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail="Tip board is not running",
        )
    return component


def get_rotation_controller(request: Request) -> TipRotationController:
    """
    FastAPI dependency returning the app's tip rotation controller.

    Raises:
        HTTPException: 503 if the application lifespan has not set it up
    """
    return _component(request, "rotation_controller")


def get_subscription_ledger(request: Request) -> SubscriptionLedger:
    """
    FastAPI dependency returning the app's subscription ledger.

    Raises:
        HTTPException: 503 if the application lifespan has not set it up
    """
    return _component(request, "subscription_ledger")
