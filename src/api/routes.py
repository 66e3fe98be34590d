"""API routes for the tip board and subscriptions."""

from fastapi import APIRouter, Depends, status
from fastapi.responses import HTMLResponse
from pydantic import BaseModel

from src.api.dependencies import get_rotation_controller, get_subscription_ledger
from src.api.error_handlers import create_tip_index_error
from src.services.page_renderer import render_page, render_tip_display
from src.services.subscription_ledger import SubscriptionLedger
from src.services.tip_rotation import TipRotationController

router = APIRouter()
page_router = APIRouter()


class TipSelection(BaseModel):
    """Request model for choosing the displayed tip."""
    index: int


class SubscriptionRequest(BaseModel):
    """Request model for subscribing an email address."""
    email: str


@router.get("/tips")
async def get_tips(controller: TipRotationController = Depends(get_rotation_controller)):
    """
    Get the active tips and the one currently displayed.

    Returns:
        Tip list, current index, current tip, loading flag and count
    """
    return controller.state.to_dict()


@router.post("/tips/select")
async def select_tip(
    selection: TipSelection,
    controller: TipRotationController = Depends(get_rotation_controller),
):
    """
    Display a specific tip.

    Args:
        selection: Index of a navigation dot
        controller: Tip rotation controller

    Returns:
        Updated rotation state
    """
    count = controller.state.count
    if not 0 <= selection.index < count:
        return create_tip_index_error(selection.index, count).to_json_response()

    controller.select(selection.index)
    return controller.state.to_dict()


@router.post("/subscriptions", status_code=status.HTTP_201_CREATED)
async def create_subscription(
    request: SubscriptionRequest,
    ledger: SubscriptionLedger = Depends(get_subscription_ledger),
):
    """
    Subscribe an email address to daily tips.

    Rejected addresses raise SubscriptionError, which the registered
    handler turns into a 400 or 409 response.
    """
    message = ledger.submit(request.email)
    state = ledger.state
    return {
        "message": message,
        "subscribers": list(state.emails),
        "count": state.count,
    }


@router.get("/subscriptions")
async def get_subscriptions(ledger: SubscriptionLedger = Depends(get_subscription_ledger)):
    """Get subscribers along with the form's input and status message."""
    return ledger.state.to_dict()


@page_router.get("/", response_class=HTMLResponse)
async def tip_board_page(
    controller: TipRotationController = Depends(get_rotation_controller),
    ledger: SubscriptionLedger = Depends(get_subscription_ledger),
):
    """Serve the tip board page."""
    return HTMLResponse(
        render_page(controller.state, ledger.state, refresh_seconds=controller.interval_seconds)
    )


@page_router.get("/partials/tip-display", response_class=HTMLResponse)
async def tip_display_partial(controller: TipRotationController = Depends(get_rotation_controller)):
    """Serve the tip section alone for in-page refreshes."""
    return HTMLResponse(render_tip_display(controller.state))
