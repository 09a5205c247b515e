"""Sync endpoints between Shopify and FinerWorks."""

import logging
from typing import Any

from fastapi import APIRouter, Depends, Header, Request, Response, status
from fastapi.responses import JSONResponse, PlainTextResponse

from fulfillment_bridge.exceptions import BridgeError
from fulfillment_bridge.service import SyncService

logger = logging.getLogger(__name__)

router = APIRouter(tags=["sync"])

LIVENESS_MESSAGE = "Shopify <-> FinerWorks middleware is running securely."


def get_sync_service(request: Request) -> SyncService:
    """Resolve the sync service created by the application lifespan."""
    return request.app.state.sync_service


@router.get("/", response_class=PlainTextResponse, summary="Liveness check")
async def root() -> str:
    return LIVENESS_MESSAGE


@router.get(
    "/sync-products",
    summary="Sync products from FinerWorks to Shopify",
    description="Pulls every FinerWorks product and creates it in Shopify.",
)
async def sync_products(service: SyncService = Depends(get_sync_service)) -> Any:
    try:
        synced = await service.sync_products()
    except BridgeError as e:
        logger.error(f"Error syncing products: {e.detail}")
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"error": e.message},
        )
    return {"message": "Products synced from FinerWorks -> Shopify", "synced": synced}


@router.post(
    "/shopify-order-created",
    summary="Receive Shopify order webhooks",
    description="Verifies the Shopify signature and submits the order to FinerWorks.",
)
async def shopify_order_created(
    request: Request,
    x_shopify_hmac_sha256: str | None = Header(
        default=None,
        alias="X-Shopify-Hmac-Sha256",
        description="Base64 HMAC-SHA256 of the raw request body",
    ),
    service: SyncService = Depends(get_sync_service),
) -> Response:
    # Raw body: the signature covers the bytes exactly as sent
    body = await request.body()
    try:
        await service.handle_order_created(body, x_shopify_hmac_sha256)
    except BridgeError as e:
        if e.status_code >= 500:
            logger.error(f"Error sending to FinerWorks: {e.detail}")
        return Response(status_code=e.status_code)
    return Response(status_code=status.HTTP_200_OK)


@router.post(
    "/finerworks-update",
    summary="Receive FinerWorks tracking updates",
    description="Creates a Shopify fulfillment carrying the tracking number.",
)
async def finerworks_update(
    request: Request,
    service: SyncService = Depends(get_sync_service),
) -> Response:
    body = await request.body()
    try:
        await service.handle_tracking_update(body)
    except BridgeError as e:
        logger.error(f"Error updating Shopify: {e.detail}")
        return Response(status_code=e.status_code)
    return Response(status_code=status.HTTP_200_OK)


@router.get(
    "/test-finerworks",
    summary="FinerWorks connectivity check",
    description="Fetches product details for the configured diagnostic SKU.",
)
async def test_finerworks(service: SyncService = Depends(get_sync_service)) -> Any:
    try:
        return await service.test_finerworks()
    except BridgeError as e:
        logger.error(f"Test error: {e.detail}")
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"error": e.message},
        )
