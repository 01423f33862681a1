"""Greeting endpoint router composition."""

from fastapi import APIRouter

from pdf_api.domain import GREETING_MESSAGE, GreetingPayload

from ..openapi import OPENAPI_ERROR_RESPONSES, TAG_GREETING


def api_create_greeting_router() -> APIRouter:
    """Create greeting router used for basic API connectivity checks.

    Returns:
        APIRouter: Router exposing `/api/greeting` endpoint.

    Raises:
        RuntimeError: This factory does not raise runtime errors.
    """

    router = APIRouter(prefix="/api", tags=[TAG_GREETING], responses=OPENAPI_ERROR_RESPONSES)

    @router.get(
        "/greeting",
        summary="Get a greeting message",
        response_model=str,
        responses={
            200: {
                "description": "Greeting message retrieved successfully",
                "content": {"application/json": {"example": GREETING_MESSAGE}},
            }
        },
    )
    def api_greeting_get() -> str:
        """Return the greeting message as a bare JSON string.

        Returns:
            str: Constant greeting text.

        Raises:
            RuntimeError: This handler does not raise runtime errors.
        """

        return GreetingPayload().message

    return router
