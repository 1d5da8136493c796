"""FastAPI routes for the Orders domain."""

from fastapi import APIRouter, Depends, Request

from orders.api.schemas import CreateOrderRequest, ErrorResponse, OrderResponse
from orders.order.admission import OrderAdmission
from orders.order.queries import OrderQueries

_ERROR_RESPONSES = {
    400: {"model": ErrorResponse},
    404: {"model": ErrorResponse},
    422: {"model": ErrorResponse},
    500: {"model": ErrorResponse},
    502: {"model": ErrorResponse},
    503: {"model": ErrorResponse},
}


def get_admission(request: Request) -> OrderAdmission:
    return OrderAdmission(request.app.state.settings, request.app.state.services)


def get_queries(request: Request) -> OrderQueries:
    return OrderQueries(request.app.state.settings, request.app.state.services)


# ---------------------------------------------------------------------------
# Order Router
# ---------------------------------------------------------------------------
order_router = APIRouter(prefix="/orders", tags=["orders"], responses=_ERROR_RESPONSES)


@order_router.post(
    "/",
    status_code=201,
    response_model=OrderResponse,
    openapi_extra={"requestBody": {"content": {"application/json": {"schema": CreateOrderRequest.model_json_schema()}}}},
)
async def create_order(
    request: Request,
    admission: OrderAdmission = Depends(get_admission),
) -> OrderResponse:
    """Admit a new order.

    The body is handed to the admission pipeline untouched, so an empty or
    malformed body is rejected by the pipeline rather than by FastAPI.
    """
    body = await request.body()
    order = admission.create_order(body)
    return OrderResponse(**order.to_record())


@order_router.get("/", response_model=list[OrderResponse])
async def list_orders(queries: OrderQueries = Depends(get_queries)) -> list[OrderResponse]:
    return [OrderResponse(**order.to_record()) for order in queries.list_orders()]


@order_router.get("/{order_id}", response_model=OrderResponse)
async def get_order(order_id: str, queries: OrderQueries = Depends(get_queries)) -> OrderResponse:
    order = queries.get_order(order_id)
    return OrderResponse(**order.to_record())
