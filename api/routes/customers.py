"""
api/routes/customers.py -- Customer CRUD endpoints.

Routes (all require a bearer token from POST /auth/loginUser):
  GET    /customers/GetAllCustomers       -- 200 list, 204 when empty
  POST   /customers/AddCustomer           -- 200 {message}
  POST   /customers/UpdateCustomer        -- 200 {message}; 404 unknown id
  DELETE /customers/DeleteCustomer/{id}   -- 200 {message}; 404 unknown id

Validation failures and duplicate emails answer 400. Store failures propagate
as ApplicationError and are answered 500 by the app-level handler.
"""

from __future__ import annotations

from typing import Optional, Union

from fastapi import APIRouter, Body, Depends, Request, Response

from api.errors import raise_for_failure
from api.models import CustomerRequest, CustomerResponse, MessageResponse
from auth.dependencies import get_current_identity
from customers.service import create_customer, delete_customer, list_customers, update_customer
from customers.store import CustomerStore

router = APIRouter(dependencies=[Depends(get_current_identity)])


def _store(request: Request) -> CustomerStore:
    return request.app.state.customer_store


@router.get(
    "/customers/GetAllCustomers",
    response_model=list[CustomerResponse],
    responses={204: {"description": "No customers on file"}},
)
def get_all_customers(request: Request) -> Union[list[CustomerResponse], Response]:
    customers = raise_for_failure(list_customers(_store(request))).value
    if not customers:
        return Response(status_code=204)
    return [CustomerResponse.from_domain(c) for c in customers]


@router.post("/customers/AddCustomer", response_model=MessageResponse)
def add_customer(request: Request, body: Optional[CustomerRequest] = Body(default=None)) -> MessageResponse:
    candidate = body.to_domain() if body is not None else None
    raise_for_failure(create_customer(_store(request), candidate))
    return MessageResponse(message="Customer created successfully")


@router.post("/customers/UpdateCustomer", response_model=MessageResponse)
def edit_customer(request: Request, body: Optional[CustomerRequest] = Body(default=None)) -> MessageResponse:
    """Overwrite all fields of an existing customer, located by body.id."""
    candidate = body.to_domain() if body is not None else None
    raise_for_failure(update_customer(_store(request), candidate))
    return MessageResponse(message="Customer updated successfully")


@router.delete("/customers/DeleteCustomer/{customer_id}", response_model=MessageResponse)
def remove_customer(request: Request, customer_id: int) -> MessageResponse:
    raise_for_failure(delete_customer(_store(request), customer_id))
    return MessageResponse(message="Customer deleted successfully")
