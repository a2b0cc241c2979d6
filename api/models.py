"""
API request and response models for the Customer Profile Service.

These Pydantic v2 models define the HTTP transport contract. They are
intentionally separate from the dataclasses in auth/models.py and
customers/models.py, which own the internal domain representation. Route
handlers map between the two.

Request fields are Optional with no constraints on purpose: the ordered rule
sets in core/validation.py decide what is valid, so a missing field yields the
same message as an empty one instead of a generic parser error.
"""

from typing import Optional

from pydantic import BaseModel, ConfigDict

from auth.models import Registration
from customers.models import Customer

# ---------------------------------------------------------------------------
# Request models
# ---------------------------------------------------------------------------


class RegisterRequest(BaseModel):
    """Request body for POST /auth/registerUser."""

    name: Optional[str] = None
    email: Optional[str] = None
    password: Optional[str] = None

    def to_domain(self) -> Registration:
        return Registration(name=self.name, email=self.email, password=self.password)


class LoginRequest(BaseModel):
    """Request body for POST /auth/loginUser."""

    email: Optional[str] = None
    password: Optional[str] = None


class CustomerRequest(BaseModel):
    """Request body for POST /customers/AddCustomer and /customers/UpdateCustomer.

    id is ignored on create and required (as an existing id) on update.
    """

    id: Optional[int] = None
    name: Optional[str] = None
    contact: Optional[str] = None
    city: Optional[str] = None
    email: Optional[str] = None

    def to_domain(self) -> Customer:
        return Customer(id=self.id, name=self.name, contact=self.contact, city=self.city, email=self.email)


# ---------------------------------------------------------------------------
# Response models
# ---------------------------------------------------------------------------


class MessageResponse(BaseModel):
    model_config = ConfigDict(frozen=True)

    message: str


class TokenResponse(BaseModel):
    """Response for a successful login. token is a signed HS256 JWT."""

    model_config = ConfigDict(frozen=True)

    token: str


class CustomerResponse(BaseModel):
    """One row of GET /customers/GetAllCustomers."""

    model_config = ConfigDict(frozen=True)

    id: int
    name: str
    contact: str
    city: str
    email: str

    @classmethod
    def from_domain(cls, customer: Customer) -> "CustomerResponse":
        return cls(
            id=customer.id,
            name=customer.name or "",
            contact=customer.contact or "",
            city=customer.city or "",
            email=customer.email or "",
        )


class ErrorDetail(BaseModel):
    """Machine-readable error payload."""

    model_config = ConfigDict(frozen=True)

    code: str
    message: str
    detail: Optional[str] = None


class ErrorResponse(BaseModel):
    """Top-level error envelope returned on 4xx/5xx responses."""

    model_config = ConfigDict(frozen=True)

    error: ErrorDetail


class HealthResponse(BaseModel):
    """Response for GET /health."""

    model_config = ConfigDict(frozen=True)

    status: str = "healthy"
    version: str
    components: dict[str, str]
