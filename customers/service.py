"""
customers/service.py -- Customer CRUD use cases.

Each function validates, talks to the store, and returns a result variant
from core/results.py. Route handlers map the variant to a status code.

Update and delete check existence first and then mutate. The two steps are
separate store calls, so a concurrent delete can land between them. When
that happens the write affects zero rows; this is logged and raised as
ApplicationError rather than reported as a normal not-found.
"""

from __future__ import annotations

import logging

from core.errors import ApplicationError, DuplicateKeyError
from core.results import DuplicateKey, NotFound, Ok, Result, ValidationFailed
from core.validation import MAX_RECORD_ID, customer_violation
from customers.models import Customer
from customers.store import CustomerStore

logger = logging.getLogger("customerprofile.customers")

DUPLICATE_EMAIL = "Email already exists."


def _storable_id(customer_id: int | None) -> bool:
    return customer_id is not None and 0 < customer_id <= MAX_RECORD_ID


def list_customers(store: CustomerStore) -> Result:
    customers = store.get_all()
    logger.info("Listed customers. Records fetched: %d", len(customers))
    return Ok(customers)


def create_customer(store: CustomerStore, candidate: Customer | None) -> Result:
    message = customer_violation(candidate)
    if message is not None:
        logger.warning("Validation failed while creating customer: %s", message)
        return ValidationFailed(message)

    try:
        rows = store.insert(candidate)
    except DuplicateKeyError:
        logger.warning("Duplicate email detected while creating customer. Email: %s", candidate.email)
        return DuplicateKey(DUPLICATE_EMAIL)

    if rows <= 0:
        logger.error("Customer creation failed. No rows affected. Email: %s", candidate.email)
        raise ApplicationError("Customer creation failed.")

    logger.info("Customer created successfully. Email: %s", candidate.email)
    return Ok(None)


def update_customer(store: CustomerStore, candidate: Customer | None) -> Result:
    message = customer_violation(candidate)
    if message is not None:
        logger.warning("Validation failed while updating customer: %s", message)
        return ValidationFailed(message)

    if not _storable_id(candidate.id) or not store.exists_by_id(candidate.id):
        logger.warning("Update failed. Customer not found. Id: %s", candidate.id)
        return NotFound(f"Customer with Id {candidate.id} does not exist.")

    try:
        rows = store.update(candidate)
    except DuplicateKeyError:
        logger.warning("Duplicate email detected while updating customer. Id: %s", candidate.id)
        return DuplicateKey(DUPLICATE_EMAIL)

    if rows == 0:
        logger.error("Update affected no rows after existence check. Id: %s", candidate.id)
        raise ApplicationError("Update failed unexpectedly.")

    logger.info("Customer updated successfully. Id: %s", candidate.id)
    return Ok(None)


def delete_customer(store: CustomerStore, customer_id: int) -> Result:
    if not _storable_id(customer_id):
        logger.warning("Invalid customer id provided for delete: %s", customer_id)
        return ValidationFailed("Valid customer Id is required.")

    if not store.exists_by_id(customer_id):
        logger.warning("Delete failed. Customer not found. Id: %s", customer_id)
        return NotFound(f"Customer with Id {customer_id} does not exist.")

    rows = store.delete(customer_id)
    if rows == 0:
        logger.error("Delete affected no rows after existence check. Id: %s", customer_id)
        raise ApplicationError("Customer deletion failed.")

    logger.info("Customer deleted successfully. Id: %s", customer_id)
    return Ok(None)
