"""
customers/models.py -- Domain dataclass for the customer record.

A pure data container with zero logic. Field rules live in core/validation.py;
persistence lives in customers/store.py.
"""

from dataclasses import dataclass
from typing import Optional


@dataclass
class Customer:
    """A customer profile.

    contact is a phone number kept as a string of ASCII digits, at least ten
    long, so leading zeros survive.

    id is None before the record is written to the database. Fields are
    Optional only because request input is validated after it is mapped here.
    """

    name: Optional[str] = None
    contact: Optional[str] = None
    city: Optional[str] = None
    email: Optional[str] = None
    id: Optional[int] = None
