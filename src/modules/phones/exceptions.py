"""Phone domain exceptions.

Raised by the Service Layer when business rules are violated.
The API layer (Views) catches these and translates them into
``{"error": ...}`` responses.
"""

from __future__ import annotations


class PhoneNotFound(Exception):
    """No phone with the requested id exists in the catalog."""


class NothingToUpdate(Exception):
    """An update request carried no usable field values."""
