# dhakahome/domain/leads.py
from __future__ import annotations

import re
from typing import Any, Mapping

from .types import LeadRequest

EMAIL_RE = re.compile(r"^[A-Za-z0-9._%+-]+@[A-Za-z0-9.-]+\.[A-Za-z]{2,}$")
_PHONE_SEPARATORS = re.compile(r"[\s\-().]|tel:")


def normalize_bd_phone(phone: str) -> str:
    """Bangladesh mobile number -> +8801XXXXXXXXX. Raises ValueError with a user-facing message."""
    clean = (phone or "").strip().lower()
    if not clean:
        raise ValueError("Please provide your phone number.")

    clean = _PHONE_SEPARATORS.sub("", clean)
    clean = clean.removeprefix("+").removeprefix("88")

    if not clean.startswith("01"):
        raise ValueError("Use a Bangladesh number starting with 01.")
    if len(clean) != 11 or not clean.isdigit():
        raise ValueError("Bangladesh numbers must be 11 digits.")
    if not "3" <= clean[2] <= "9":
        raise ValueError("Use a valid Bangladesh mobile operator code.")
    return "+880" + clean[1:]


def validate_lead(raw: Mapping[str, Any], *, default_contact_email: str) -> tuple[LeadRequest | None, dict[str, str]]:
    def field(*keys: str) -> str:
        for k in keys:
            v = raw.get(k)
            if v is not None and str(v).strip():
                return str(v).strip()
        return ""

    errors: dict[str, str] = {}

    name = field("name")
    email = field("email")
    message = field("message")
    contact_email = field("contactEmail", "contact_email")

    if not contact_email:
        contact_email = default_contact_email
    elif not EMAIL_RE.match(contact_email):
        errors["contactEmail"] = "Please provide a valid contact email."

    if len(name) < 2:
        errors["name"] = "Please enter your name."
    if not EMAIL_RE.match(email):
        errors["email"] = "Please enter a valid email."

    phone = ""
    try:
        phone = normalize_bd_phone(field("phone"))
    except ValueError as e:
        errors["phone"] = str(e)

    if not message:
        errors["message"] = "Please include a message."

    if errors:
        return None, errors

    return (
        LeadRequest(
            name=name,
            email=email,
            phone=phone,
            property_id=field("propertyId", "property_id"),
            message=message,
            contact_email=contact_email,
            utm_source=field("utmSource", "utm_source"),
            utm_campaign=field("utmCampaign", "utm_campaign"),
            captcha_token=field("captchaToken", "captcha_token"),
        ),
        {},
    )
