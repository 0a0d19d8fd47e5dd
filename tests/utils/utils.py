import random
import string
from datetime import timedelta
from typing import Any

from app.core.security import create_access_token
from app.models import ApplicationForm

ADMIN_PRINCIPAL = "admin-principal"


def random_lower_string() -> str:
    return "".join(random.choices(string.ascii_lowercase, k=32))


def random_principal() -> str:
    return f"principal-{random_lower_string()}"


def principal_token_headers(principal: str) -> dict[str, str]:
    token = create_access_token(subject=principal, expires_delta=timedelta(minutes=30))
    return {"Authorization": f"Bearer {token}"}


def application_payload(**overrides: Any) -> dict[str, Any]:
    """A complete application form as the frontend sends it (camelCase keys)."""
    payload: dict[str, Any] = {
        "fullName": "Asha Verma",
        "dateOfBirth": "1990-04-12",
        "gender": 1,
        "placeOfBirth": "Pune",
        "nationality": 0,
        "maritalStatus": "married",
        "phoneNumber": "9876543210",
        "email": "asha@example.com",
        "idNumber": "123412341234",
        "address": "12 MG Road, Pune",
        "currentAddress": "12 MG Road, Pune",
        "startOfResidency": "2015-06-01",
        "propertyOwner": "R. Kulkarni",
        "relationToLandlord": "tenant",
        "isHomeowner": False,
        "profession": "Engineer",
        "professionAddress": "Hinjewadi Phase 1, Pune",
        "professionPhone": "0201234567",
        "hasVehicle": True,
        "isContractRenewal": False,
        "previousApplications": 0,
    }
    payload.update(overrides)
    return payload


def build_form(**overrides: Any) -> ApplicationForm:
    return ApplicationForm.model_validate(application_payload(**overrides))
