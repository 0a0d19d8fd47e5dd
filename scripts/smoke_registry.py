"""Live smoke test for the registry API against a running server.

Mints tokens with the server's SECRET_KEY, so run it with the same .env.
The admin principal must be listed in FIRST_ADMIN_PRINCIPALS and seeded.
"""

import os
import uuid
from datetime import timedelta

import httpx

from app.core.config import settings
from app.core.security import create_access_token

BASE = os.environ.get("REGISTRY_BASE_URL", "http://localhost:8000") + settings.API_V1_STR
ADMIN = os.environ.get("REGISTRY_ADMIN_PRINCIPAL") or (
    settings.FIRST_ADMIN_PRINCIPALS[0] if settings.FIRST_ADMIN_PRINCIPALS else ""
)


def headers_for(principal: str) -> dict[str, str]:
    token = create_access_token(subject=principal, expires_delta=timedelta(minutes=10))
    return {"Authorization": f"Bearer {token}"}


form = {
    "fullName": "Smoke Test Applicant",
    "dateOfBirth": "1988-01-30",
    "gender": 0,
    "placeOfBirth": "Nagpur",
    "nationality": 0,
    "phoneNumber": "9000000000",
    "idNumber": "999988887777",
    "address": "1 Civil Lines, Nagpur",
    "currentAddress": "1 Civil Lines, Nagpur",
    "startOfResidency": "2019-02-01",
    "propertyOwner": "Self",
    "relationToLandlord": "owner",
    "isHomeowner": True,
    "profession": "Teacher",
    "professionAddress": "Central School, Nagpur",
    "professionPhone": "0712000000",
    "hasVehicle": False,
    "isContractRenewal": False,
    "previousApplications": 0,
}

u1 = headers_for(f"smoke-{uuid.uuid4()}")
u2_principal = f"smoke-{uuid.uuid4()}"
u2 = headers_for(u2_principal)

with httpx.Client(base_url=BASE, timeout=10) as client:
    r = client.post("/applications/", headers=u1, json=form)
    r.raise_for_status()
    first = r.json()
    print(f"u1 submitted application {first}")

    r = client.post("/applications/", headers=u2, json=form)
    r.raise_for_status()
    second = r.json()
    print(f"u2 submitted application {second}")
    assert second > first

    own = client.get("/applications/mine", headers=u1).json()
    assert [a["applicationNumber"] for a in own] == [first], own
    print("u1 sees only its own application")

    r = client.get(f"/applications/{first}", headers=u2)
    assert r.status_code == 403, r.text
    print("u2 is refused u1's application")

    if not ADMIN:
        print("No admin principal configured; skipping admin checks")
    else:
        admin = headers_for(ADMIN)
        everything = client.get("/applications/", headers=admin).json()
        numbers = {a["applicationNumber"] for a in everything}
        assert {first, second} <= numbers
        print(f"admin sees {len(numbers)} applications")

        r = client.put(
            "/roles/assignments",
            headers=admin,
            json={"user": u2_principal, "role": "admin"},
        )
        r.raise_for_status()
        assert client.get("/roles/me/is-admin", headers=u2).json() is True
        print("u2 promoted to admin")

print("Smoke test passed")
