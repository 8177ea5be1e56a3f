"""End-to-end tests of the portal API with the upstream REST API mocked out.

Login sessions live in an in-memory SQLite database; every upstream call goes
through ``httpx.MockTransport``.
"""

import json

import httpx
import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

from construction_portal.infrastructure.database import Base
from construction_portal.infrastructure.database.session import get_db_session
from construction_portal.infrastructure.dependencies import get_http_client
from construction_portal.main import app

USERS = {
    "sunil@example.com": {
        "_id": "u1", "email": "sunil@example.com", "role": "supervisor",
        "firstName": "Sunil", "lastName": "Silva",
    },
    "eranga@example.com": {
        "_id": "u2", "email": "eranga@example.com", "role": "employee",
        "firstName": "Eranga", "lastName": "Fernando",
    },
    "dilani@example.com": {
        "_id": "u3", "email": "dilani@example.com", "role": "manager",
        "firstName": "Dilani", "lastName": "Jayasuriya",
    },
}

LABOUR_DOC = {
    "_id": "l1",
    "name": "Nimal Perera",
    "contact": "0771234567",
    "baseSalary": 3500,
    "project": "p1",
    "labourId": "JHC/LAB/0001",
    "skillLevel": "Skilled",
    "status": "active",
}

PROJECT_DOCS = [
    {
        "_id": "p1", "name": "Villa", "supervisor": "Sunil", "location": "Kandy",
        "estimatedCost": 1500000, "status": "active",
        "customerId": {"_id": "c1", "name": "Zoysa", "customerCode": "CUS0001"},
    },
    {
        "_id": "p2", "name": "Annex", "supervisor": "Sunil", "location": "Galle",
        "estimatedCost": 2500000, "status": "planning",
        "customerId": {"_id": "c2", "name": "Alwis", "customerCode": "CUS0002"},
    },
]


class FakeUpstream:
    """Canned upstream answers keyed by ``(method, path)``."""

    def __init__(self):
        self.routes: dict[tuple[str, str], httpx.Response] = {}
        self.requests: list[httpx.Request] = []

    def on(self, method: str, path: str, status_code: int = 200, body=None) -> None:
        self.routes[(method, path)] = httpx.Response(status_code, json=body)

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        path = request.url.path.removeprefix("/api")
        if (request.method, path) == ("POST", "/auth/login"):
            return self._login(json.loads(request.content)["email"])
        response = self.routes.get((request.method, path))
        if response is None:
            return httpx.Response(404, json={"message": "Route not found"})
        return response

    @staticmethod
    def _login(email: str) -> httpx.Response:
        user = USERS.get(email)
        if user is None:
            return httpx.Response(400, json={"message": "Invalid credentials"})
        return httpx.Response(200, json={"token": f"token-{user['_id']}", "user": user})

    def last(self, method: str, path: str) -> httpx.Request:
        return next(
            r for r in reversed(self.requests)
            if r.method == method and r.url.path == f"/api{path}"
        )


@pytest.fixture
def upstream() -> FakeUpstream:
    return FakeUpstream()


@pytest_asyncio.fixture
async def client(upstream: FakeUpstream):
    engine = create_async_engine(
        "sqlite+aiosqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    factory = async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)
    transport_client = httpx.AsyncClient(transport=httpx.MockTransport(upstream))

    async def db_session():
        async with factory() as session:
            try:
                yield session
                await session.commit()
            except Exception:
                await session.rollback()
                raise

    async def http_client():
        yield transport_client

    app.dependency_overrides[get_db_session] = db_session
    app.dependency_overrides[get_http_client] = http_client

    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as http:
        yield http

    app.dependency_overrides.clear()
    await transport_client.aclose()
    await engine.dispose()


async def _login(client: AsyncClient, email: str = "sunil@example.com") -> dict[str, str]:
    response = await client.post("/api/v1/auth/login", json={"email": email, "password": "pw"})
    assert response.status_code == 200
    return {"Authorization": f"Bearer {response.json()['session_token']}"}


# ── Auth ──


@pytest.mark.asyncio
async def test_login_opens_portal_session(client: AsyncClient):
    response = await client.post(
        "/api/v1/auth/login", json={"email": "sunil@example.com", "password": "pw"}
    )

    assert response.status_code == 200
    data = response.json()
    assert data["session_token"] != "token-u1"
    assert data["user"]["name"] == "Sunil Silva"
    assert data["redirect_path"] == "/supervisordash"


@pytest.mark.asyncio
async def test_bad_credentials_are_rejected(client: AsyncClient):
    response = await client.post(
        "/api/v1/auth/login", json={"email": "nobody@example.com", "password": "pw"}
    )
    assert response.status_code == 400
    assert response.json() == {"detail": "Invalid credentials"}


@pytest.mark.asyncio
async def test_missing_token_is_401(client: AsyncClient):
    response = await client.get("/api/v1/labourers")

    assert response.status_code == 401
    assert response.json() == {"detail": "No token, authorization denied"}
    assert response.headers["WWW-Authenticate"] == "Bearer"


@pytest.mark.asyncio
async def test_unknown_session_is_401(client: AsyncClient):
    response = await client.get(
        "/api/v1/labourers", headers={"Authorization": "Bearer not-a-session"}
    )
    assert response.status_code == 401
    assert response.json() == {"detail": "Token is not valid"}


@pytest.mark.asyncio
async def test_logout_ends_the_session(client: AsyncClient):
    headers = await _login(client)

    assert (await client.post("/api/v1/auth/logout", headers=headers)).status_code == 204
    assert (await client.get("/api/v1/labourers", headers=headers)).status_code == 401


# ── Lists and error mapping ──


@pytest.mark.asyncio
async def test_labourer_list_uses_upstream_token(client: AsyncClient, upstream: FakeUpstream):
    upstream.on("GET", "/labour", body={"labourers": [LABOUR_DOC]})
    headers = await _login(client)

    response = await client.get(
        "/api/v1/labourers", params={"project_id": "p1", "search": "nimal"}, headers=headers
    )

    assert response.status_code == 200
    data = response.json()
    assert data["total"] == 1
    assert data["pages"] == 1
    assert data["items"][0]["labour_code"] == "JHC/LAB/0001"
    sent = upstream.last("GET", "/labour")
    assert sent.headers["Authorization"] == "Bearer token-u1"
    assert sent.url.params["projectId"] == "p1"


@pytest.mark.asyncio
async def test_missing_labourer_is_404(client: AsyncClient):
    headers = await _login(client)
    response = await client.get("/api/v1/labourers/l404", headers=headers)
    assert response.status_code == 404
    assert response.json() == {"detail": "Labourer with id 'l404' not found"}


@pytest.mark.asyncio
async def test_upstream_failure_is_502(client: AsyncClient, upstream: FakeUpstream):
    upstream.on("GET", "/labour", 500, {"message": "Server error"})
    headers = await _login(client)

    response = await client.get("/api/v1/labourers", headers=headers)

    assert response.status_code == 502
    assert response.json() == {"detail": "Server error"}


@pytest.mark.asyncio
async def test_grid_month_out_of_range_is_422(client: AsyncClient):
    headers = await _login(client)
    response = await client.get(
        "/api/v1/attendance/grid",
        params={"project_id": "p1", "month": 13, "year": 2024},
        headers=headers,
    )
    assert response.status_code == 422


@pytest.mark.asyncio
async def test_project_list_refuses_sorting_on_nested_customer(
    client: AsyncClient, upstream: FakeUpstream
):
    upstream.on("GET", "/projects", body={"projects": PROJECT_DOCS})
    headers = await _login(client)

    response = await client.get(
        "/api/v1/projects", params={"sort_by": "customer"}, headers=headers
    )

    assert response.status_code == 422
    assert response.json()["detail"].startswith("Cannot sort by 'customer'")


@pytest.mark.asyncio
async def test_project_list_sorts_on_scalar_field(client: AsyncClient, upstream: FakeUpstream):
    upstream.on("GET", "/projects", body={"projects": PROJECT_DOCS})
    headers = await _login(client)

    response = await client.get(
        "/api/v1/projects",
        params={"sort_by": "estimated_cost", "sort_desc": True},
        headers=headers,
    )

    assert response.status_code == 200
    assert [p["id"] for p in response.json()["items"]] == ["p2", "p1"]


# ── Attendance marking ──


@pytest.mark.asyncio
async def test_employee_cannot_mark_attendance(client: AsyncClient, upstream: FakeUpstream):
    headers = await _login(client, "eranga@example.com")

    response = await client.post(
        "/api/v1/attendance/bulk",
        json={"project": "p1", "date": "2024-03-05",
              "entries": [{"labour": "l1", "status": "present"}]},
        headers=headers,
    )

    assert response.status_code == 403
    assert "supervisor or manager" in response.json()["detail"]
    assert not any(r.url.path == "/api/attendance/bulk" for r in upstream.requests)


@pytest.mark.asyncio
async def test_supervisor_marks_attendance(client: AsyncClient, upstream: FakeUpstream):
    upstream.on("POST", "/attendance/bulk", body={
        "attendance": [{
            "_id": "a1", "labour": {"_id": "l1", "name": "Nimal Perera"}, "project": "p1",
            "date": "2024-03-05T00:00:00.000Z", "status": "present", "hoursWorked": 8,
        }],
    })
    headers = await _login(client)

    response = await client.post(
        "/api/v1/attendance/bulk",
        json={"project": "p1", "date": "2024-03-05", "entries": [
            {"labour": "l1", "status": "present", "clock_in": "08:00", "clock_out": "16:00"},
            {"labour": "l2"},
        ]},
        headers=headers,
    )

    assert response.status_code == 200
    data = response.json()
    assert data["message"] == "Attendance saved successfully"
    assert data["saved"] == 1
    assert data["attendance"][0]["labourer_name"] == "Nimal Perera"


@pytest.mark.asyncio
async def test_empty_marking_sheet_is_400(client: AsyncClient):
    headers = await _login(client)
    response = await client.post(
        "/api/v1/attendance/bulk",
        json={"project": "p1", "date": "2024-03-05", "entries": [{"labour": "l1"}]},
        headers=headers,
    )
    assert response.status_code == 400
    assert response.json()["detail"].startswith("No attendance data to save")


# ── Password confirmation ──


@pytest.mark.asyncio
async def test_edit_without_password_is_refused(client: AsyncClient, upstream: FakeUpstream):
    headers = await _login(client)

    response = await client.put(
        "/api/v1/labourers/l1", json={"base_salary": 4000}, headers=headers
    )

    assert response.status_code == 403
    assert response.json() == {"detail": "Password is required"}
    assert not any(r.method == "PUT" for r in upstream.requests)


@pytest.mark.asyncio
async def test_edit_with_confirmed_password(client: AsyncClient, upstream: FakeUpstream):
    upstream.on("POST", "/auth/verify-password", body={"success": True})
    upstream.on("PUT", "/labour/l1", body={"labour": {**LABOUR_DOC, "baseSalary": 4000}})
    headers = {**await _login(client), "X-Confirm-Password": "pw"}

    response = await client.put(
        "/api/v1/labourers/l1", json={"base_salary": 4000}, headers=headers
    )

    assert response.status_code == 200
    assert response.json()["base_salary"] == 4000
    assert json.loads(upstream.last("PUT", "/labour/l1").content) == {"baseSalary": 4000}


@pytest.mark.asyncio
async def test_wrong_confirmation_password_keeps_session(
    client: AsyncClient, upstream: FakeUpstream
):
    upstream.on("POST", "/auth/verify-password", 401, {"message": "Invalid password"})
    upstream.on("GET", "/labour", body={"labourers": []})
    headers = {**await _login(client), "X-Confirm-Password": "wrong"}

    response = await client.delete("/api/v1/labourers/l1", headers=headers)

    assert response.status_code == 403
    assert response.json() == {"detail": "Invalid password"}
    assert (await client.get("/api/v1/labourers", headers=headers)).status_code == 200


# ── Forced logout ──


@pytest.mark.asyncio
async def test_rejected_upstream_token_ends_portal_session(
    client: AsyncClient, upstream: FakeUpstream
):
    upstream.on("GET", "/labour", 401, {"message": "Token is not valid"})
    headers = await _login(client)

    first = await client.get("/api/v1/labourers", headers=headers)
    assert first.status_code == 401
    assert first.json() == {"detail": "Session expired. Please log in again."}

    second = await client.get("/api/v1/labourers", headers=headers)
    assert second.status_code == 401
    assert second.json() == {"detail": "Token is not valid"}
    assert len([r for r in upstream.requests if r.url.path == "/api/labour"]) == 1


@pytest.mark.asyncio
async def test_rejected_token_during_edit_ends_session(
    client: AsyncClient, upstream: FakeUpstream
):
    upstream.on("POST", "/auth/verify-password", body={"success": True})
    upstream.on("PUT", "/labour/l1", 401, {"message": "Token is not valid"})
    headers = {**await _login(client), "X-Confirm-Password": "pw"}

    response = await client.put(
        "/api/v1/labourers/l1", json={"base_salary": 4000}, headers=headers
    )
    assert response.status_code == 401

    again = await client.get("/api/v1/labourers", headers=headers)
    assert again.json() == {"detail": "Token is not valid"}


# ── Schedules ──


@pytest.mark.asyncio
async def test_completing_work_step_updates_task_progress(
    client: AsyncClient, upstream: FakeUpstream
):
    footing = {"_id": "w1", "project": {"_id": "p1", "name": "Villa"},
               "section": "Project Process", "step": "2.1", "title": "Footing"}
    walls = {"_id": "w2", "project": "p1", "section": "Project Process", "step": "2.2",
             "title": "Walls", "status": "pending"}
    upstream.on(
        "PUT", "/work-schedule/w1", body={"workSchedule": {**footing, "status": "completed"}}
    )
    upstream.on("GET", "/work-schedule", body={"workSchedules": [
        {**footing, "status": "completed"}, walls,
    ]})
    upstream.on("GET", "/payment-schedule", body={"paymentSchedules": [
        {"_id": "a", "project": "p1", "step": "2.1", "paymentAmount": 300, "workSchedule": "w1"},
        {"_id": "b", "project": "p1", "step": "2.2", "paymentAmount": 100, "workSchedule": "w2"},
    ]})
    upstream.on("POST", "/auth/verify-password", body={"success": True})
    headers = {**await _login(client), "X-Confirm-Password": "pw"}

    response = await client.patch(
        "/api/v1/schedules/work/w1/status", json={"status": "completed"}, headers=headers
    )

    assert response.status_code == 200
    data = response.json()
    assert data["schedule"]["status"] == "completed"
    assert data["task_progress"] == {
        "total_amount": 300 + 100, "completed_amount": 300, "percent_complete": 75.0,
    }
    assert json.loads(upstream.last("PUT", "/work-schedule/w1").content) == {
        "status": "completed"
    }
    assert upstream.last("GET", "/work-schedule").url.params["projectId"] == "p1"


@pytest.mark.asyncio
async def test_employee_cannot_plan_work(client: AsyncClient, upstream: FakeUpstream):
    headers = await _login(client, "eranga@example.com")

    response = await client.post(
        "/api/v1/schedules/work",
        json={
            "project_id": "p1", "section": "Project Process", "step": "2.1",
            "title": "Footing", "time_frame": "2 weeks",
            "start_date": "2024-03-01T00:00:00Z", "end_date": "2024-03-14T00:00:00Z",
        },
        headers=headers,
    )

    assert response.status_code == 403
    assert not any(r.method == "POST" and r.url.path == "/api/work-schedule"
                   for r in upstream.requests)


@pytest.mark.asyncio
async def test_schedule_delete_needs_password(client: AsyncClient, upstream: FakeUpstream):
    headers = await _login(client)

    response = await client.delete("/api/v1/schedules/work/w1", headers=headers)

    assert response.status_code == 403
    assert response.json() == {"detail": "Password is required"}
    assert not any(r.method == "DELETE" for r in upstream.requests)


# ── Employees ──


@pytest.mark.asyncio
async def test_employee_edit_goes_through_password_gate(
    client: AsyncClient, upstream: FakeUpstream
):
    upstream.on("POST", "/auth/verify-password", body={"success": True})
    upstream.on("PUT", "/users/u2", body={"user": {
        **USERS["eranga@example.com"], "phoneNumber": "0779999999", "department": "finance",
    }})
    headers = await _login(client)

    refused = await client.put(
        "/api/v1/employees/u2", json={"phone_number": "0779999999"}, headers=headers
    )
    assert refused.status_code == 403
    assert not any(r.method == "PUT" for r in upstream.requests)

    response = await client.put(
        "/api/v1/employees/u2",
        json={"phone_number": "0779999999"},
        headers={**headers, "X-Confirm-Password": "pw"},
    )

    assert response.status_code == 200
    assert response.json()["phone_number"] == "0779999999"
    assert response.json()["department"] == "finance"
    assert json.loads(upstream.last("PUT", "/users/u2").content) == {
        "phoneNumber": "0779999999"
    }


@pytest.mark.asyncio
async def test_manager_deletes_employee(client: AsyncClient, upstream: FakeUpstream):
    upstream.on("POST", "/auth/verify-password", body={"success": True})
    upstream.on("DELETE", "/users/u2", body={"message": "User deleted successfully"})
    headers = {**await _login(client, "dilani@example.com"), "X-Confirm-Password": "pw"}

    response = await client.delete("/api/v1/employees/u2", headers=headers)

    assert response.status_code == 204
    assert upstream.last("DELETE", "/users/u2") is not None


@pytest.mark.asyncio
async def test_manager_cannot_delete_own_account(client: AsyncClient, upstream: FakeUpstream):
    upstream.on("POST", "/auth/verify-password", body={"success": True})
    headers = {**await _login(client, "dilani@example.com"), "X-Confirm-Password": "pw"}

    response = await client.delete("/api/v1/employees/u3", headers=headers)

    assert response.status_code == 400
    assert response.json() == {"detail": "Cannot delete your own account"}
    assert not any(r.method == "DELETE" for r in upstream.requests)


@pytest.mark.asyncio
async def test_supervisor_cannot_delete_employees(client: AsyncClient, upstream: FakeUpstream):
    upstream.on("POST", "/auth/verify-password", body={"success": True})
    headers = {**await _login(client), "X-Confirm-Password": "pw"}

    response = await client.delete("/api/v1/employees/u2", headers=headers)

    assert response.status_code == 403
    assert not any(r.method == "DELETE" for r in upstream.requests)


@pytest.mark.asyncio
async def test_staff_list_is_closed_to_employees(client: AsyncClient, upstream: FakeUpstream):
    upstream.on("GET", "/users", body={"users": list(USERS.values()),
                                       "pagination": {"hasNext": False}})

    refused = await client.get(
        "/api/v1/employees", headers=await _login(client, "eranga@example.com")
    )
    allowed = await client.get(
        "/api/v1/employees", params={"sort_by": "last_name"}, headers=await _login(client)
    )

    assert refused.status_code == 403
    assert allowed.status_code == 200
    assert [e["last_name"] for e in allowed.json()["items"]] == [
        "Fernando", "Jayasuriya", "Silva",
    ]
