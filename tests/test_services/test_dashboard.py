import httpx
import pytest
import respx
from httpx import Response

from app.schemas.report import BusinessReport
from app.services.dashboard import (
    HEADLINE_FAILED,
    LOCATION_REQUIRED,
    NAME_REQUIRED,
    REPORT_FAILED,
    DashboardSession,
)

BASE_URL = "http://test"
BUSINESS_DATA_URL = f"{BASE_URL}/api/business-data"
REGENERATE_URL = f"{BASE_URL}/api/regenerate-headline"

REPORT_JSON = {"rating": 4.3, "reviews": 212, "headline": "Why Cake & Co is Mumbai's Best-Kept Secret in 2024"}


def _session(client: httpx.AsyncClient, name="Cake & Co", location="Mumbai") -> DashboardSession:
    session = DashboardSession(client)
    session.business_name = name
    session.location = location
    return session


# --- against the real app ---


async def test_submit_then_regenerate_only_changes_headline(client):
    session = _session(client)

    report = await session.submit()
    assert report is not None
    assert 3.8 <= report.rating <= 4.9
    assert 50 <= report.reviews <= 499
    assert "Cake & Co" in report.headline and "Mumbai" in report.headline

    for _ in range(5):
        updated = await session.regenerate_headline()
        assert updated.rating == report.rating
        assert updated.reviews == report.reviews
        assert "Cake & Co" in updated.headline and "Mumbai" in updated.headline

    assert session.is_loading is False
    assert session.is_regenerating is False
    assert session.notice is None


async def test_submit_replaces_report_wholesale(client):
    session = _session(client)
    await session.submit()

    session.business_name = "Brew Lab"
    session.location = "Pune"
    report = await session.submit()

    assert "Brew Lab" in report.headline
    assert "Pune" in report.headline


# --- validation ---


@respx.mock
@pytest.mark.asyncio
async def test_submit_with_blank_fields_makes_no_request():
    route = respx.post(BUSINESS_DATA_URL).mock(return_value=Response(200, json=REPORT_JSON))

    async with httpx.AsyncClient(base_url=BASE_URL) as client:
        session = _session(client, name="  ", location="")
        result = await session.submit()

    assert result is None
    assert not route.called
    assert session.errors == {"name": NAME_REQUIRED, "location": LOCATION_REQUIRED}


@respx.mock
@pytest.mark.asyncio
async def test_submit_with_blank_location_only():
    route = respx.post(BUSINESS_DATA_URL).mock(return_value=Response(200, json=REPORT_JSON))

    async with httpx.AsyncClient(base_url=BASE_URL) as client:
        session = _session(client, location=" ")
        await session.submit()

    assert not route.called
    assert session.errors == {"location": LOCATION_REQUIRED}


@respx.mock
@pytest.mark.asyncio
async def test_successful_submit_clears_errors():
    respx.post(BUSINESS_DATA_URL).mock(return_value=Response(200, json=REPORT_JSON))

    async with httpx.AsyncClient(base_url=BASE_URL) as client:
        session = _session(client, name="")
        await session.submit()
        session.business_name = "Cake & Co"
        report = await session.submit()

    assert session.errors == {}
    assert report == BusinessReport(**REPORT_JSON)


# --- failures ---


@respx.mock
@pytest.mark.asyncio
async def test_submit_failure_keeps_previous_report():
    route = respx.post(BUSINESS_DATA_URL)
    route.side_effect = [
        Response(200, json=REPORT_JSON),
        Response(500, json={"error": "Internal server error"}),
    ]

    async with httpx.AsyncClient(base_url=BASE_URL) as client:
        session = _session(client)
        first = await session.submit()
        second = await session.submit()

    assert second == first
    assert session.notice == REPORT_FAILED
    assert session.is_loading is False


@respx.mock
@pytest.mark.asyncio
async def test_submit_network_error_sets_notice():
    respx.post(BUSINESS_DATA_URL).mock(side_effect=httpx.ConnectError("refused"))

    async with httpx.AsyncClient(base_url=BASE_URL) as client:
        session = _session(client)
        result = await session.submit()

    assert result is None
    assert session.notice == REPORT_FAILED
    assert session.is_loading is False


@respx.mock
@pytest.mark.asyncio
async def test_regenerate_failure_keeps_headline():
    respx.post(BUSINESS_DATA_URL).mock(return_value=Response(200, json=REPORT_JSON))
    respx.get(REGENERATE_URL).mock(return_value=Response(400, json={"error": "Business name and location are required"}))

    async with httpx.AsyncClient(base_url=BASE_URL) as client:
        session = _session(client)
        await session.submit()
        result = await session.regenerate_headline()

    assert result.headline == REPORT_JSON["headline"]
    assert session.notice == HEADLINE_FAILED
    assert session.is_regenerating is False


@respx.mock
@pytest.mark.asyncio
async def test_regenerate_sends_current_inputs():
    respx.post(BUSINESS_DATA_URL).mock(return_value=Response(200, json=REPORT_JSON))
    route = respx.get(REGENERATE_URL).mock(return_value=Response(200, json={"headline": "How Cake & Co is Putting Mumbai on the Map"}))

    async with httpx.AsyncClient(base_url=BASE_URL) as client:
        session = _session(client)
        await session.submit()
        result = await session.regenerate_headline()

    request = route.calls.last.request
    assert request.url.params["name"] == "Cake & Co"
    assert request.url.params["location"] == "Mumbai"
    assert result.headline == "How Cake & Co is Putting Mumbai on the Map"
    assert result.rating == REPORT_JSON["rating"]
    assert result.reviews == REPORT_JSON["reviews"]


@respx.mock
@pytest.mark.asyncio
async def test_regenerate_without_report_is_noop():
    route = respx.get(REGENERATE_URL).mock(return_value=Response(200, json={"headline": "x"}))

    async with httpx.AsyncClient(base_url=BASE_URL) as client:
        session = _session(client)
        result = await session.regenerate_headline()

    assert result is None
    assert not route.called


@respx.mock
@pytest.mark.asyncio
async def test_submit_ignored_while_loading():
    route = respx.post(BUSINESS_DATA_URL).mock(return_value=Response(200, json=REPORT_JSON))

    async with httpx.AsyncClient(base_url=BASE_URL) as client:
        session = _session(client)
        session.is_loading = True
        await session.submit()

    assert not route.called


@respx.mock
@pytest.mark.asyncio
async def test_regenerate_ignored_while_regenerating():
    respx.post(BUSINESS_DATA_URL).mock(return_value=Response(200, json=REPORT_JSON))
    route = respx.get(REGENERATE_URL).mock(return_value=Response(200, json={"headline": "x"}))

    async with httpx.AsyncClient(base_url=BASE_URL) as client:
        session = _session(client)
        await session.submit()
        session.is_regenerating = True
        result = await session.regenerate_headline()

    assert not route.called
    assert result.headline == REPORT_JSON["headline"]


@respx.mock
@pytest.mark.asyncio
async def test_reset_during_regeneration_drops_late_headline():
    respx.post(BUSINESS_DATA_URL).mock(return_value=Response(200, json=REPORT_JSON))

    async with httpx.AsyncClient(base_url=BASE_URL) as client:
        session = _session(client)
        await session.submit()

        def _reset_then_respond(request):
            session.reset()
            return Response(200, json={"headline": "How Cake & Co is Putting Mumbai on the Map"})

        route = respx.get(REGENERATE_URL).mock(side_effect=_reset_then_respond)
        result = await session.regenerate_headline()

    assert route.called
    assert result is None
    assert session.report is None
    assert session.notice is None
    assert session.is_regenerating is False


# --- reset ---


@respx.mock
@pytest.mark.asyncio
async def test_reset_clears_everything():
    respx.post(BUSINESS_DATA_URL).mock(return_value=Response(500))

    async with httpx.AsyncClient(base_url=BASE_URL) as client:
        session = _session(client)
        await session.submit()
        session.report = BusinessReport(**REPORT_JSON)
        session.errors = {"name": NAME_REQUIRED}
        session.reset()

    assert session.business_name == ""
    assert session.location == ""
    assert session.errors == {}
    assert session.report is None
    assert session.notice is None
