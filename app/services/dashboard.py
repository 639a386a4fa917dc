import logging

import httpx

from app.schemas.report import BusinessReport, HeadlineResponse

logger = logging.getLogger(__name__)

BUSINESS_DATA_PATH = "/api/business-data"
REGENERATE_HEADLINE_PATH = "/api/regenerate-headline"

NAME_REQUIRED = "Business name is required"
LOCATION_REQUIRED = "Location is required"
REPORT_FAILED = "Failed to fetch business data. Please try again."
HEADLINE_FAILED = "Failed to regenerate headline. Please try again."


class DashboardSession:
    """Client-side state of the dashboard, driven over HTTP.

    Holds the form inputs, field errors, the last report and one loading
    flag per action. Any failed call leaves the shown report untouched and
    records a generic ``notice`` instead.
    """

    def __init__(self, client: httpx.AsyncClient):
        self._client = client
        self.business_name = ""
        self.location = ""
        self.errors: dict[str, str] = {}
        self.report: BusinessReport | None = None
        self.is_loading = False
        self.is_regenerating = False
        self.notice: str | None = None

    def validate(self) -> bool:
        errors = {}
        if not self.business_name.strip():
            errors["name"] = NAME_REQUIRED
        if not self.location.strip():
            errors["location"] = LOCATION_REQUIRED
        self.errors = errors
        return not errors

    async def submit(self) -> BusinessReport | None:
        if not self.validate() or self.is_loading:
            return self.report

        self.is_loading = True
        try:
            resp = await self._client.post(
                BUSINESS_DATA_PATH,
                json={"name": self.business_name, "location": self.location},
            )
            resp.raise_for_status()
            self.report = BusinessReport.model_validate(resp.json())
            self.notice = None
        except (httpx.HTTPError, ValueError):
            logger.exception("Error fetching business data")
            self.notice = REPORT_FAILED
        finally:
            self.is_loading = False

        return self.report

    async def regenerate_headline(self) -> BusinessReport | None:
        if self.report is None or self.is_regenerating:
            return self.report

        self.is_regenerating = True
        try:
            resp = await self._client.get(
                REGENERATE_HEADLINE_PATH,
                params={"name": self.business_name, "location": self.location},
            )
            resp.raise_for_status()
            headline = HeadlineResponse.model_validate(resp.json()).headline
            # A reset may have landed while the request was in flight.
            if self.report is not None:
                self.report = self.report.model_copy(update={"headline": headline})
            self.notice = None
        except (httpx.HTTPError, ValueError):
            logger.exception("Error regenerating headline")
            self.notice = HEADLINE_FAILED
        finally:
            self.is_regenerating = False

        return self.report

    def reset(self) -> None:
        self.business_name = ""
        self.location = ""
        self.errors = {}
        self.report = None
        self.notice = None
