"""
Async HTTP client for the YouthConnect API.

Used by the screen view-models. Every call either returns parsed models or
raises ApiError; transport failures are reported the same way with
status_code None.
"""
import logging
from typing import Any, List, Optional
from uuid import UUID

import httpx
from pydantic import BaseModel

from youthconnect.schemas.application import ApplicationForm, ApplicationResponse, ApplicationSummary
from youthconnect.schemas.alert import JobAlertCreate, JobAlertResponse
from youthconnect.schemas.auth import AuthResponse, SignupResponse
from youthconnect.schemas.chat import ChatReply
from youthconnect.schemas.guidance import CareerGuideResponse, GuideSearchCriteria
from youthconnect.schemas.home import HomeResponse
from youthconnect.schemas.job import JobMapPin, JobResponse, JobSearchCriteria, JobSummary
from youthconnect.schemas.share import ShareMenu
from youthconnect.services.search import normalize_criteria

logger = logging.getLogger(__name__)


class ApiError(Exception):
    """A request failed: non-2xx response or no response at all."""

    def __init__(self, message: str, status_code: Optional[int] = None, detail: Any = None):
        super().__init__(message)
        self.status_code = status_code
        self.detail = detail

    @property
    def code(self) -> Optional[str]:
        """Machine-readable error code, when the API sent one."""
        if isinstance(self.detail, dict):
            return self.detail.get("code")
        return None


class JobBoardClient:
    """Thin typed wrapper over httpx.AsyncClient."""

    def __init__(self, http: httpx.AsyncClient):
        self.http = http

    async def _request(self, method: str, url: str, **kwargs) -> Any:
        try:
            response = await self.http.request(method, url, **kwargs)
        except httpx.HTTPError as e:
            logger.warning(f"{method} {url} failed: {str(e)}")
            raise ApiError(f"Could not reach the server: {e}") from e

        if response.is_error:
            try:
                payload = response.json()
            except ValueError:
                payload = response.text
            detail = payload.get("detail") if isinstance(payload, dict) else payload
            message = detail.get("message") if isinstance(detail, dict) else str(detail)
            logger.warning(f"{method} {url} returned {response.status_code}: {message}")
            raise ApiError(message, status_code=response.status_code, detail=detail)

        return response.json()

    @staticmethod
    def _params(criteria: Optional[BaseModel], **extra) -> dict:
        params = normalize_criteria(criteria)
        params.update({key: value for key, value in extra.items() if value is not None})
        return params

    # Jobs
    async def search_jobs(self, criteria: Optional[JobSearchCriteria] = None, limit: Optional[int] = None) -> List[JobSummary]:
        data = await self._request("GET", "/api/jobs/", params=self._params(criteria, limit=limit))
        return [JobSummary.model_validate(item) for item in data]

    async def get_job(self, job_id: UUID) -> JobResponse:
        data = await self._request("GET", f"/api/jobs/{job_id}")
        return JobResponse.model_validate(data)

    async def share_menu(self, job_id: UUID) -> ShareMenu:
        data = await self._request("GET", f"/api/jobs/{job_id}/share")
        return ShareMenu.model_validate(data)

    async def home(self) -> HomeResponse:
        data = await self._request("GET", "/api/home")
        return HomeResponse.model_validate(data)

    async def map_pins(self) -> List[JobMapPin]:
        data = await self._request("GET", "/api/job-map/")
        return [JobMapPin.model_validate(item) for item in data]

    # Applications
    async def apply(
        self,
        job_id: UUID,
        form: ApplicationForm,
        resume_filename: str,
        resume_content: bytes,
        resume_content_type: str,
    ) -> ApplicationResponse:
        data = await self._request(
            "POST",
            f"/api/jobs/{job_id}/applications",
            data=form.model_dump(),
            files={"resume": (resume_filename, resume_content, resume_content_type)},
        )
        return ApplicationResponse.model_validate(data)

    async def my_applications(self) -> List[ApplicationSummary]:
        data = await self._request("GET", "/api/applications")
        return [ApplicationSummary.model_validate(item) for item in data]

    # Career guidance
    async def search_guides(self, criteria: Optional[GuideSearchCriteria] = None) -> List[CareerGuideResponse]:
        data = await self._request("GET", "/api/career-guidance/", params=self._params(criteria))
        return [CareerGuideResponse.model_validate(item) for item in data]

    async def guide_categories(self) -> List[str]:
        return await self._request("GET", "/api/career-guidance/categories")

    # Chat
    async def chat_greeting(self) -> str:
        data = await self._request("GET", "/api/chat/greeting")
        return ChatReply.model_validate(data).reply

    async def chat(self, message: str) -> str:
        data = await self._request("POST", "/api/chat/", json={"message": message})
        return ChatReply.model_validate(data).reply

    # Auth
    async def signup(self, email: str, password: str, first_name: str = "", last_name: str = "") -> SignupResponse:
        data = await self._request(
            "POST",
            "/api/auth/signup",
            json={"email": email, "password": password, "first_name": first_name or None, "last_name": last_name or None},
        )
        return SignupResponse.model_validate(data)

    async def login(self, email: str, password: str) -> AuthResponse:
        data = await self._request("POST", "/api/auth/login", json={"email": email, "password": password})
        return AuthResponse.model_validate(data)

    async def logout(self) -> None:
        await self._request("POST", "/api/auth/logout")

    # Alerts
    async def create_alert(self, alert: JobAlertCreate) -> JobAlertResponse:
        data = await self._request("POST", "/api/alerts/", json=alert.model_dump(mode="json"))
        return JobAlertResponse.model_validate(data)

    async def alert_matches(self, alert_id: UUID) -> List[JobSummary]:
        data = await self._request("GET", f"/api/alerts/{alert_id}/jobs")
        return [JobSummary.model_validate(item) for item in data]
