"""
Backend API client for semester subjects.

The calculator page loads a semester's subjects from the portal backend
and lets the student grade them. This module is that fetch.
"""

import logging

import requests
from requests.adapters import HTTPAdapter
from urllib3.util.retry import Retry

from ..config import API_BASE_URL, API_TOKEN, REQUEST_TIMEOUT
from ..errors import SubjectsFetchError
from .parser import GradeSheetParser

logger = logging.getLogger(__name__)


def create_retry_session() -> requests.Session:
    session = requests.Session()
    retries = Retry(
        total=3,
        backoff_factor=1,  # 1s, 2s, 4s on 429 / 5xx
        status_forcelist=[429, 500, 502, 503, 504],
        allowed_methods=["GET"],
    )
    adapter = HTTPAdapter(max_retries=retries)
    session.mount("http://", adapter)
    session.mount("https://", adapter)
    return session


class SubjectsClient:
    """
    Fetches the subjects of one semester for a batch and department.

    Usage:
        client = SubjectsClient(token="...")
        rows = client.fetch_subjects(2022, "CSE", 5)  # ungraded CourseGrade rows
    """

    def __init__(self, base_url: str = API_BASE_URL, token: str = API_TOKEN,
                 timeout: float = REQUEST_TIMEOUT, session: requests.Session = None,
                 parser: GradeSheetParser = None):
        self.base_url = base_url.rstrip("/")
        self.token = token
        self.timeout = timeout
        self.session = session or create_retry_session()
        self.parser = parser or GradeSheetParser()

    def fetch_subjects(self, batch_year: int, department: str, semester: int) -> list:
        """
        GET /semester-subjects and return the subjects as ungraded rows.

        Raises:
            SubjectsFetchError: If no token is configured, the request
                fails, or the response is not a JSON list
        """
        if not self.token:
            raise SubjectsFetchError("No authentication token found")

        url = f"{self.base_url}/semester-subjects"
        params = {
            "batch_year": batch_year,
            "department": department,
            "semester": semester,
        }
        headers = {"Authorization": f"Bearer {self.token}"}

        try:
            resp = self.session.get(url, params=params, headers=headers, timeout=self.timeout)
            resp.raise_for_status()
            data = resp.json()
        except (requests.RequestException, ValueError) as e:
            logger.error("Error fetching subjects from %s: %s", url, e)
            raise SubjectsFetchError("Failed to fetch subjects. Please try again.") from e

        if not isinstance(data, list) or not all(isinstance(record, dict) for record in data):
            raise SubjectsFetchError(f"Unexpected subjects payload: {type(data).__name__}")

        logger.info("Fetched %d subjects for %s batch %s semester %s",
                    len(data), department, batch_year, semester)

        # The calculator starts every subject ungraded
        records = [{**record, "grade": ""} for record in data]
        return self.parser.parse(records)
