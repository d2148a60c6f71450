"""
Aadhaar Validation Client
Talks to the validation API over HTTP
"""

from typing import Any, Dict, List, Optional

import requests
from loguru import logger

from .settings import CHECK_DIGIT_PATH, HEALTH_PATH, TRACE_PATH, VALIDATE_PATH, get_settings
from .aadhaar import mask


class ApiError(Exception):
    """Non-2xx response from the validation API"""

    def __init__(self, status_code: int, detail: Any):
        self.status_code = status_code
        self.detail = detail
        super().__init__(f"HTTP {status_code}: {detail}")


class AadhaarClient:
    """
    Client for the Aadhaar validation API

    Usage:
        client = AadhaarClient("http://localhost:8080")

        result = client.validate("2341 2341 2346")
        if result["isValid"]:
            ...

        digit = client.generate_check_digit("23412341234")
    """

    def __init__(
        self,
        base_url: Optional[str] = None,
        timeout: Optional[float] = None,
        session: Optional[requests.Session] = None
    ):
        """
        Initialize client

        Args:
            base_url: API root (default: AADHAAR_API_BASE_URL setting)
            timeout: Request timeout in seconds (default: AADHAAR_REQUEST_TIMEOUT setting)
            session: Optional requests session to reuse connections
        """
        config = get_settings()
        self.base_url = (base_url or config.api_base_url).rstrip("/")
        self.timeout = timeout if timeout is not None else config.request_timeout
        self.session = session or requests.Session()

    # ==========================================
    # HTTP Communication
    # ==========================================

    def _send_http_request(
        self,
        path: str,
        method: str = "get",
        **kwargs
    ) -> Any:
        """Send HTTP request to the API and decode the JSON body"""
        url = self.base_url + path
        headers = {"Accept": "application/json"}

        logger.debug("{} {}", method.upper(), url)
        response = self.session.request(method, url, headers=headers, timeout=self.timeout, **kwargs)

        try:
            body = response.json()
        except ValueError:
            body = response.text

        if response.status_code >= 400:
            detail = body.get("detail", body) if isinstance(body, dict) else body
            raise ApiError(response.status_code, detail)
        return body

    # ==========================================
    # Operations
    # ==========================================

    def validate(self, number: str) -> Dict:
        """
        Validate an Aadhaar number

        Args:
            number: 12-digit number (may contain spaces)

        Returns:
            {"isValid": bool, "message": str, "checksum": int | None}
        """
        logger.debug("Validating {}", mask(number))
        return self._send_http_request(VALIDATE_PATH, "post", json={"aadhaarNumber": number})

    def generate_check_digit(self, prefix: str) -> int:
        """
        Get the check digit for an 11-digit prefix

        Raises:
            ApiError: 422 if the prefix is not 11 digits
        """
        result = self._send_http_request(CHECK_DIGIT_PATH, "post", json={"prefix": prefix})
        return result["checkDigit"]

    def complete(self, prefix: str) -> str:
        """Get the full 12-digit number for an 11-digit prefix"""
        result = self._send_http_request(CHECK_DIGIT_PATH, "post", json={"prefix": prefix})
        return result["aadhaarNumber"]

    def trace(self, number: str) -> List[Dict]:
        """Get the step-by-step checksum calculation"""
        result = self._send_http_request(TRACE_PATH, "post", json={"aadhaarNumber": number})
        return result["steps"]

    def health(self) -> bool:
        """True if the API reports ok"""
        return self._send_http_request(HEALTH_PATH).get("status") == "ok"
