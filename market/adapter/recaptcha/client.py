"""Google reCAPTCHA verification client."""

import httpx
import logfire

from market.adapter.error import ProviderError
from market.domain.service.captcha_service import CaptchaVerifier


class RecaptchaError(ProviderError):
    """reCAPTCHA verification endpoint unreachable or returned an error."""

    pass


class RecaptchaVerifier(CaptchaVerifier):
    """Base class for reCAPTCHA verifiers.

    Provides type distinction for dependency injection.
    """

    pass


class RealRecaptchaVerifier(RecaptchaVerifier):
    """Verifies response tokens against Google's siteverify endpoint."""

    def __init__(
        self,
        secret_key: str,
        verify_url: str = "https://www.google.com/recaptcha/api/siteverify",
        timeout: float = 10.0,
    ) -> None:
        """Initialize verifier.

        Args:
            secret_key: Server-side reCAPTCHA secret
            verify_url: siteverify endpoint
            timeout: Request timeout in seconds
        """
        self.secret_key = secret_key
        self.verify_url = verify_url
        self.timeout = timeout

    async def verify(self, token: str, remote_ip: str | None = None) -> bool:
        """Verify a response token.

        Args:
            token: ``g-recaptcha-response`` value from the client
            remote_ip: End user address, forwarded to Google when known

        Returns:
            True if Google accepted the token

        Raises:
            RecaptchaError: If the endpoint could not be reached
        """
        data = {"secret": self.secret_key, "response": token}
        if remote_ip:
            data["remoteip"] = remote_ip

        try:
            async with httpx.AsyncClient() as client:
                response = await client.post(
                    self.verify_url,
                    data=data,
                    timeout=self.timeout,
                )

                if response.status_code != 200:
                    logfire.error(
                        "reCAPTCHA verification request failed",
                        status_code=response.status_code,
                        error=response.text,
                    )
                    raise RecaptchaError(
                        f"Verification request failed: {response.status_code}"
                    )

                try:
                    result = response.json()
                except ValueError as e:
                    logfire.error(
                        "reCAPTCHA verification returned malformed body",
                        error=str(e),
                    )
                    raise RecaptchaError(f"Malformed verification response: {e}")

                if not isinstance(result, dict):
                    raise RecaptchaError("Malformed verification response: not an object")

        except httpx.HTTPError as e:
            logfire.error("reCAPTCHA verification HTTP error", error=str(e))
            raise RecaptchaError(f"HTTP error during captcha verification: {e}")

        success = bool(result.get("success", False))
        if not success:
            logfire.info(
                "reCAPTCHA token rejected",
                error_codes=result.get("error-codes", []),
            )
        return success


class MockRecaptchaVerifier(RecaptchaVerifier):
    """Mock verifier for testing.

    Accepts every token except ``REJECTED_TOKEN`` without network calls.
    """

    REJECTED_TOKEN = "rejected-captcha"

    def __init__(self) -> None:
        self.verified_tokens: list[str] = []

    async def verify(self, token: str, remote_ip: str | None = None) -> bool:
        """Record the token and accept it unless it is the rejected one."""
        self.verified_tokens.append(token)
        return token != self.REJECTED_TOKEN
