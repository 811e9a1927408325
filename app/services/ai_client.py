"""
Ranking Service Client

The ranking service speaks the OpenAI chat-completions protocol, so we
use the openai library against a configurable base URL.

FAILURE MODEL:
- Network error, timeout, non-2xx status -> UpstreamServiceError
- Empty body, invalid JSON, wrong shape  -> ResponseParseError
Both are FetchErrors: rank() reports them in a Result and never raises,
so the matcher can fall back to heuristic scoring.

Retries are disabled and every call has a hard timeout: a slow answer
is treated as a failed one.
"""
import json
from typing import Optional

from openai import OpenAI, OpenAIError
from pydantic import ValidationError

from app.core.config import Settings
from app.core.errors import FetchError, ResponseParseError, UpstreamServiceError
from app.core.log import get_logger
from app.core.result import Result
from app.schemas.schemas import AIRecommendationPayload, Internship

log = get_logger(__name__)


ENHANCE_SYSTEM_PROMPT = (
    "You are a career counselor helping students understand internship opportunities. "
    "Provide clear, encouraging, and informative descriptions."
)


class RankingClient:
    """
    Wrapper around the text-generation API used for ranking.

    Args:
        settings: model, timeout and credential configuration
        client: pre-built OpenAI-compatible client (tests pass a fake)
    """

    def __init__(self, settings: Settings, client: Optional[OpenAI] = None):
        self.settings = settings
        self.model = settings.ai_model
        self.client = client or OpenAI(
            api_key=settings.ai_api_key,
            base_url=settings.ai_base_url,
            timeout=settings.ai_timeout_seconds,
            max_retries=0
        )

    def _call_api(
        self,
        system_prompt: str,
        user_content: str,
        max_tokens: Optional[int] = None,
        json_mode: bool = False
    ) -> str:
        """
        Internal method to call the chat-completions endpoint.
        Returns raw text response.
        """
        extra = {"response_format": {"type": "json_object"}} if json_mode else {}
        try:
            response = self.client.chat.completions.create(
                model=self.model,
                messages=[
                    {"role": "system", "content": system_prompt},
                    {"role": "user", "content": user_content}
                ],
                max_tokens=max_tokens or self.settings.ai_max_tokens,
                temperature=self.settings.ai_temperature,
                **extra
            )
        except OpenAIError as e:
            raise UpstreamServiceError(f"{type(e).__name__}: {e}") from e

        if not response.choices or not response.choices[0].message.content:
            raise ResponseParseError("completion has no content")
        return response.choices[0].message.content

    def _extract_json(self, text: str) -> dict:
        """
        Extract JSON from API response.
        Handles cases where model wraps JSON in markdown code blocks.
        """
        # Remove markdown code blocks if present
        text = text.strip()
        if text.startswith("```json"):
            text = text[7:]
        if text.startswith("```"):
            text = text[3:]
        if text.endswith("```"):
            text = text[:-3]

        try:
            return json.loads(text.strip())
        except json.JSONDecodeError as e:
            raise ResponseParseError(f"response is not JSON: {e}") from e

    def rank(self, system_prompt: str, prompt: str) -> Result[AIRecommendationPayload]:
        """
        Ask the service to rank the enumerated listings in `prompt`.

        Returns:
            Result holding the validated payload, or the FetchError
        """
        try:
            content = self._call_api(system_prompt, prompt, json_mode=True)
            data = self._extract_json(content)
            return Result.ok(AIRecommendationPayload.model_validate(data))
        except FetchError as e:
            return Result.err(e)
        except ValidationError as e:
            return Result.err(ResponseParseError(f"unexpected response shape: {e.error_count()} errors"))

    def enhance_description(self, internship: Internship) -> str:
        """
        Rewrite a listing description for first-generation learners.
        Falls back to the stored description on any failure.
        """
        prompt = (
            "Enhance this internship description to be more appealing and informative "
            "for Indian students, especially first-generation learners:\n\n"
            f"Title: {internship.title}\n"
            f"Company: {internship.company}\n"
            f"Current Description: {internship.description}\n\n"
            "Make it more engaging and explain what they'll learn and how it helps their career."
        )
        try:
            return self._call_api(ENHANCE_SYSTEM_PROMPT, prompt, max_tokens=300).strip()
        except FetchError as e:
            log.warning("Description enhancement failed for %s: %s", internship.id, e)
            return internship.description

    def test_connection(self) -> bool:
        """Test if the ranking service is reachable"""
        try:
            response = self._call_api(
                "You are a test assistant.",
                "Reply with exactly: OK",
                max_tokens=10
            )
            return "OK" in response.upper()
        except FetchError as e:
            log.warning("Ranking service connection failed: %s", e)
            return False
