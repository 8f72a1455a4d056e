"""
Ziplan AI Service Client
Calls the hosted language-model Responses endpoint for recipe text
"""

from typing import Any, Dict, Optional
import structlog
import httpx

from core.config import Settings, get_settings

logger = structlog.get_logger()


def extract_recipe_text(data: Any) -> Optional[str]:
    """
    Pull the generated text from output[0].content[0].text.
    Returns None when any level is missing or the text is empty.
    """
    try:
        text = data["output"][0]["content"][0]["text"]
    except (KeyError, IndexError, TypeError):
        return None

    if not isinstance(text, str) or not text:
        return None
    return text


class AIServiceClient:
    """Client for the language-model Responses API"""

    def __init__(self, settings: Optional[Settings] = None, client: Optional[httpx.AsyncClient] = None):
        settings = settings or get_settings()
        self.base_url = settings.OPENAI_BASE_URL.rstrip("/")
        self.api_key = settings.OPENAI_API_KEY
        self.model = settings.OPENAI_MODEL
        self.client = client or httpx.AsyncClient(timeout=settings.OPENAI_TIMEOUT)

    async def __aenter__(self):
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        await self.close()

    async def close(self) -> None:
        await self.client.aclose()

    async def create_response(self, prompt: str) -> Dict[str, Any]:
        """Send the prompt and return the decoded JSON body"""
        try:
            response = await self.client.post(
                f"{self.base_url}/responses",
                headers={
                    "Authorization": f"Bearer {self.api_key}",
                    "Content-Type": "application/json",
                },
                json={"model": self.model, "input": prompt},
            )
        except httpx.RequestError as e:
            logger.error("AI service request failed", error=str(e), error_type=type(e).__name__)
            raise

        if response.is_error:
            logger.warning(
                "AI service returned error",
                status=response.status_code,
                body=response.text[:500]
            )

        data = response.json()
        logger.debug("AI service response", model=self.model, status=response.status_code, data=data)
        return data
