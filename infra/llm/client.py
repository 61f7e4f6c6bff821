import json
import logging
from typing import Any, Dict, Optional

import httpx

from app.settings import Settings
from domain.analysis_schema import AnalysisSchema
from domain.errors import RemoteServiceFault
from infra.llm.prompts import RESUME_ANALYSIS_INSTRUCTION

logger = logging.getLogger(__name__)


async def _post(
    url: str,
    headers: Dict[str, str],
    payload: Dict,
    *,
    timeout: Optional[float] = None,
    transport: Optional[httpx.AsyncBaseTransport] = None,
) -> Dict:
    # Single attempt: slow or failing upstream calls surface to the caller as-is.
    try:
        async with httpx.AsyncClient(timeout=timeout, transport=transport) as client:
            response = await client.post(url, headers=headers, json=payload)
        response.raise_for_status()
        return response.json()
    except httpx.HTTPStatusError as exc:
        status = exc.response.status_code
        logger.error("Model service returned HTTP %s: %s", status, exc.response.text[:500])
        raise RemoteServiceFault(f"Model service returned HTTP {status}") from exc
    except httpx.RequestError as exc:
        logger.error("Model service request failed: %r", exc)
        raise RemoteServiceFault(
            f"Could not reach the model service ({type(exc).__name__})") from exc
    except json.JSONDecodeError as exc:
        raise RemoteServiceFault("Model service sent a non-JSON envelope") from exc


def _block_reason(data: Any) -> Optional[str]:
    feedback = data.get("promptFeedback") if isinstance(data, dict) else None
    return feedback.get("blockReason") if isinstance(feedback, dict) else None


def _candidate_text(data: Any) -> str:
    try:
        parts = data["candidates"][0]["content"]["parts"]
        text = "".join(
            p["text"] for p in parts if isinstance(p, dict) and isinstance(p.get("text"), str)
        )
    except (KeyError, IndexError, TypeError) as exc:
        reason = _block_reason(data)
        if reason:
            raise RemoteServiceFault(f"Model service blocked the request ({reason})") from exc
        raise RemoteServiceFault("Model service returned no candidates") from exc
    if not text.strip():
        raise RemoteServiceFault("Model service returned an empty response")
    return text


def parse_analysis(raw_text: str) -> Dict[str, Any]:
    try:
        analysis = json.loads(raw_text)
    except json.JSONDecodeError as exc:
        raise RemoteServiceFault("Model response was not valid JSON") from exc
    if not isinstance(analysis, dict):
        raise RemoteServiceFault("Model response was not a JSON object")
    return analysis


class GeminiClient:
    """Calls Gemini ``generateContent`` with a forced JSON response schema."""

    def __init__(self, settings: Settings, *, transport: Optional[httpx.AsyncBaseTransport] = None):
        self.api_key = settings.GEMINI_API_KEY
        self.model = settings.GEMINI_MODEL
        self.base_url = settings.GEMINI_API_BASE.rstrip("/")
        self.timeout = settings.LLM_TIMEOUT_SECONDS
        self.transport = transport

    @property
    def url(self) -> str:
        return f"{self.base_url}/models/{self.model}:generateContent"

    def build_payload(self, text: str, schema: AnalysisSchema) -> Dict:
        return {
            "contents": [
                {"role": "user", "parts": [{"text": text}]},
            ],
            "systemInstruction": {"parts": [{"text": RESUME_ANALYSIS_INSTRUCTION}]},
            "generationConfig": {
                "responseMimeType": "application/json",
                "responseSchema": schema.render(),
            },
        }

    async def request_analysis(self, text: str, schema: AnalysisSchema) -> Dict[str, Any]:
        if not self.api_key:
            raise RemoteServiceFault("No model service API key configured")
        headers = {"x-goog-api-key": self.api_key}
        data = await _post(
            self.url,
            headers,
            self.build_payload(text, schema),
            timeout=self.timeout,
            transport=self.transport,
        )
        return parse_analysis(_candidate_text(data))
