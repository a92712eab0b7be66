"""Base LLM wrapper -- thin async client over any OpenAI-compatible API.

Other models can be used by passing a different model name.
Defaults are read from ``settings`` but can be overridden per-instance.
"""

from typing import Any, Dict, List, Optional

from openai import AsyncOpenAI

from passage_search.utils.config import settings
from passage_search.utils.logger import get_logger

log = get_logger(__name__)


class BaseLLM:
    """Thin, model-agnostic wrapper around the async chat completions API."""

    def __init__(self, model: str | None = None, api_key: str | None = None):
        self.model = model or settings.query_model
        self._client = AsyncOpenAI(api_key=api_key or settings.openai_api_key)

    async def complete(
        self,
        messages: List[Dict[str, str]],
        temperature: float = 0.7,
        **kwargs: Any,
    ) -> Optional[str]:
        """Send *messages* to the model and return the assistant reply text.

        Returns None when the request errors or the reply has no content.
        """
        try:
            resp = await self._client.chat.completions.create(
                model=self.model,
                messages=messages,
                temperature=temperature,
                **kwargs,
            )
            msg = resp.choices[0].message
            return msg.content if msg else None
        except Exception:
            log.exception("Chat completion failed (model=%s)", self.model)
            return None
