"""
Mistral chat-completions client used by the gardening chatbot.

Remote failures never propagate: every path returns an ``Outcome`` and a
canned reply is substituted when the service is unavailable.
"""
import logging
from typing import Dict, List, Optional

import httpx

from urbansprout.config import Settings
from urbansprout.services.outcome import Outcome

logger = logging.getLogger(__name__)

SYSTEM_PROMPT = """You are an enthusiastic and expert gardening assistant specialized in helping users grow edible vegetables, fruits, and herbs.

Always provide complete responses. If you start listing items or varieties, finish the list.

When discussing a plant, cover what is relevant from:
- sunlight requirements (full sun, partial sun, shade)
- space requirements (small containers, medium pots, large beds)
- maintenance level, watering and soil needs
- growing time and harvest timeline
- container growing advice and good home-growing varieties

Keep track of the conversation: follow-up questions such as "How much water does it need?" refer to the plant discussed earlier.
Be encouraging and practical, with a focus on small-space and container growing."""

NOT_CONFIGURED_REPLY = (
    "I'm sorry, the AI chat service is currently not configured. Please ask the administrator "
    "to set up the MISTRAL_API_KEY environment variable to enable the plant growing assistant."
)
UNAVAILABLE_REPLY = (
    "I'm having trouble connecting to the AI service right now. Please try asking your question "
    "again in a moment. If the problem persists, please contact support."
)

MIN_REPLY_LENGTH = 20
NON_ANSWERS = ("i don't know", "i cannot help", "i'm not sure", "please contact", "as an ai")


def is_useful_reply(reply: Optional[str]) -> bool:
    if not reply or len(reply.strip()) < MIN_REPLY_LENGTH:
        return False
    lowered = reply.lower()
    return not any(phrase in lowered for phrase in NON_ANSWERS)


class MistralClient:
    """Thin wrapper over the Mistral chat-completions endpoint."""

    def __init__(self, settings: Settings, transport: Optional[httpx.BaseTransport] = None):
        self.api_key = settings.mistral_api_key
        self.model = settings.mistral_model
        self.temperature = settings.mistral_temperature
        self.max_tokens = settings.mistral_max_tokens
        self._client = httpx.Client(
            base_url=settings.mistral_base_url,
            timeout=settings.mistral_timeout_seconds,
            transport=transport,
        )
        if not self.api_key:
            logger.warning("MISTRAL_API_KEY not set; chatbot will answer with a canned reply")

    def close(self) -> None:
        self._client.close()

    def build_messages(self, message: str, history: List[Dict[str, str]]) -> List[Dict[str, str]]:
        messages = [{"role": "system", "content": SYSTEM_PROMPT}]
        messages.extend({"role": turn["role"], "content": turn["content"]} for turn in history)
        messages.append({"role": "user", "content": message})
        return messages

    def _complete(self, messages: List[Dict[str, str]]) -> str:
        response = self._client.post(
            "/chat/completions",
            json={
                "model": self.model,
                "messages": messages,
                "temperature": self.temperature,
                "max_tokens": self.max_tokens,
            },
            headers={"Authorization": f"Bearer {self.api_key}"},
        )
        response.raise_for_status()
        return response.json()["choices"][0]["message"]["content"]

    def generate(self, message: str, history: List[Dict[str, str]]) -> Outcome[str]:
        if not self.api_key:
            return Outcome.fallback(NOT_CONFIGURED_REPLY, "Mistral API key not configured")

        try:
            reply = self._complete(self.build_messages(message, history))
        except httpx.HTTPError as e:
            logger.error(f"Mistral API error: {e}")
            return Outcome.fallback(UNAVAILABLE_REPLY, str(e))
        except (KeyError, IndexError, TypeError, ValueError) as e:
            logger.error(f"Unexpected Mistral response payload: {e}")
            return Outcome.fallback(UNAVAILABLE_REPLY, f"malformed response: {e}")

        if not is_useful_reply(reply):
            logger.warning("Mistral reply failed validation; using canned reply")
            return Outcome.fallback(UNAVAILABLE_REPLY, "response validation failed")

        return Outcome.ok(reply)
