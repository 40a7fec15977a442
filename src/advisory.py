"""AI advisor insights from Google Gemini, with debounced requests."""

from __future__ import annotations

import json
import logging
import os
import threading
from dataclasses import asdict
from enum import Enum
from typing import Any, Callable

logger = logging.getLogger(__name__)

DEFAULT_MODEL = "gemini-2.5-flash"
DEFAULT_TIMEOUT_SECONDS = 20.0
DEFAULT_DEBOUNCE_SECONDS = 1.0

FALLBACK_ADVICE = (
    "Keep an eye on current market trends and consult with a licensed "
    "professional before making major financial decisions."
)

PROMPT_TEMPLATE = (
    "Act as a senior mortgage advisor. Analyze the following {calculator} mortgage "
    "data and provide 3 concise, high-value bullet points of professional advice. "
    "Be specific about the numbers provided.\n"
    "Data: {data}\n"
    "Return the advice in a clean text format suitable for a user dashboard."
)


class CalculatorType(Enum):
    PURCHASE = "purchase"
    REFINANCE = "refinance"
    CASH_OUT = "cash-out"
    BUYDOWN = "buydown"
    REVERSE_MORTGAGE = "reverse-mortgage"
    RENT_VS_BUY = "rent-vs-buy"


def _json_default(value: Any) -> Any:
    if isinstance(value, Enum):
        return value.value
    raise TypeError(f"Object of type {type(value).__name__} is not JSON serializable")


def build_snapshot(inputs: Any, result: Any) -> dict:
    """Combine a calculator's inputs and results into a JSON-safe mapping."""
    snapshot = {"inputs": asdict(inputs), "results": result.to_dict()}
    return json.loads(json.dumps(snapshot, default=_json_default))


def build_advisory_prompt(calculator_type: CalculatorType, snapshot: dict) -> str:
    return PROMPT_TEMPLATE.format(
        calculator=calculator_type.value,
        data=json.dumps(snapshot, sort_keys=True, default=_json_default),
    )


class AdvisoryClient:
    """Requests free-form advice text for a calculator snapshot.

    Never raises: every failure, including a missing API key, collapses to
    FALLBACK_ADVICE.
    """

    def __init__(
        self,
        api_key: str | None = None,
        model: str | None = None,
        timeout: float | None = None,
    ):
        """Initialize the advisory client.

        Args:
            api_key: Gemini API key. Defaults to GEMINI_API_KEY, then API_KEY
            model: Model name. Defaults to MORTGAGE_ADVISOR_MODEL
            timeout: Request timeout in seconds. Defaults to MORTGAGE_ADVISOR_TIMEOUT
        """
        self.api_key = api_key or os.environ.get("GEMINI_API_KEY") or os.environ.get("API_KEY")
        self.model = model or os.environ.get("MORTGAGE_ADVISOR_MODEL", DEFAULT_MODEL)
        if timeout is None:
            timeout = float(os.environ.get("MORTGAGE_ADVISOR_TIMEOUT", DEFAULT_TIMEOUT_SECONDS))
        self.timeout = timeout
        self._client = None

    def _get_client(self):
        """Lazily build the Gemini client."""
        if self._client is None:
            if not self.api_key:
                raise RuntimeError("No Gemini API key configured")

            from google import genai
            from google.genai import types

            self._client = genai.Client(
                api_key=self.api_key,
                http_options=types.HttpOptions(timeout=int(self.timeout * 1000)),
            )
        return self._client

    def get_insight(self, calculator_type: CalculatorType, snapshot: dict) -> str:
        """Return advice text for the snapshot, or the fallback on any failure."""
        calculator_type = CalculatorType(calculator_type)
        prompt = build_advisory_prompt(calculator_type, snapshot)

        try:
            response = self._get_client().models.generate_content(
                model=self.model,
                contents=prompt,
            )
            text = response.text
        except Exception as exc:
            logger.warning("Advisory request for %s failed: %s", calculator_type.value, exc)
            return FALLBACK_ADVICE

        if not isinstance(text, str) or not text.strip():
            logger.warning("Advisory response for %s was empty", calculator_type.value)
            return FALLBACK_ADVICE

        return text.strip()


class CancellationToken:
    """Marks one request generation as superseded."""

    def __init__(self):
        self._event = threading.Event()

    def cancel(self) -> None:
        self._event.set()

    @property
    def cancelled(self) -> bool:
        return self._event.is_set()


class InsightDebouncer:
    """Coalesces rapid snapshot changes into a single advisory request.

    Each submission starts a new generation: the pending timer is cancelled
    and the previous generation's token is cancelled, so a slow response from
    an older generation is discarded instead of overwriting a newer one.
    """

    def __init__(
        self,
        fetch: Callable[[CalculatorType, dict], str],
        delay: float | None = None,
        on_result: Callable[[str], None] | None = None,
    ):
        if delay is None:
            delay = float(os.environ.get("MORTGAGE_ADVISOR_DEBOUNCE", DEFAULT_DEBOUNCE_SECONDS))
        self.delay = delay
        self._fetch = fetch
        self._on_result = on_result
        self._lock = threading.Lock()
        self._timer: threading.Timer | None = None
        self._token: CancellationToken | None = None
        self._last_key: tuple | None = None
        self.latest: str | None = None
        self.pending = False

    def submit(self, calculator_type: CalculatorType, snapshot: dict) -> bool:
        """Schedule a request for the snapshot.

        Returns False when the snapshot matches the last one submitted.
        """
        calculator_type = CalculatorType(calculator_type)
        key = (calculator_type, json.dumps(snapshot, sort_keys=True, default=_json_default))

        with self._lock:
            if key == self._last_key:
                return False
            self._last_key = key
            self._cancel_locked()

            token = CancellationToken()
            self._token = token
            self._timer = threading.Timer(
                self.delay,
                self._run,
                args=(token, calculator_type, snapshot),
            )
            self._timer.daemon = True
            self.pending = True
            self._timer.start()

        return True

    def cancel(self) -> None:
        """Drop the pending request and ignore any in-flight response."""
        with self._lock:
            self._cancel_locked()
            self._last_key = None
            self.pending = False

    def _cancel_locked(self) -> None:
        if self._timer is not None:
            self._timer.cancel()
            self._timer = None
        if self._token is not None:
            self._token.cancel()
            self._token = None

    def _run(self, token: CancellationToken, calculator_type: CalculatorType, snapshot: dict) -> None:
        if token.cancelled:
            return

        try:
            text = self._fetch(calculator_type, snapshot)
        except Exception as exc:
            logger.warning("Advisory fetch for %s raised: %s", calculator_type.value, exc)
            text = FALLBACK_ADVICE

        with self._lock:
            if token.cancelled:
                logger.debug("Discarding stale %s insight", calculator_type.value)
                return
            self.latest = text
            self.pending = False
            self._token = None

        if self._on_result is not None:
            self._on_result(text)
