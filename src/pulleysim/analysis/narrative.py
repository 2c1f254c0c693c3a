"""
Narrative analysis of a transmission by an external text-generation service.

The calculator only needs one capability: turn a configuration and its
results into a short plain-text commentary. NarrativeService is that
capability; GeminiNarrativeService implements it over the Generative
Language REST API. analyze_system() is the caller-facing entry point and
never raises - failures become a fixed user-facing message.

No retries are attempted and only one request is made per call.
"""

import logging
import os
from abc import ABC, abstractmethod
from typing import Optional

import requests
from pydantic import BaseModel, ConfigDict

from ..enums import SystemMode
from ..io import PulleyConfig, TransmissionResult

logger = logging.getLogger(__name__)

DEFAULT_MODEL = "gemini-2.5-flash"
DEFAULT_ENDPOINT = "https://generativelanguage.googleapis.com/v1beta"
DEFAULT_TIMEOUT_S = 30.0
DEFAULT_MAX_OUTPUT_TOKENS = 400
MAX_WORDS = 150

ANALYSIS_UNAVAILABLE_MESSAGE = "The analysis could not be generated right now."
ANALYSIS_ERROR_MESSAGE = (
    "Error connecting to the AI analysis service. Please check your API key."
)


class ServiceError(Exception):
    """The narrative service could not produce a reply."""


class NarrativeSettings(BaseModel):
    """Connection settings for the text-generation service."""
    model_config = ConfigDict(extra='ignore')

    api_key: Optional[str] = None
    model: str = DEFAULT_MODEL
    endpoint: str = DEFAULT_ENDPOINT
    timeout_s: float = DEFAULT_TIMEOUT_S
    max_output_tokens: int = DEFAULT_MAX_OUTPUT_TOKENS

    @classmethod
    def from_env(cls) -> "NarrativeSettings":
        """Read settings from GEMINI_API_KEY (or API_KEY) and PULLEYSIM_MODEL."""
        return cls(
            api_key=os.environ.get("GEMINI_API_KEY") or os.environ.get("API_KEY"),
            model=os.environ.get("PULLEYSIM_MODEL", DEFAULT_MODEL),
        )


class NarrativeService(ABC):
    """Capability: summarize(config, result) -> text, raises ServiceError."""

    @abstractmethod
    def summarize(self, config: PulleyConfig, result: TransmissionResult) -> str:
        ...


def build_prompt(config: PulleyConfig, result: TransmissionResult) -> str:
    """
    Format the configuration and results as an analysis request.

    Belt length is only mentioned for belt drives.
    """
    if config.mode == SystemMode.BELT:
        mode_text = "Belt drive"
        belt_line = f"Belt length: {result.belt_length_mm:.2f} mm\n"
    else:
        mode_text = "Friction wheels"
        belt_line = ""

    return (
        "Act as an expert mechanical engineering teacher. "
        "Analyse this pulley system configuration:\n"
        "\n"
        f"System type: {mode_text}\n"
        f"Driver diameter (input): {config.driver_diameter_mm:g} mm\n"
        f"Driven diameter (output): {config.driven_diameter_mm:g} mm\n"
        f"Input speed: {config.input_rpm:g} RPM\n"
        f"Input power: {config.input_power_w:g} W\n"
        "\n"
        "Calculated results:\n"
        f"Speed ratio: {result.ratio:.2f}:1\n"
        f"Output speed: {result.output_rpm:.2f} RPM\n"
        f"Output torque: {result.output_torque_nm:.2f} Nm\n"
        f"Tangential velocity: {result.tangential_velocity_m_s:.2f} m/s\n"
        f"{belt_line}"
        "\n"
        f"Give a brief analysis (max {MAX_WORDS} words) covering:\n"
        "1. The type of mechanical advantage (speed or force multiplier?).\n"
        "2. A practical comment on whether this configuration is efficient.\n"
        "3. For friction wheels, mention slip risks. For a belt, mention the importance of tension.\n"
        "4. One safety measure based on the tangential velocity.\n"
    )


class GeminiNarrativeService(NarrativeService):
    """NarrativeService backed by the Gemini generateContent endpoint."""

    def __init__(self, settings: Optional[NarrativeSettings] = None, session=None):
        self.settings = settings or NarrativeSettings.from_env()
        self.session = session or requests

    @property
    def url(self) -> str:
        return f"{self.settings.endpoint}/models/{self.settings.model}:generateContent"

    def _payload(self, prompt: str) -> dict:
        return {
            "contents": [{"parts": [{"text": prompt}]}],
            "generationConfig": {
                "maxOutputTokens": self.settings.max_output_tokens,
                "thinkingConfig": {"thinkingBudget": 0},
            },
        }

    def summarize(self, config: PulleyConfig, result: TransmissionResult) -> str:
        if not self.settings.api_key:
            raise ServiceError("No API key configured (set GEMINI_API_KEY)")

        try:
            response = self.session.post(
                self.url,
                json=self._payload(build_prompt(config, result)),
                headers={"x-goog-api-key": self.settings.api_key},
                timeout=self.settings.timeout_s,
            )
        except requests.exceptions.RequestException as e:
            raise ServiceError(f"Request failed: {e}") from e

        if response.status_code != 200:
            raise ServiceError(f"Service returned HTTP {response.status_code}: {response.text[:200]}")

        try:
            data = response.json()
        except ValueError as e:
            raise ServiceError("Service returned invalid JSON") from e

        return _extract_text(data)


def _extract_text(data: dict) -> str:
    """Concatenate the text parts of the first candidate."""
    try:
        parts = data["candidates"][0]["content"]["parts"]
    except (KeyError, IndexError, TypeError) as e:
        raise ServiceError("Service reply has no candidates") from e

    return "".join(part.get("text", "") for part in parts if isinstance(part, dict)).strip()


def analyze_system(
    config: PulleyConfig,
    result: TransmissionResult,
    service: Optional[NarrativeService] = None
) -> str:
    """
    Ask the narrative service for a commentary on the transmission.

    Args:
        config: Transmission configuration
        result: Results computed from config
        service: Service to use (Gemini with environment settings if omitted)

    Returns:
        Commentary text, or a fixed fallback message on failure
    """
    if service is None:
        service = GeminiNarrativeService()

    try:
        text = service.summarize(config, result)
    except ServiceError as e:
        logger.error(f"Narrative analysis failed: {e}")
        return ANALYSIS_ERROR_MESSAGE

    return text or ANALYSIS_UNAVAILABLE_MESSAGE
