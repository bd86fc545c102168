"""
Infrastructure Adapter: Ollama Analysis Backend
Implements IAnalysisBackend against a local Ollama server
"""

import asyncio

import requests

from application.ports.analysis_backend import IAnalysisBackend
from domain.entities.analysis import AnalysisContext, AnalysisResponse
from domain.exceptions import AnalysisBackendError
from .prompts import SYSTEM_PROMPT, create_prompt, parse_model_reply


class OllamaAnalysisBackend(IAnalysisBackend):
    """
    Client for Ollama local AI.
    """

    name = "ollama"

    def __init__(
        self,
        host: str = "http://localhost:11434",
        model: str = "llama3.2",
        temperature: float = 0.3,
        max_tokens: int = 2048,
        timeout: float = 30.0
    ):
        """
        Initialize Ollama backend.

        Args:
            host: Ollama API host URL
            model: Model name to use
            temperature: Sampling temperature (0-1)
            max_tokens: Maximum tokens to generate
            timeout: HTTP timeout in seconds
        """
        self.host = host.rstrip('/')
        self.model = model
        self.temperature = temperature
        self.max_tokens = max_tokens
        self.timeout = timeout
        self.api_url = f"{self.host}/api"

    def generate(self, prompt: str, system: str = SYSTEM_PROMPT) -> str:
        """
        Generate text using Ollama.

        Raises:
            AnalysisBackendError: If Ollama is unreachable, times out or fails
        """
        payload = {
            "model": self.model,
            "prompt": prompt,
            "system": system,
            "stream": False,
            "format": "json",
            "options": {
                "temperature": self.temperature,
                "num_predict": self.max_tokens
            }
        }

        try:
            response = requests.post(f"{self.api_url}/generate", json=payload, timeout=self.timeout)
            response.raise_for_status()
            return response.json().get("response", "")

        except requests.exceptions.ConnectionError:
            raise AnalysisBackendError(
                f"Cannot connect to Ollama at {self.host}. "
                f"Make sure Ollama is running (ollama serve)"
            )
        except requests.exceptions.Timeout:
            raise AnalysisBackendError("Ollama request timed out", reason="timeout")
        except (requests.exceptions.RequestException, ValueError) as e:
            raise AnalysisBackendError(f"Ollama generation failed: {e}")

    async def respond(self, context: AnalysisContext) -> AnalysisResponse:
        prompt = create_prompt(context, include_format=True, include_system=False)
        text = await asyncio.to_thread(self.generate, prompt)

        result = parse_model_reply(text)
        if result is None:
            raise AnalysisBackendError("Ollama returned an empty response", reason="invalid_response")

        return result
