from typing import Optional, Dict

from ai_module.ai_services.openrouter_client import OpenRouterClient
from ai_module.ai_services.openai_client import OpenAIClient
from ai_module.ai_services.gemini_client import GeminiClient


class AIProvider:
    """Unified interface for all text-generation providers"""

    def __init__(self, provider: str, api_key: str):
        self.provider = provider
        self.api_key = api_key
        self.client = self._init_client()

    def _init_client(self):
        if self.provider == "openrouter":
            return OpenRouterClient(self.api_key)
        elif self.provider == "openai":
            return OpenAIClient(self.api_key)
        elif self.provider == "gemini":
            return GeminiClient(self.api_key)
        else:
            raise ValueError(f"Unknown provider: {self.provider}")

    def generate(
        self,
        prompt: str,
        model: str,
        max_tokens: int = 8192,
        response_schema: Optional[Dict] = None
    ) -> str:
        return self.client.generate(prompt, model, max_tokens, response_schema=response_schema)
