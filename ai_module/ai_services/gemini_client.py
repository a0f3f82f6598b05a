import google.generativeai as genai
from google.generativeai.types import GenerationConfig
from typing import Optional, Dict
import logging

logger = logging.getLogger(__name__)


class GeminiClient:
    def __init__(self, api_key: str):
        genai.configure(api_key=api_key)
        self.client = genai

    def generate(
        self,
        prompt: str,
        model: str,
        max_tokens: int = 8192,
        response_schema: Optional[Dict] = None
    ) -> str:
        """
        Generate text. With response_schema the model is asked for JSON
        matching that schema. Raises on any API or content error.
        """
        try:
            gen_model = self.client.GenerativeModel(model)

            config_kwargs = {
                "max_output_tokens": max_tokens,
                "temperature": 0.7,
            }
            if response_schema is not None:
                config_kwargs["response_mime_type"] = "application/json"
                config_kwargs["response_schema"] = response_schema

            response = gen_model.generate_content(
                prompt,
                generation_config=GenerationConfig(**config_kwargs)
            )

            # response.text raises ValueError when the candidate was blocked
            finish_reason = response.candidates[0].finish_reason.name
            if finish_reason == "MAX_TOKENS":
                logger.warning(
                    f"MAX_TOKENS ({max_tokens}) reached. "
                    f"Returning partial content (length: {len(response.text)})."
                )
                if not response.text:
                    raise Exception(f"Response truncated: MAX_TOKENS limit ({max_tokens}) reached with no content.")

            return response.text.strip()

        except ValueError as e:
            logger.error(f"Gemini content blocked or response invalid: {e}")
            raise Exception(f"Gemini content blocked or invalid response: {e}")

        except Exception as e:
            logger.error(f"Gemini API error in generate(): {str(e)}")
            raise Exception(f"Gemini API error: {str(e)}")
