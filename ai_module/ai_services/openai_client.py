from openai import OpenAI
from typing import Optional, Dict


class OpenAIClient:
    def __init__(self, api_key: str):
        self.client = OpenAI(api_key=api_key)

    def generate(
        self,
        prompt: str,
        model: str,
        max_tokens: int = 2000,
        response_schema: Optional[Dict] = None
    ) -> str:
        """Generate text; any response_schema switches on JSON mode"""
        try:
            kwargs = {}
            if response_schema is not None:
                kwargs["response_format"] = {"type": "json_object"}
            response = self.client.chat.completions.create(
                model=model,
                messages=[{"role": "user", "content": prompt}],
                max_tokens=max_tokens,
                temperature=0.7,
                **kwargs
            )
            return response.choices[0].message.content.strip()
        except Exception as e:
            raise Exception(f"OpenAI API error: {str(e)}")
