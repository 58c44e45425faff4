# app/prompts.py
import json
from typing import Dict, List
from app.models import DogFactOutput

class Prompts:
    def build_fact_messages(self) -> List[Dict[str, str]]:
        """
        Builds the chat messages asking the LLM for a single dog fact.
        """
        schema = json.dumps(DogFactOutput.model_json_schema())

        system_prompt = f"""You are a cheerful dog expert writing trivia for a dog age calculator.

INSTRUCTIONS:
- Reply with a JSON object only, matching this JSON schema: {schema}
- The "fact" field holds exactly one fun fact about dogs.
- Keep the fact to one or two short sentences.
- Use simple English words.
- Only state facts that are true.
"""
        user_prompt = "Generate a single fun fact about dogs."

        return [
            {"role": "system", "content": system_prompt},
            {"role": "user", "content": user_prompt},
        ]

prompts = Prompts()
