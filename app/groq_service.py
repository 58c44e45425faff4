# app/groq_service.py - Groq-backed dog fact provider
from groq import AsyncGroq
from pydantic import ValidationError
from app.config import settings
from app.errors import FactUnavailableError
from app.models import DogFactOutput
from app.prompts import prompts
import structlog

logger = structlog.get_logger()

class GroqFactService:
    def __init__(self):
        self.client = None
        self.initialized = False
        self.model = settings.groq_model

    async def initialize(self):
        try:
            if not settings.groq_api_key:
                logger.warning("GROQ_API_KEY not set, dog facts unavailable")
                return

            self.client = AsyncGroq(
                api_key=settings.groq_api_key,
                timeout=settings.fact_timeout_seconds,
                max_retries=0
            )
            self.initialized = True
            logger.info("Groq client ready", model=self.model)
        except Exception as e:
            logger.error("Groq init failed", error=str(e))
            self.initialized = False

    async def fetch_fact(self) -> DogFactOutput:
        if not self.initialized:
            raise FactUnavailableError("Fact service is not configured")

        try:
            completion = await self.client.chat.completions.create(
                model=self.model,
                messages=prompts.build_fact_messages(),
                temperature=settings.fact_temperature,
                max_tokens=150,
                response_format={"type": "json_object"},
                stream=False
            )
        except Exception as e:
            logger.error("Groq fact generation failed", error=str(e))
            raise FactUnavailableError("Failed to generate dog fact") from e

        return self._parse_fact(completion.choices[0].message.content)

    def _parse_fact(self, content) -> DogFactOutput:
        if not content or not content.strip():
            raise FactUnavailableError("Model returned an empty fact")

        try:
            output = DogFactOutput.model_validate_json(content.strip())
        except ValidationError as e:
            logger.warning("Unparseable fact output", error=str(e), content=content[:200])
            raise FactUnavailableError("Model returned a malformed fact") from e

        fact = output.fact.strip()
        if not fact:
            raise FactUnavailableError("Model returned an empty fact")
        return DogFactOutput(fact=fact)

    def is_ready(self) -> bool:
        return self.initialized

groq_service = GroqFactService()
