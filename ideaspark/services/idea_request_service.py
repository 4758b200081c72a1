"""
Model-backed idea generation with a deterministic fallback.
"""

from typing import List

from ideaspark.constants import IDEA_COUNT
from ideaspark.exceptions import ResponseFormatError
from ideaspark.models.idea import BusinessIdea, GenerationResult, IdeaSource
from ideaspark.models.profile import UserProfile
from ideaspark.prompts.idea_generator import build_prompt
from ideaspark.services.ai_service import AIService
from ideaspark.services.fallback_generator import FallbackGenerator
from ideaspark.services.response_parser import parse_idea_records
from ideaspark.utils.logger import logger


class IdeaRequestService:
    """Generates ideas with the model, or from templates when it cannot."""

    def __init__(self, ai_service: AIService, fallback_generator: FallbackGenerator = None, idea_count: int = IDEA_COUNT):
        """
        Initialize the idea request service.

        Args:
            ai_service: Text-generation service to call
            fallback_generator: Generator used whenever the call is skipped or fails
            idea_count: Number of ideas to ask the model for, at least 1

        Raises:
            ValueError: if idea_count is below 1
        """
        self.ai_service = ai_service
        self.fallback_generator = fallback_generator or FallbackGenerator()
        if idea_count < 1:
            raise ValueError(f"idea_count must be at least 1, got {idea_count}")
        self.idea_count = idea_count

    def generate(self, profile: UserProfile) -> List[BusinessIdea]:
        """Return ideas for the profile; never raises for a complete profile."""
        return self.generate_with_source(profile).ideas

    def generate_with_source(self, profile: UserProfile) -> GenerationResult:
        """
        Generate ideas and report whether they came from the model.

        Args:
            profile: Completed user profile

        Returns:
            GenerationResult with source AI or FALLBACK

        Raises:
            InvalidProfile: if the profile has no interests or no skills
        """
        if not self._can_call(profile):
            return self._fallback(profile)

        try:
            text = self.ai_service.complete(build_prompt(profile, self.idea_count))
        except Exception as e:
            return self._recover(profile, e)
        return self._from_text(profile, text)

    async def generate_async(self, profile: UserProfile) -> GenerationResult:
        """
        Awaitable variant of generate_with_source().

        Cancellation of the pending request propagates to the caller and does
        not produce fallback ideas.
        """
        if not self._can_call(profile):
            return self._fallback(profile)

        try:
            text = await self.ai_service.complete_async(build_prompt(profile, self.idea_count))
        except Exception as e:
            return self._recover(profile, e)
        return self._from_text(profile, text)

    def test_connection(self) -> bool:
        """Send a tiny request and report whether the endpoint answered."""
        if not self.ai_service.is_configured:
            return False

        try:
            self.ai_service.complete("Hello", max_tokens=10)
        except Exception as e:
            logger.error(f"Connection test failed: {e}")
            return False
        return True

    def _can_call(self, profile: UserProfile) -> bool:
        profile.ensure_complete()

        if not self.ai_service.is_configured:
            logger.warning("Text generation not configured, falling back to local generation")
            return False
        return True

    def _from_text(self, profile: UserProfile, text: str) -> GenerationResult:
        try:
            ideas = self._to_ideas(text)
        except Exception as e:
            return self._recover(profile, e)

        logger.info(f"Successfully generated {len(ideas)} ideas with the model")
        return GenerationResult(ideas=ideas, source=IdeaSource.AI)

    def _to_ideas(self, text: str) -> List[BusinessIdea]:
        records = parse_idea_records(text)[: self.idea_count]
        if not records:
            raise ResponseFormatError("Model response contained no idea records")
        return [BusinessIdea.from_model_output(record) for record in records]

    def _recover(self, profile: UserProfile, error: Exception) -> GenerationResult:
        logger.error(f"Error generating ideas with the model: {error}")
        logger.info("Falling back to local generation")
        return self._fallback(profile)

    def _fallback(self, profile: UserProfile) -> GenerationResult:
        return GenerationResult(ideas=self.fallback_generator.generate(profile), source=IdeaSource.FALLBACK)
