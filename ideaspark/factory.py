"""
Factory for creating service instances.
"""

from ideaspark.services.anthropic_service import AnthropicService
from ideaspark.services.fallback_generator import FallbackGenerator
from ideaspark.services.idea_request_service import IdeaRequestService
from ideaspark.utils.config import Config


def create_ai_service(config: Config, transport=None) -> AnthropicService:
    return AnthropicService(
        api_key=config.api_key,
        model=config.model,
        api_url=config.api_url,
        api_version=config.api_version,
        max_tokens=config.max_tokens,
        temperature=config.temperature,
        timeout=config.timeout,
        transport=transport,
    )


def create_idea_service(config: Config, transport=None) -> IdeaRequestService:
    """
    Wire an IdeaRequestService from settings.

    Args:
        config: Settings built once at start-up
        transport: Optional httpx transport for the text-generation client

    Returns:
        IdeaRequestService instance
    """
    return IdeaRequestService(
        ai_service=create_ai_service(config, transport=transport),
        fallback_generator=FallbackGenerator(),
        idea_count=config.idea_count,
    )
