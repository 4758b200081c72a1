"""
Abstract base class for text-generation services used in IdeaSpark.
This provides a common interface for different model providers.
"""

from abc import ABC, abstractmethod


class AIService(ABC):
    """Abstract base class for text-generation services."""

    @property
    @abstractmethod
    def is_configured(self) -> bool:
        """Whether a usable credential is present."""
        pass

    @abstractmethod
    def complete(self, prompt: str, max_tokens: int = None) -> str:
        """
        Send a single prompt and return the generated text.

        Args:
            prompt: The full instruction for the model
            max_tokens: Override for the response token budget

        Returns:
            The model's text answer

        Raises:
            TextGenerationError: on transport failure or an error status
            ResponseFormatError: when the answer carries no text
        """
        pass

    @abstractmethod
    async def complete_async(self, prompt: str, max_tokens: int = None) -> str:
        """Awaitable variant of complete() with the same contract."""
        pass
