"""
Custom exceptions for IdeaSpark.
"""


class IdeaSparkError(Exception):
    """Base exception for IdeaSpark."""
    pass


class InvalidProfile(IdeaSparkError):
    """Raised when a profile has no interests or no skills to build ideas from."""
    pass


class TextGenerationError(IdeaSparkError):
    """Raised when the text-generation endpoint cannot be reached or answers with an error."""
    pass


class ResponseFormatError(IdeaSparkError):
    """Raised when the model's answer does not contain a usable idea array."""
    pass
