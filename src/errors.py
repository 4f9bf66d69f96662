"""Error taxonomy for specification generation."""


class SpecGeneratorError(Exception):
    """Base class for all application errors."""


class ValidationError(SpecGeneratorError):
    """User input rejected before any request is made."""


class GenerationError(SpecGeneratorError):
    """The generation service failed or returned an unusable response."""


class CredentialError(GenerationError):
    """No API key is configured for the generation service."""


class EmptyResponseError(GenerationError):
    """The generation service returned an empty body."""


class MalformedJSONError(GenerationError):
    """The response body is not valid JSON."""


class SchemaViolationError(GenerationError):
    """The response JSON does not match the expected structure."""
