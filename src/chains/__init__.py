"""LangChain chains for specification generation."""

from src.chains.spec_generator import SpecGeneratorChain, SpecificationResult

__all__ = [
    "SpecGeneratorChain",
    "SpecificationResult",
]
