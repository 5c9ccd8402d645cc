"""Manifest — schéma du document + parser de blocs."""
from .schema import NewsletterDocument
from .parser import parse_block, parse_blocks, validate_blocks

__all__ = [
    "NewsletterDocument",
    "parse_block",
    "parse_blocks",
    "validate_blocks",
]
