"""Content API package: envelope decoding, records and the async client."""

from .client import ContentAPIClient
from .models import (
    Article,
    Author,
    Category,
    Err,
    Ok,
    PersonalityTestQuestions,
    SearchParams,
    decode_envelope,
)

__all__ = [
    "Article",
    "Author",
    "Category",
    "ContentAPIClient",
    "Err",
    "Ok",
    "PersonalityTestQuestions",
    "SearchParams",
    "decode_envelope",
]
