"""Records and response envelope of the TherapyTips content API.

Every API response is wrapped in an envelope ``{success, data, message,
pagination?}``. The envelope is decoded exactly once, here, into an explicit
``Ok`` or ``Err`` result so the rest of the pipeline never inspects a raw
response dictionary.
"""

from __future__ import annotations

from dataclasses import asdict, dataclass, field
from typing import Any, Generic, TypeVar, Union

from therapytips_ssg.config import PLACEHOLDER_AUTHOR_NAME
from therapytips_ssg.exceptions import RemoteFetchError

T = TypeVar("T")


@dataclass(frozen=True)
class Ok(Generic[T]):
    """Successful envelope carrying the decoded ``data`` payload."""

    data: T
    pagination: dict[str, Any] | None = None

    def unwrap(self) -> T:
        return self.data


@dataclass(frozen=True)
class Err:
    """Failed envelope carrying the server message (or a default)."""

    message: str

    def unwrap(self) -> Any:
        raise RemoteFetchError(self.message)


ApiResult = Union[Ok[Any], Err]


def decode_envelope(payload: Any, default_message: str) -> ApiResult:
    """Decode a parsed JSON envelope into ``Ok`` or ``Err``.

    Parameters
    ----------
    payload : Any
        Parsed JSON body of the response.
    default_message : str
        Message used when the server reports failure without one, or when the
        payload is not an envelope at all.

    Returns
    -------
    Ok | Err
        ``Ok(data, pagination)`` when ``success`` is true, ``Err`` otherwise.

    Examples
    --------
    >>> decode_envelope({"success": True, "data": [1]}, "x")
    Ok(data=[1], pagination=None)
    >>> decode_envelope({"success": False}, "Failed to fetch articles")
    Err(message='Failed to fetch articles')
    """
    if not isinstance(payload, dict):
        return Err(default_message)
    if not payload.get("success"):
        return Err(payload.get("message") or default_message)
    return Ok(payload.get("data"), payload.get("pagination"))


@dataclass(frozen=True)
class Author:
    name: str
    id: int | None = None
    bio: str = ""
    image_url: str = ""
    created_at: str | None = None

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Author:
        return cls(
            id=data.get("id"),
            name=data.get("name") or "",
            bio=data.get("bio") or "",
            image_url=data.get("image_url") or "",
            created_at=data.get("created_at"),
        )

    @classmethod
    def placeholder(cls, name: str | None = None) -> Author:
        """Author shown when the real author record is unavailable."""
        return cls(name=name or PLACEHOLDER_AUTHOR_NAME, bio="", image_url="")


@dataclass(frozen=True)
class Category:
    name: str
    slug: str
    id: int | None = None
    created_at: str | None = None

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Category:
        return cls(
            id=data.get("id"),
            name=data.get("name") or "",
            slug=data.get("slug") or "",
            created_at=data.get("created_at"),
        )


@dataclass(frozen=True)
class Article:
    """A published piece of content of one ``article_type``."""

    title: str
    slug: str
    content: str
    article_type: str
    id: int | None = None
    subtitle: str = ""
    author_id: int | None = None
    author_name: str | None = None
    publication_date: str | None = None
    modified_date: str | None = None
    canonical_url: str | None = None
    hero_image_url: str | None = None
    hero_image_alt: str | None = None
    meta_description: str | None = None
    created_at: str | None = None
    categories: tuple[Category, ...] = ()

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Article:
        return cls(
            id=data.get("id"),
            title=data.get("title") or "",
            subtitle=data.get("subtitle") or "",
            slug=data.get("slug") or "",
            content=data.get("content") or "",
            article_type=data.get("article_type") or "",
            author_id=data.get("author_id"),
            author_name=data.get("author_name"),
            publication_date=data.get("publication_date"),
            modified_date=data.get("modified_date"),
            canonical_url=data.get("canonical_url"),
            hero_image_url=data.get("hero_image_url"),
            hero_image_alt=data.get("hero_image_alt"),
            meta_description=data.get("meta_description"),
            created_at=data.get("created_at"),
            categories=tuple(
                Category.from_dict(c) for c in data.get("categories") or []
            ),
        )


def is_question_index(key: str) -> bool:
    """Return True for canonical non-negative integer keys such as ``"7"``."""
    return key.isascii() and key.isdigit() and str(int(key)) == key


@dataclass(frozen=True)
class PersonalityTestQuestions:
    """Question set of one personality test.

    ``questions_json`` maps question index to question text. Questions are
    asked in numeric index order; keys that are not integer indexes follow in
    payload order.
    """

    article_id: int
    questions_json: dict[str, str] = field(default_factory=dict)
    id: int | None = None
    created_at: str | None = None

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> PersonalityTestQuestions:
        return cls(
            id=data.get("id"),
            article_id=data.get("article_id"),
            questions_json=dict(data.get("questions_json") or {}),
            created_at=data.get("created_at"),
        )

    @property
    def ordered_questions(self) -> list[str]:
        """Question texts ordered by index.

        >>> PersonalityTestQuestions(1, {"1": "a", "10": "j", "2": "b"}).ordered_questions
        ['a', 'b', 'j']
        """
        indexed = sorted(
            (key for key in self.questions_json if is_question_index(key)), key=int
        )
        named = [key for key in self.questions_json if not is_question_index(key)]
        return [self.questions_json[key] for key in indexed + named]


@dataclass(frozen=True)
class SearchParams:
    """Filters accepted by ``GET /articles``.

    Dates are ``YYYY-MM-DD``, ``year`` is ``YYYY`` and ``month`` ``YYYY-MM``.
    ``sort`` takes values such as ``publication_date_desc`` or ``title_asc``.
    """

    page: int | None = None
    limit: int | None = None
    query: str | None = None
    article_type: str | None = None
    category: str | None = None
    author_id: int | None = None
    date_from: str | None = None
    date_to: str | None = None
    year: str | None = None
    month: str | None = None
    sort: str | None = None

    def to_query(self) -> dict[str, str]:
        """Return the set filters as string query parameters."""
        return {
            name: str(value)
            for name, value in asdict(self).items()
            if value is not None
        }
