import math
from dataclasses import dataclass, field
from typing import Callable, Generic, List, Optional, TypeVar

from accounts.core.config import settings
from accounts.core.exceptions import ValidationError

T = TypeVar("T")
R = TypeVar("R")

# Wire name -> User attribute
SORTABLE_PROPERTIES = {
    "id": "id",
    "name": "name",
    "email": "email",
    "createdAt": "created_at",
}

# Page numbers are 32-bit, as in Spring Data
MAX_PAGE_NUMBER = 2**31 - 1


@dataclass(frozen=True)
class SortOrder:
    attribute: str
    descending: bool = False


@dataclass(frozen=True)
class PageRequest:
    """Zero-based page number, page size and sort orders"""
    page: int = 0
    size: int = settings.DEFAULT_PAGE_SIZE
    sort: List[SortOrder] = field(default_factory=list)

    @property
    def offset(self) -> int:
        return self.page * self.size

    @classmethod
    def of(cls, page: Optional[int] = None, size: Optional[int] = None,
           sort: Optional[List[str]] = None) -> "PageRequest":
        """
        Build a request from raw query parameters.

        Out-of-range values are clamped instead of rejected: a negative page
        becomes 0, pages past MAX_PAGE_NUMBER are capped, a non-positive
        size falls back to the default and sizes above MAX_PAGE_SIZE are capped.
        """
        page = min(max(page or 0, 0), MAX_PAGE_NUMBER)
        if size is None or size < 1:
            size = settings.DEFAULT_PAGE_SIZE
        size = min(size, settings.MAX_PAGE_SIZE)
        return cls(page=page, size=size, sort=parse_sort(sort or []))


def parse_sort(values: List[str]) -> List[SortOrder]:
    """
    Parse sort parameters of the form "property" or "property,asc|desc".

    Several properties may share one direction: "name,email,desc".
    """
    orders = []
    errors = []
    for value in values:
        tokens = [token.strip() for token in value.split(",") if token.strip()]
        if not tokens:
            continue
        descending = False
        if tokens[-1].lower() in ("asc", "desc"):
            descending = tokens.pop().lower() == "desc"
        for token in tokens:
            attribute = SORTABLE_PROPERTIES.get(token)
            if attribute is None:
                errors.append(f"Unknown sort property: {token}")
                continue
            orders.append(SortOrder(attribute, descending))
    if errors:
        raise ValidationError.from_violations(errors)
    return orders


@dataclass
class Page(Generic[T]):
    """A slice of results plus the total count across all pages"""
    content: List[T]
    number: int
    size: int
    total_elements: int

    @property
    def total_pages(self) -> int:
        return math.ceil(self.total_elements / self.size) if self.size else 1

    def map(self, fn: Callable[[T], R]) -> "Page[R]":
        return Page([fn(item) for item in self.content], self.number, self.size, self.total_elements)

    def to_dict(self) -> dict:
        return {
            "content": self.content,
            "total_elements": self.total_elements,
            "total_pages": self.total_pages,
            "size": self.size,
            "number": self.number,
            "number_of_elements": len(self.content),
            "first": self.number == 0,
            "last": self.number + 1 >= self.total_pages,
            "empty": not self.content,
        }
