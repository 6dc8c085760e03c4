# metadata.py
# Records the mapper reads from. The repository/identity services hand these over
# fully populated; nothing here talks to a service.
from __future__ import annotations
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Optional, Protocol, Sequence, runtime_checkable

from dates import DateLike, parse_date

ACCESS_RIGHTS_TERM = "dcterms:accessRights"


class AccessCategory(Enum):
    OPEN_ACCESS = "OPEN_ACCESS"
    ANONYMOUS_ACCESS = "ANONYMOUS_ACCESS"
    FREELY_AVAILABLE = "FREELY_AVAILABLE"
    OPEN_ACCESS_FOR_REGISTERED_USERS = "OPEN_ACCESS_FOR_REGISTERED_USERS"
    GROUP_ACCESS = "GROUP_ACCESS"
    REQUEST_PERMISSION = "REQUEST_PERMISSION"
    ACCESS_ELSEWHERE = "ACCESS_ELSEWHERE"
    NO_ACCESS = "NO_ACCESS"

    def __str__(self) -> str:
        return self.value


class FileAccessRight(Enum):
    ANONYMOUS = "ANONYMOUS"
    KNOWN = "KNOWN"
    RESTRICTED_REQUEST = "RESTRICTED_REQUEST"
    RESTRICTED_GROUP = "RESTRICTED_GROUP"
    NONE = "NONE"

    def __str__(self) -> str:
        return self.value


@runtime_checkable
class MetadataItem(Protocol):
    def __str__(self) -> str: ...


@dataclass(frozen=True)
class BasicString:
    value: str

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class DateContainer:
    submitted: Sequence[DateLike] = ()
    available: Sequence[DateLike] = ()


class DatasetMetadata(Protocol):
    """Accessors the mapper needs from a dataset's descriptive metadata."""

    def get_dans_managed_doi(self) -> Optional[str]: ...

    def get_preferred_title(self) -> str: ...

    def get_emd_date(self) -> DateContainer: ...

    def get_access_category(self) -> Optional[AccessCategory]: ...

    def get_term(self, name: str) -> Sequence[MetadataItem]: ...

    def get_term_names(self) -> Sequence[str]: ...


@dataclass(frozen=True)
class Depositor:
    name: str
    organization: str
    address: str
    postal_code: str
    city: str
    country: str
    telephone: str
    email: str

    @classmethod
    def from_dict(cls, d: Dict[str, Any]) -> "Depositor":
        # missing fields become "" so templates never see None
        return cls(**{f: str(d.get(f) or "") for f in cls.__dataclass_fields__})


@dataclass(frozen=True)
class FileItem:
    path: str
    accessible_to: FileAccessRight
    checksum: str = ""


@dataclass
class EasyMetadata:
    """Plain DatasetMetadata built from the JSON record of the metadata service."""
    doi: Optional[str] = None
    title: str = ""
    dates: DateContainer = field(default_factory=DateContainer)
    access_category: Optional[AccessCategory] = None
    terms: Dict[str, List[MetadataItem]] = field(default_factory=dict)

    def get_dans_managed_doi(self) -> Optional[str]:
        return self.doi

    def get_preferred_title(self) -> str:
        return self.title

    def get_emd_date(self) -> DateContainer:
        return self.dates

    def get_access_category(self) -> Optional[AccessCategory]:
        return self.access_category

    def get_term(self, name: str) -> Sequence[MetadataItem]:
        return self.terms.get(name, [])

    def get_term_names(self) -> Sequence[str]:
        return list(self.terms)

    @classmethod
    def from_dict(cls, d: Dict[str, Any]) -> "EasyMetadata":
        """
        Expected shape:
          {"doi": "10.x/y", "title": "...",
           "dates": {"submitted": ["2016-07-30"], "available": ["2017-01-01"]},
           "access_category": "OPEN_ACCESS",
           "terms": {"dcterms:title": ["..."], ...}}
        An unknown access_category raises ValueError from the enum lookup.
        """
        dates = d.get("dates") or {}
        category = d.get("access_category")
        terms = {
            name: [BasicString(str(v)) for v in (values if isinstance(values, list) else [values])]
            for name, values in (d.get("terms") or {}).items()
        }
        return cls(
            doi=d.get("doi") or None,
            title=d.get("title") or "",
            dates=DateContainer(
                submitted=[parse_date(x) for x in dates.get("submitted") or []],
                available=[parse_date(x) for x in dates.get("available") or []],
            ),
            access_category=AccessCategory(category) if category else None,
            terms=terms,
        )


@dataclass(frozen=True)
class Dataset:
    dataset_id: str
    metadata: DatasetMetadata
    depositor: Depositor
    files: Sequence[FileItem] = ()
