"""Shared fixtures for the agreement placeholder tests."""

from __future__ import annotations

import datetime as dt
import shutil
from pathlib import Path
from typing import Dict, List, Optional, Sequence

import pytest

import dates
from metadata import AccessCategory, DateContainer, MetadataItem
from placeholder_mapper import PlaceholderMapper
from settings import Settings

RESOURCES = Path(__file__).resolve().parent.parent / "resources"

FIXED_TODAY = dt.date(2020, 6, 15)


class StubMetadata:
    """DatasetMetadata stand-in that records which accessors were called."""

    def __init__(
        self,
        doi: Optional[str] = None,
        title: str = "",
        submitted: Sequence[dt.date] = (),
        available: Sequence[dt.date] = (),
        access_category: Optional[AccessCategory] = None,
        terms: Optional[Dict[str, List[MetadataItem]]] = None,
    ) -> None:
        self.doi = doi
        self.title = title
        self.dates = DateContainer(submitted=list(submitted), available=list(available))
        self.access_category = access_category
        self.terms = terms or {}
        self.calls: List[str] = []

    def get_dans_managed_doi(self) -> Optional[str]:
        self.calls.append("doi")
        return self.doi

    def get_preferred_title(self) -> str:
        self.calls.append("title")
        return self.title

    def get_emd_date(self) -> DateContainer:
        self.calls.append("date")
        return self.dates

    def get_access_category(self) -> Optional[AccessCategory]:
        self.calls.append("access_category")
        return self.access_category

    def get_term(self, name: str) -> Sequence[MetadataItem]:
        return self.terms.get(name, [])

    def get_term_names(self) -> Sequence[str]:
        return list(self.terms)


class NoDoiMetadata(StubMetadata):
    def get_dans_managed_doi(self) -> Optional[str]:
        raise AssertionError("the identifier must not be read")


@pytest.fixture
def resource_dir(tmp_path: Path) -> Path:
    """Template resources staged in a temporary directory."""
    target = tmp_path / "placeholdermapper"
    shutil.copytree(RESOURCES, target)
    (target / "FooterTextTest.txt").write_bytes(b"hello\r\nworld\r\n")
    return target


@pytest.fixture
def settings(resource_dir: Path) -> Settings:
    return Settings(template_resource_dir=resource_dir, dataset_id=None, is_sample=False)


@pytest.fixture
def sample_settings(resource_dir: Path) -> Settings:
    return Settings(template_resource_dir=resource_dir, dataset_id=None, is_sample=True)


@pytest.fixture
def mapper(settings: Settings) -> PlaceholderMapper:
    return PlaceholderMapper(settings)


@pytest.fixture
def sample_mapper(sample_settings: Settings) -> PlaceholderMapper:
    return PlaceholderMapper(sample_settings)


@pytest.fixture
def fixed_today(monkeypatch: pytest.MonkeyPatch) -> dt.date:
    """Pin the archive's 'today' so date assertions do not race midnight."""
    monkeypatch.setattr(dates, "today", lambda: FIXED_TODAY)
    monkeypatch.setattr(
        dates, "now", lambda: dt.datetime(2020, 6, 15, 13, 45, 7, tzinfo=dates.ARCHIVE_TZ)
    )
    return FIXED_TODAY
