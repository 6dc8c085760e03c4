# placeholder_mapper.py
# Turns a dataset's metadata and its depositor into the placeholder values of
# the deposit agreement template. Each public method returns a partial map;
# dataset_to_placeholder_map merges them.
from __future__ import annotations
from pathlib import Path
from typing import Any, Callable, Dict, List, Optional, Sequence, Union
import json
import logging

import dates
import keywords as kw
from dates import DateLike
from metadata import (
    ACCESS_RIGHTS_TERM, AccessCategory, DateContainer, Dataset, DatasetMetadata,
    Depositor, FileAccessRight, FileItem, MetadataItem,
)
from settings import Settings

logger = logging.getLogger(__name__)

PlaceholderMap = Dict[str, Any]
Table = List[Dict[str, str]]


class PlaceholderMapperError(Exception):
    pass

class UnrecognizedCategoryError(PlaceholderMapperError, ValueError):
    def __init__(self, value: Any):
        super().__init__(f"unrecognized category: {value!r}")
        self.value = value

class ResourceReadError(PlaceholderMapperError):
    def __init__(self, path: Union[str, Path], reason: str):
        super().__init__(f"could not read {path}: {reason}")
        self.path = Path(path)


_OPEN_ACCESS: Dict[AccessCategory, bool] = {
    AccessCategory.OPEN_ACCESS: True,
    AccessCategory.ANONYMOUS_ACCESS: True,
    AccessCategory.FREELY_AVAILABLE: True,
    AccessCategory.OPEN_ACCESS_FOR_REGISTERED_USERS: False,
    AccessCategory.GROUP_ACCESS: False,
    AccessCategory.REQUEST_PERMISSION: False,
    AccessCategory.ACCESS_ELSEWHERE: False,
    AccessCategory.NO_ACCESS: False,
}

# keyed by the category *name*: the input is free text from the metadata record
_DATASET_ACCESS_LABELS: Dict[str, str] = {
    "ANONYMOUS_ACCESS": "Anonymous",
    "OPEN_ACCESS": "Open Access",
    "FREELY_AVAILABLE": "Open Access",
    "OPEN_ACCESS_FOR_REGISTERED_USERS": "Open access for registered users",
    "GROUP_ACCESS": "Restricted - 'archaeology' group",
    "REQUEST_PERMISSION": "Restricted - request permission",
    "ACCESS_ELSEWHERE": "Elsewhere",
    "NO_ACCESS": "Other",
}

_FILE_ACCESS_LABELS: Dict[FileAccessRight, str] = {
    FileAccessRight.ANONYMOUS: "Anonymous",
    FileAccessRight.KNOWN: "Known",
    FileAccessRight.RESTRICTED_REQUEST: "Restricted request",
    FileAccessRight.RESTRICTED_GROUP: "Restricted group",
    FileAccessRight.NONE: "None",
}


def _encode_doi(doi: str) -> str:
    # only '/' is escaped; downstream URLs expect the rest verbatim
    return doi.replace("/", "%2F")

def _read_text(path: Union[str, Path]) -> str:
    try:
        with open(path) as f:
            return f.read()
    except OSError as e:
        raise ResourceReadError(path, e.strerror or str(e)) from e


class PlaceholderMapper:
    def __init__(self, settings: Settings, metadata_terms_file: Optional[Union[str, Path]] = None):
        """
        Parameters
        ----------
        settings : Settings
          Request-scoped configuration; only ``is_sample`` and
          ``template_resource_dir`` are read.
        metadata_terms_file : path, optional
          JSON object mapping metadata term names to table labels. Defaults to
          ``MetadataTerms.json`` in the template resource directory.
        """
        self.settings = settings
        terms_file = Path(metadata_terms_file or Path(settings.template_resource_dir) / kw.METADATA_TERMS_FILE)
        try:
            labels = json.loads(_read_text(terms_file))
        except ValueError as e:
            raise ResourceReadError(terms_file, f"invalid JSON ({e})") from e
        if not isinstance(labels, dict):
            raise ResourceReadError(terms_file, "expected a JSON object of term -> label")
        self.metadata_labels: Dict[str, str] = {str(k): str(v) for k, v in labels.items()}
        logger.debug("loaded %d metadata term labels from %s", len(self.metadata_labels), terms_file)

    # ---------- header ----------
    def header(self, metadata: DatasetMetadata) -> PlaceholderMap:
        doi = metadata.get_dans_managed_doi()
        return {
            kw.IS_SAMPLE: self.settings.is_sample,
            kw.DANS_MANAGED_DOI: doi or "",
            kw.DANS_MANAGED_ENCODED_DOI: _encode_doi(doi) if doi else "",
            kw.DATE_SUBMITTED: self._date_submitted(metadata),
            kw.TITLE: metadata.get_preferred_title(),
        }

    def sample_header(self, metadata: DatasetMetadata) -> PlaceholderMap:
        # a sample has no DOI yet: the identifier must not be looked up at all
        return {
            kw.IS_SAMPLE: True,
            kw.DATE_SUBMITTED: self._date_submitted(metadata),
            kw.TITLE: metadata.get_preferred_title(),
        }

    def _date_submitted(self, metadata: DatasetMetadata) -> str:
        submitted = self.get_date(metadata, lambda d: d.submitted)
        return dates.iso_day(submitted if submitted is not None else dates.today())

    # ---------- dates ----------
    def get_date(
        self,
        metadata: DatasetMetadata,
        selector: Callable[[DateContainer], Sequence[DateLike]],
    ) -> Optional[DateLike]:
        """First date of the sequence picked by ``selector``, or None if it is empty."""
        selected = selector(metadata.get_emd_date())
        return selected[0] if selected else None

    def embargo(self, metadata: DatasetMetadata) -> PlaceholderMap:
        available = self.get_date(metadata, lambda d: d.available)
        if available is None:
            return {kw.UNDER_EMBARGO: False, kw.DATE_AVAILABLE: ""}
        if dates.to_day(available) > dates.today():
            return {kw.UNDER_EMBARGO: True, kw.DATE_AVAILABLE: dates.day_fmt(available)}
        return {kw.UNDER_EMBARGO: False, kw.DATE_AVAILABLE: dates.iso_day(available)}

    def current_date_and_time(self) -> PlaceholderMap:
        return {kw.CURRENT_DATE_AND_TIME: dates.date_time_fmt(dates.now())}

    # ---------- depositor ----------
    def depositor(self, depositor: Depositor) -> PlaceholderMap:
        return {
            kw.DEPOSITOR_NAME: depositor.name,
            kw.DEPOSITOR_ORGANISATION: depositor.organization,
            kw.DEPOSITOR_ADDRESS: depositor.address,
            kw.DEPOSITOR_POSTAL_CODE: depositor.postal_code,
            kw.DEPOSITOR_CITY: depositor.city,
            kw.DEPOSITOR_COUNTRY: depositor.country,
            kw.DEPOSITOR_TELEPHONE: depositor.telephone,
            kw.DEPOSITOR_EMAIL: depositor.email,
        }

    # ---------- access rights ----------
    def is_open_access(self, metadata: DatasetMetadata) -> bool:
        category = metadata.get_access_category()
        if category is None:
            # no category recorded: the dataset is treated as open access
            return True
        try:
            return _OPEN_ACCESS[category]
        except (KeyError, TypeError):
            raise UnrecognizedCategoryError(category) from None

    def dataset_access_category(self, metadata: DatasetMetadata) -> PlaceholderMap:
        category = metadata.get_access_category()
        return {
            kw.OPEN_ACCESS: self.is_open_access(metadata),
            kw.ACCESS_RIGHTS: self.format_dataset_access_rights(category or AccessCategory.OPEN_ACCESS),
        }

    def format_dataset_access_rights(self, item: Union[MetadataItem, AccessCategory, str]) -> str:
        text = str(item)
        return _DATASET_ACCESS_LABELS.get(text, text)

    def format_file_access_rights(self, right: FileAccessRight) -> str:
        try:
            return _FILE_ACCESS_LABELS[right]
        except (KeyError, TypeError):
            raise UnrecognizedCategoryError(right) from None

    # ---------- tables ----------
    def metadata_table(self, metadata: DatasetMetadata) -> PlaceholderMap:
        rows: Table = []
        for name in metadata.get_term_names():
            label = self.metadata_labels.get(name)
            if label is None:
                logger.warning("no label for metadata term %s; left out of the agreement", name)
                continue
            items = metadata.get_term(name)
            if not items:
                continue
            if name == ACCESS_RIGHTS_TERM:
                values = [self.format_dataset_access_rights(i) for i in items]
            else:
                values = [str(i) for i in items]
            rows.append({kw.METADATA_KEY: label, kw.METADATA_VALUE: ", ".join(values)})
        return {kw.METADATA_TABLE: rows}

    def files_table(self, files: Sequence[FileItem]) -> PlaceholderMap:
        rows: Table = [
            {
                kw.FILE_KEY: f.path,
                kw.FILE_VALUE: f.checksum,
                kw.FILE_ACCESSIBLE_TO: self.format_file_access_rights(f.accessible_to),
            }
            for f in sorted(files, key=lambda f: f.path)
        ]
        return {kw.FILE_TABLE: rows, kw.HAS_FILES: bool(rows)}

    # ---------- footer ----------
    def footer_text(self, path: Union[str, Path]) -> str:
        """File contents with line endings normalised to '\\n' and no trailing line break."""
        # split on newlines only; other separators (form feed, U+2028) stay in the text
        return "\n".join(_read_text(path).rstrip("\n").split("\n"))

    # ---------- everything ----------
    def dataset_to_placeholder_map(self, dataset: Dataset) -> PlaceholderMap:
        emd = dataset.metadata
        if self.settings.is_sample:
            logger.debug("building sample agreement placeholders for %s", dataset.dataset_id)
            head = self.sample_header(emd)
        else:
            logger.debug("building agreement placeholders for %s", dataset.dataset_id)
            head = self.header(emd)

        footer = {kw.FOOTER_TEXT: self.footer_text(Path(self.settings.template_resource_dir) / kw.FOOTER_TEXT_FILE)}
        parts = [
            head,
            footer,
            self.depositor(dataset.depositor),
            self.dataset_access_category(emd),
            self.embargo(emd),
            self.current_date_and_time(),
            self.metadata_table(emd),
            self.files_table(dataset.files),
        ]

        mapping: PlaceholderMap = {}
        for part in parts:
            clash = mapping.keys() & part.keys()
            if clash:
                raise PlaceholderMapperError(f"placeholders defined twice: {sorted(clash)}")
            mapping.update(part)
        return mapping
