# settings.py
# Request-scoped configuration: built once per agreement, never mutated.
# Values come from keyword arguments first, then environment variables.
from __future__ import annotations
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Optional
import os

ENV_TEMPLATE_DIR = "AGREEMENT_TEMPLATE_DIR"
ENV_DATASET_ID = "AGREEMENT_DATASET_ID"
ENV_SAMPLE = "AGREEMENT_SAMPLE"

_TRUE = {"1", "true", "yes", "on"}

@dataclass(frozen=True)
class Settings:
    template_resource_dir: Path
    dataset_id: Optional[str]
    is_sample: bool = False

    # service handles; only passed through to the callers' collaborators
    fedora: Any = None
    ldap: Any = None


def _env_flag(name: str, default: bool = False) -> bool:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    return raw.strip().lower() in _TRUE

def load_settings(
    template_resource_dir: Optional[str] = None,
    dataset_id: Optional[str] = None,
    is_sample: Optional[bool] = None,
    fedora: Any = None,
    ldap: Any = None,
) -> Settings:
    resource_dir = template_resource_dir or os.getenv(ENV_TEMPLATE_DIR) or ""
    if not resource_dir:
        raise ValueError(f"Set the template resource directory (argument or env {ENV_TEMPLATE_DIR}).")

    dataset_id = dataset_id or os.getenv(ENV_DATASET_ID) or None
    if is_sample is None:
        is_sample = _env_flag(ENV_SAMPLE)

    # a real agreement needs to know which dataset it is for
    if not is_sample and not dataset_id:
        raise ValueError(f"Set the dataset id (argument or env {ENV_DATASET_ID}) or enable sample mode.")

    return Settings(
        template_resource_dir=Path(resource_dir),
        dataset_id=dataset_id,
        is_sample=is_sample,
        fedora=fedora,
        ldap=ldap,
    )
