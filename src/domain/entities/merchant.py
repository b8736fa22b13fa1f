"""Merchant entity."""

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class Merchant:
    """A store that accepts BNPL purchases."""

    id: str
    name: str
    is_active: bool
    wallet: str = ""
    logo: Optional[str] = None
    category: Optional[str] = None
