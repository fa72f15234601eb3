# doc_l10n/profiles/__init__.py
from __future__ import annotations
from dataclasses import dataclass, field
from typing import List

from ..serializer_table import SerializerTable

@dataclass
class SerializerProfile:
    id: str
    # Caller-supplied render functions; these always win over synthesized defaults
    table: SerializerTable = field(default_factory=SerializerTable)
    description: str = ""

# Import concrete profiles
from .default import default_profile
from .plain import plain_profile

ALL_PROFILES: List[SerializerProfile] = [
    default_profile(),
    plain_profile(),
]

def get_profile(profile_id: str | None) -> SerializerProfile:
    for p in ALL_PROFILES:
        if p.id == (profile_id or "default"):
            return p
    raise KeyError(f"Unknown serializer profile: {profile_id!r} (known: {', '.join(p.id for p in ALL_PROFILES)})")
