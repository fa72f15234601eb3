from __future__ import annotations

from . import SerializerProfile
from ..serializer_table import SerializerTable

def plain_profile() -> SerializerProfile:
    return SerializerProfile(
        id="plain",
        table=SerializerTable(),
        description="Renderer built-ins only; unrenderable nodes are dropped.",
    )
