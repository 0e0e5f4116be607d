"""
Label templates.

Each template names the GS1 fields a label of that kind carries and which
of them must be filled in. GTIN is always present and always required.
"""

from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType
from typing import Any, Dict, Mapping, Optional, Tuple

from .config import FIELD_ALIASES


@dataclass(frozen=True)
class LabelTemplate:
    key: str
    name: str
    description: str
    fields: Tuple[str, ...]
    required: Tuple[str, ...] = ()


LABEL_TEMPLATES: Mapping[str, LabelTemplate] = MappingProxyType({
    "PHARMA": LabelTemplate(
        key="PHARMA",
        name="Pharmaceutical",
        description="Medicines: batch, expiry date and unit serial number",
        fields=("lot", "expiration_date", "serial"),
        required=("lot", "expiration_date"),
    ),
    "ELECTRONICS": LabelTemplate(
        key="ELECTRONICS",
        name="Electronics",
        description="Devices tracked by serial number",
        fields=("serial", "production_date"),
        required=("serial",),
    ),
    "FOOD": LabelTemplate(
        key="FOOD",
        name="Food",
        description="Perishables with batch, production and expiry dates",
        fields=("lot", "production_date", "expiration_date"),
        required=("expiration_date",),
    ),
    "LOGISTICS": LabelTemplate(
        key="LOGISTICS",
        name="Logistics",
        description="Cases and pallets with batch and unit count",
        fields=("lot", "count"),
        required=("count",),
    ),
    "CUSTOM": LabelTemplate(
        key="CUSTOM",
        name="Custom",
        description="Any combination of supported fields",
        fields=(
            "lot",
            "serial",
            "expiration_date",
            "production_date",
            "count",
        ),
    ),
})


def get_template(key: Optional[str]) -> Optional[LabelTemplate]:
    if not key:
        return None
    return LABEL_TEMPLATES.get(key.upper())


def apply_template(params: Dict[str, Any], key: str) -> Dict[str, Any]:
    """
    Return a copy of params reduced to the template's fields.

    GTIN is always kept. Unknown template keys leave the params unchanged.
    """
    template = get_template(key)
    if template is None:
        return dict(params)

    keep = set(template.fields) | {"gtin"}
    return {
        name: value
        for name, value in params.items()
        if FIELD_ALIASES.get(name, name) in keep
    }
