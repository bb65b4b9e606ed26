"""Data records describing a procurement notice and its parts.

Every record is a dataclass whose fields map to document keys; the mapping
is used by :func:`to_document` and :func:`from_document` to move records in
and out of a document store.
"""

from collections.abc import Mapping
from dataclasses import MISSING, dataclass, field, fields, is_dataclass
from typing import Any, Optional, get_args, get_origin

__all__ = [
    "ApplicationSecurityInfo",
    "AttachmentGroup",
    "ContactInfo",
    "ContractInfo",
    "ElectronicPlatform",
    "ExecutionInfo",
    "FinancingBreakdown",
    "FinancingInfo",
    "ItemCharacteristic",
    "ProcedureInfo",
    "ProcurementItem",
    "SavedPage",
    "SpendingCodeEntry",
    "Tender",
    "WarrantyInfo",
    "to_document",
    "from_document",
]


@dataclass
class ApplicationSecurityInfo:
    required: bool = False
    amount: float = 0.0
    currency: str = ""
    procedure: str = ""


@dataclass
class AttachmentGroup:
    title: str = ""
    items: list[str] = field(default_factory=list)


@dataclass
class ContactInfo:
    organization: str = ""
    postal_address: str = ""
    location: str = ""
    responsible_person: str = ""
    email: str = ""
    phone: str = ""
    fax: str = ""


@dataclass
class ContractInfo:
    max_price: float = 0.0
    currency: str = ""


@dataclass
class ElectronicPlatform:
    name: str = ""
    url: str = ""


@dataclass
class ExecutionInfo:
    start_date: str = ""
    end_date: str = ""
    budget_funded: str = ""
    own_funded: str = ""


@dataclass
class FinancingBreakdown:
    total: float = 0.0
    year_2025: float = 0.0
    year_2026: float = 0.0
    year_2027: float = 0.0
    later_years: float = 0.0


@dataclass
class FinancingInfo:
    total: float = 0.0
    year_2025: float = 0.0
    year_2026: float = 0.0
    year_2027: float = 0.0
    later_years: float = 0.0


@dataclass
class ItemCharacteristic:
    name: str = ""
    value: str = ""
    unit: str = ""
    instruction: str = ""


@dataclass
class ProcedureInfo:
    application_deadline: str = ""
    proposal_date: str = ""
    results_date: str = ""


@dataclass
class ProcurementItem:
    name: str = ""
    identifier: str = ""
    code: str = ""
    customer: str = ""
    item_type: str = ""
    unit: str = ""
    unit_price: float = 0.0
    quantity: float = 0.0
    total_price: float = 0.0
    characteristics: list[ItemCharacteristic] = field(default_factory=list)


@dataclass
class SavedPage:
    """A downloaded notice page: its number, where it came from and its HTML."""

    notice_number: str = ""
    url: str = ""
    html: str = ""


@dataclass
class SpendingCodeEntry:
    expense_code: str = ""
    receipt_code: str = ""
    total: float = 0.0
    year_2025: float = 0.0
    year_2026: float = 0.0
    year_2027: float = 0.0
    later_years: float = 0.0


@dataclass
class Tender:
    """A procurement notice as parsed from its print form."""

    id: Optional[Any] = field(default=None, metadata={"key": "_id", "omitempty": True})
    title: str = ""
    subtitle: str = ""
    notice_number: str = ""
    object_name: str = ""
    procurement_method: str = ""
    electronic_platform: ElectronicPlatform = field(default_factory=ElectronicPlatform)
    placing_organization: str = ""
    contact: ContactInfo = field(default_factory=ContactInfo)
    procedure: ProcedureInfo = field(default_factory=ProcedureInfo)
    contract: ContractInfo = field(default_factory=ContractInfo)
    execution: ExecutionInfo = field(default_factory=ExecutionInfo)
    delivery_place: str = ""
    items: list[ProcurementItem] = field(default_factory=list)
    security: ApplicationSecurityInfo = field(default_factory=ApplicationSecurityInfo)


@dataclass
class WarrantyInfo:
    required: bool = False
    description: str = ""
    manufacturer_warranty: str = ""
    period: str = ""


def _document_key(model_field):
    return model_field.metadata.get("key", model_field.name)


def _is_record(obj):
    return is_dataclass(obj) and not isinstance(obj, type)


def _encode(value):
    if _is_record(value):
        return to_document(value)
    if isinstance(value, list):
        return [_encode(element) for element in value]
    return value


def to_document(model):
    """Return the document (a plain dict) that stores ``model``."""
    if not _is_record(model):
        raise TypeError(f"not a record: {model!r}")
    document = {}
    for model_field in fields(model):
        value = getattr(model, model_field.name)
        if model_field.metadata.get("omitempty") and not value:
            continue
        document[_document_key(model_field)] = _encode(value)
    return document


def _decode(hint, value, key):
    if isinstance(hint, type) and is_dataclass(hint):
        if not isinstance(value, Mapping):
            raise TypeError(f"{key}: expected a document, got {type(value).__name__}")
        return from_document(hint, value)
    if get_origin(hint) is list:
        if not isinstance(value, (list, tuple)):
            raise TypeError(f"{key}: expected an array, got {type(value).__name__}")
        (element_hint,) = get_args(hint)
        return [_decode(element_hint, element, key) for element in value]
    if hint is float:
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            raise TypeError(f"{key}: expected a number, got {type(value).__name__}")
        return float(value)
    if hint is str and not isinstance(value, str):
        raise TypeError(f"{key}: expected a string, got {type(value).__name__}")
    if hint is bool and not isinstance(value, bool):
        raise TypeError(f"{key}: expected a boolean, got {type(value).__name__}")
    return value


def from_document(model_type, document):
    """Build a ``model_type`` record from a stored document.

    Keys the record does not know are ignored; missing or null keys leave
    the field at its default.
    """
    if not (isinstance(model_type, type) and is_dataclass(model_type)):
        raise TypeError(f"not a record type: {model_type!r}")
    values = {}
    for model_field in fields(model_type):
        key = _document_key(model_field)
        raw = document.get(key)
        if raw is None:
            continue
        values[model_field.name] = _decode(model_field.type, raw, key)
    missing = [
        f.name
        for f in fields(model_type)
        if f.name not in values and f.default is MISSING and f.default_factory is MISSING
    ]
    if missing:
        raise TypeError(f"missing fields: {', '.join(missing)}")
    return model_type(**values)