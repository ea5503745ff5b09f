"""Payload <-> record conversion and optional schema checks.

Payloads are JSON-style dicts with camelCase keys (``productId``,
``unitPrice``). Each record class gets a pair of pydantic request models
derived from its dataclass fields: a strict one (exact types, unknown keys
rejected) and a lenient one (lax coercion, unknown keys dropped). Only the
camelCase key of a field is read.

The stores never call into this module; the route layer runs
:func:`validate_payload` before an insert or replace when validation is on.
"""

from __future__ import annotations

from dataclasses import MISSING, asdict, fields
from functools import lru_cache
from typing import Any, Dict, List, Optional, Type, get_type_hints

from pydantic import BaseModel, ConfigDict, ValidationError, create_model
from pydantic.alias_generators import to_camel


class StrictPayload(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, extra="forbid", strict=True)


class LenientPayload(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, extra="ignore")


@lru_cache(maxsize=None)
def payload_model(cls: Type, strict: bool = True) -> Type[BaseModel]:
    hints = get_type_hints(cls)
    spec: Dict[str, Any] = {}
    for f in fields(cls):
        default = ... if f.default is MISSING else f.default
        spec[f.name] = (hints[f.name], default)
    base = StrictPayload if strict else LenientPayload
    return create_model(f"{cls.__name__}Payload", __base__=base, **spec)


def _issue(err: Dict[str, Any]) -> str:
    key = ".".join(str(p) for p in err["loc"])
    if err["type"] == "missing":
        return f"missing required field '{key}'"
    if err["type"] == "extra_forbidden":
        return f"unknown field '{key}'"
    return f"field '{key}': {err['msg']}"


def _check(cls: Type, payload: Any, strict: bool) -> tuple[Optional[BaseModel], List[str]]:
    if not isinstance(payload, dict):
        return None, ["payload must be an object"]
    try:
        return payload_model(cls, strict).model_validate(payload), []
    except ValidationError as exc:
        return None, [_issue(err) for err in exc.errors()]


def validate_payload(cls: Type, payload: Any) -> List[str]:
    """Return a list of problems with ``payload`` as a ``cls`` record; empty means valid."""
    return _check(cls, payload, strict=True)[1]


def from_payload(cls: Type, payload: Dict[str, Any], strict: bool = True) -> Any:
    """Build a ``cls`` record from a camelCase payload.

    Raises ValueError listing the issues if no record can be built.
    """
    model, issues = _check(cls, payload, strict)
    if issues:
        raise ValueError("; ".join(issues))
    return cls(**model.model_dump())


def to_payload(record: Any) -> Dict[str, Any]:
    return {to_camel(k): v for k, v in asdict(record).items()}


def id_key(cls: Type) -> str:
    return to_camel(cls.id_field)


def record_id_from_payload(cls: Type, payload: Dict[str, Any]) -> Optional[Any]:
    return payload.get(id_key(cls))
