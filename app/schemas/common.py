"""
Common Pydantic schemas and field types
"""

from decimal import Decimal
from typing import Annotated, Any, Dict, List, Optional

from pydantic import AfterValidator, AnyHttpUrl, BaseModel, StringConstraints, TypeAdapter, condecimal
from pydantic.alias_generators import to_camel

# Required text must carry something other than whitespace
RequiredText = Annotated[str, StringConstraints(strip_whitespace=True, min_length=1)]


def _to_cents(value: Decimal) -> Decimal:
    return value.quantize(Decimal("0.01"))


Money = Annotated[condecimal(ge=0, max_digits=10, decimal_places=2), AfterValidator(_to_cents)]

_http_url = TypeAdapter(AnyHttpUrl)


def blank_to_none(value: Any) -> Any:
    """Forms submit "" for untouched optional inputs"""
    if isinstance(value, str) and not value.strip():
        return None
    return value


def reject_null(value: Any) -> Any:
    if value is None:
        raise ValueError("may not be null")
    return value


def check_website(value: Optional[str]) -> Optional[str]:
    if value is None:
        return None
    try:
        _http_url.validate_python(value)
    except ValueError:
        raise ValueError("Invalid URL") from None
    return value


class CamelModel(BaseModel):
    """Snake_case in Python, camelCase on the wire"""

    class Config:
        alias_generator = to_camel
        populate_by_name = True
        from_attributes = True


class PartialUpdate(CamelModel):
    """Base for update payloads: only the fields present in the request are applied"""

    def changes(self) -> Dict[str, Any]:
        return self.model_dump(exclude_unset=True)


class FieldViolation(BaseModel):
    """A single field-level validation failure"""
    field: str
    message: str
    type: Optional[str] = None


class ErrorResponse(BaseModel):
    """Error response schema"""
    message: str
    errors: Optional[List[Any]] = None


class MessageResponse(BaseModel):
    """Confirmation response"""
    message: str
