"""Form Schemas — pydantic models that coerce and check raw form submissions.

Invariants:
    - validate_form() never raises for malformed input: it returns the coerced
      model or FormErrors, exactly one of the two
    - Every failing field is reported (no fail-fast); keys are form field names
    - Each field maps to ordered, de-duplicated human-readable messages
    - Unknown form keys are ignored
    - id (route) and date (server) are never accepted from invoice forms
    - Accepted invoice amounts convert to between 1 cent and the column maximum

Design Decisions:
    - Pydantic v2 with camelCase aliases: form keys match the HTML field names
      while Python attributes stay snake_case
    - FIELD_MESSAGES per schema replaces pydantic's technical messages with the
      copy shown next to each input; unmapped fields keep pydantic's message
"""

from typing import Any, ClassVar, Mapping, TypeVar

from pydantic import (
    BaseModel, ConfigDict, Field, ValidationError, field_validator,
)

from dashboard.core.action_results import FormErrors
from dashboard.core.domain_types import CustomerId, InvoiceStatus
from dashboard.core.invoice_rules import (
    MAX_AMOUNT, MIN_AMOUNT_IN_CENTS, to_minor_units,
)

FormT = TypeVar("FormT", bound="FormSchema")


class FormSchema(BaseModel):
    """Base for all form schemas — aliases in, extras dropped."""
    model_config = ConfigDict(extra="ignore", frozen=True)

    FIELD_MESSAGES: ClassVar[dict[str, str]] = {}


class InvoiceForm(FormSchema):
    """Fields shared by the create and update invoice forms."""
    customer_id: CustomerId = Field(alias="customerId", min_length=1)
    amount: float = Field(gt=0, le=MAX_AMOUNT, allow_inf_nan=False)
    status: InvoiceStatus

    FIELD_MESSAGES: ClassVar[dict[str, str]] = {
        "customerId": "Please select a customer.",
        "amount": "Please enter an amount greater than $0.",
        "status": "Please select an invoice status.",
    }

    @field_validator("amount")
    @classmethod
    def at_least_one_cent(cls, v: float) -> float:
        if to_minor_units(v) < MIN_AMOUNT_IN_CENTS:
            raise ValueError("amount rounds to zero cents")
        return v


class RegistrationForm(FormSchema):
    name: str
    email: str
    password: str
    confirm_password: str = Field(alias="confirmPassword")

    FIELD_MESSAGES: ClassVar[dict[str, str]] = {
        "name": "Please enter your name.",
        "email": "Please enter an email address.",
        "password": "Please enter a password.",
        "confirmPassword": "Please confirm your password.",
    }


class LoginCredentials(FormSchema):
    """Credentials accepted by the credentials sign-in provider."""
    email: str = Field(pattern=r"^[^@\s]+@[^@\s]+$")
    password: str = Field(min_length=6)


def validate_form(
    schema: type[FormT], data: Mapping[str, Any], message: str,
) -> FormT | FormErrors:
    """Validate `data` against `schema`. Pure — failures become FormErrors."""
    try:
        return schema.model_validate(dict(data))
    except ValidationError as exc:
        return FormErrors(
            errors=collect_field_errors(schema, exc), message=message,
        )


def collect_field_errors(
    schema: type[FormSchema], exc: ValidationError,
) -> dict[str, list[str]]:
    """Group pydantic errors by top-level field, preserving first-seen order."""
    errors: dict[str, list[str]] = {}
    for e in exc.errors():
        field = str(e["loc"][0]) if e["loc"] else "form"
        text = schema.FIELD_MESSAGES.get(field, e["msg"])
        messages = errors.setdefault(field, [])
        if text not in messages:
            messages.append(text)
    return errors
