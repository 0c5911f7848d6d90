"""
Field rules for product create/edit.

validate_product() is the single source of truth for what a valid
product looks like. Both the web form and the API serializer call it
and report its errors back to the client.

Parsing and the length/digit limits come from Django's form fields;
their ValidationErrors are turned into FieldErrors here.
"""
from dataclasses import dataclass, field

from django import forms
from django.core.exceptions import ValidationError

NAME_MAX_LENGTH = 200
PRICE_MAX_DIGITS = 18
PRICE_DECIMAL_PLACES = 2

NAME_ERROR_MESSAGES = {
    'required': 'The Name field is required.',
    'max_length': 'Name must be at most %(limit_value)d characters.',
}

PRICE_ERROR_MESSAGES = {
    'required': 'The Price field is required.',
    'invalid': 'Price must be a number.',
    'max_digits': 'Price must have at most %(max)s digits.',
    'max_decimal_places': 'Price must have at most %(max)s decimal places.',
    'max_whole_digits': 'Price must have at most %(max)s digits before the decimal point.',
}


def name_field(**kwargs):
    """CharField carrying the product name rules"""
    return forms.CharField(max_length=NAME_MAX_LENGTH, error_messages=NAME_ERROR_MESSAGES, **kwargs)


def price_field(**kwargs):
    """DecimalField carrying the product price rules"""
    return forms.DecimalField(
        max_digits=PRICE_MAX_DIGITS,
        decimal_places=PRICE_DECIMAL_PLACES,
        error_messages=PRICE_ERROR_MESSAGES,
        **kwargs
    )


_name = name_field()
_price = price_field()


@dataclass(frozen=True)
class FieldError:
    field: str
    message: str


@dataclass
class ValidationResult:
    errors: list = field(default_factory=list)
    cleaned_data: dict = field(default_factory=dict)

    @property
    def is_valid(self):
        return not self.errors

    def add(self, field_name, message):
        self.errors.append(FieldError(field_name, message))

    def as_dict(self):
        """Group messages by field, e.g. {'name': ['The Name field is required.']}"""
        grouped = {}
        for error in self.errors:
            grouped.setdefault(error.field, []).append(error.message)
        return grouped


def _clean(field_name, form_field, value, result):
    try:
        return form_field.clean(value)
    except ValidationError as e:
        for message in e.messages:
            result.add(field_name, message)
        return None


def _clean_name(value, result):
    if value is not None and not isinstance(value, str):
        result.add('name', 'Name must be text.')
        return None
    return _clean('name', _name, value, result)


def _clean_price(value, result):
    # str(True) would otherwise reach the decimal parser as 'True'
    if isinstance(value, bool):
        result.add('price', PRICE_ERROR_MESSAGES['invalid'])
        return None
    if isinstance(value, str):
        value = value.strip()
    return _clean('price', _price, value, result)


def _clean_description(value, result):
    if value is None:
        return None
    if not isinstance(value, str):
        result.add('description', 'Description must be text.')
        return None
    return value


def validate_product(data):
    """
    Validate a mapping with name, price and description.
    Returns a ValidationResult; on success cleaned_data holds the
    normalized values (stripped name, Decimal price).
    """
    result = ValidationResult()
    cleaned = {
        'name': _clean_name(data.get('name'), result),
        'price': _clean_price(data.get('price'), result),
        'description': _clean_description(data.get('description'), result),
    }
    if result.is_valid:
        result.cleaned_data = cleaned
    return result
