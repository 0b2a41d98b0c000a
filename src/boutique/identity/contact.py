"""Validated contact details: email address and phone number."""

import re

from protean import invariant
from protean.exceptions import ValidationError
from protean.fields import String

from boutique.domain import boutique

_FORBIDDEN_EMAIL_CHARACTERS = (";", ",", "(", ")", '"', ":", "<", ">", "[", "]", "\\")


@boutique.value_object
class EmailAddress:
    """A structurally valid email address: one @, non-empty parts, dotted domain."""

    address: String(required=True, max_length=254)

    @invariant.post
    def verify_email_address(self):
        email = self.address

        if any(char.isspace() for char in email) or email.count("@") != 1:
            raise ValidationError({"address": [f"Invalid email address: {email!r}"]})

        local_part, domain_part = email.split("@", 1)

        if not local_part or local_part.startswith(".") or local_part.endswith("."):
            raise ValidationError({"address": [f"Invalid email address: {email!r}"]})

        if "." not in domain_part or domain_part.startswith(".") or domain_part.endswith("."):
            raise ValidationError({"address": [f"Invalid email address: {email!r}"]})

        if ".." in email or any(char in email for char in _FORBIDDEN_EMAIL_CHARACTERS):
            raise ValidationError({"address": [f"Invalid email address: {email!r}"]})


@boutique.value_object
class PhoneNumber:
    """Digits, spaces, hyphens and parentheses with an optional leading +."""

    number: String(required=True, max_length=20)

    @invariant.post
    def validate_phone_format(self):
        number = self.number

        if not re.search(r"\d", number) or not re.match(r"^\+?[\d\s\-()]+$", number):
            raise ValidationError({"number": [f"Invalid phone number: {number!r}"]})
