"""Enumeration types for generated forms."""

from enum import StrEnum


class FormOrigin(StrEnum):
    """Which branch of the generator produced a set of forms.

    - FULL_FORM_EXCEPTION: stem matched a full-form exception entry
    - PREDICTABLE_SUFFIX_EXCEPTION: stem matched a predictable-suffix category
    - REGULAR: regular suffixes plus stem changes
    """

    FULL_FORM_EXCEPTION = "exception:full_form"
    PREDICTABLE_SUFFIX_EXCEPTION = "exception:predictable_suffix"
    REGULAR = "regular"
