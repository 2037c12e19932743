"""
In-memory state of the outreach form.
"""

import logging
from typing import Optional

from .prompt_components import DEFAULT_FORM_VALUES, FIELD_NAMES

logger = logging.getLogger(__name__)


class UnknownFieldError(KeyError):
    """Raised when a field name is not one of the outreach form fields."""


class OutreachFormState:
    """Holds the current outreach form record, one value per field."""
    
    def __init__(self, initial: Optional[dict[str, str]] = None):
        values = DEFAULT_FORM_VALUES if initial is None else initial
        missing = [name for name in FIELD_NAMES if name not in values]
        extra = [name for name in values if name not in FIELD_NAMES]
        if missing or extra:
            raise ValueError(f"Form record mismatch (missing={missing}, unexpected={extra})")
        self._initial: dict[str, str] = {name: values[name] for name in FIELD_NAMES}
        self._record: dict[str, str] = dict(self._initial)
    
    def update(self, field_name: str, new_value: str) -> None:
        """Replace the value of a single field."""
        if field_name not in self._record:
            raise UnknownFieldError(field_name)
        self._record[field_name] = new_value
        logger.debug(f"Updated field {field_name} ({len(new_value)} chars)")
    
    def snapshot(self) -> dict[str, str]:
        """Return a copy of the current record."""
        return dict(self._record)
    
    def reset(self) -> None:
        """Restore the values the form was created with."""
        self._record = dict(self._initial)
