import copy
from typing import Optional

from allen.core.domain import Domain
from allen.core.validation import IntervalValidator

ON_EMPTY_OPTIONS = ("raise", "null")


class ClassificationConfig:
    """Configuration for classifying interval pairs held in a DataFrame"""

    def __init__(
        self,
        left_start_field: str = "left_start",
        left_end_field: str = "left_end",
        right_start_field: str = "right_start",
        right_end_field: str = "right_end",
        relation_field: str = "relation",
        inclusive: str = "left",
        domain: Optional[Domain] = None,
        on_empty: str = "raise",
        parse_timestamps: bool = False,
    ):
        self.left_start_field = left_start_field
        self.left_end_field = left_end_field
        self.right_start_field = right_start_field
        self.right_end_field = right_end_field
        self.relation_field = relation_field
        self.inclusive = inclusive
        self.domain = domain
        self.on_empty = on_empty
        self.parse_timestamps = parse_timestamps
        self._validate()

    def _validate(self) -> None:
        """Validate field names and behaviour options"""
        for field in self.boundary_fields + (self.relation_field,):
            if not isinstance(field, str) or not field:
                raise ValueError(f"Field names must be non-empty strings, got {field!r}")

        if self.relation_field in self.boundary_fields:
            raise ValueError(
                f"relation_field {self.relation_field!r} clashes with a boundary field"
            )

        IntervalValidator.validate_inclusive(self.inclusive)

        if self.domain is not None and not isinstance(self.domain, Domain):
            raise ValueError(f"domain must be a Domain, got {self.domain!r}")

        if self.on_empty not in ON_EMPTY_OPTIONS:
            raise ValueError(
                f"on_empty must be one of {ON_EMPTY_OPTIONS}, got {self.on_empty!r}"
            )

    def with_domain(self, domain: Domain) -> "ClassificationConfig":
        """Returns a copy of this configuration fixed to ``domain``"""
        config = copy.copy(self)
        config.domain = domain
        config._validate()
        return config

    @property
    def boundary_fields(self) -> tuple:
        return (
            self.left_start_field,
            self.left_end_field,
            self.right_start_field,
            self.right_end_field,
        )
