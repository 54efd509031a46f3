from dataclasses import dataclass, field
from typing import Tuple


def _check_consistency(is_valid: bool, errors: Tuple[str, ...]) -> None:
    if is_valid == bool(errors):
        raise ValueError(
            f"errors must be empty iff the content is valid (is_valid={is_valid}, errors={errors!r})"
        )


@dataclass(frozen=True)
class ValidationOutcome:
    is_valid: bool
    errors: Tuple[str, ...] = ()

    def __post_init__(self) -> None:
        # accept any sequence, store a tuple
        object.__setattr__(self, "errors", tuple(self.errors))
        _check_consistency(self.is_valid, self.errors)


@dataclass(frozen=True)
class RepairResult:
    fixed_content: str
    is_valid: bool
    errors: Tuple[str, ...] = field(default=())
    was_modified: bool = False

    def __post_init__(self) -> None:
        object.__setattr__(self, "errors", tuple(self.errors))
        _check_consistency(self.is_valid, self.errors)

    @classmethod
    def from_validation(
        cls, fixed_content: str, outcome: ValidationOutcome, was_modified: bool
    ) -> "RepairResult":
        return cls(fixed_content, outcome.is_valid, outcome.errors, was_modified)

    def to_dict(self) -> dict:
        return {
            "fixedContent": self.fixed_content,
            "isValid": self.is_valid,
            "errors": list(self.errors),
            "wasModified": self.was_modified,
        }
