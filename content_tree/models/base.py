"""Shared pydantic bases"""

from typing import Any, Dict

from pydantic import BaseModel, ConfigDict, model_validator


class PatchModel(BaseModel):
    """Partial update where only the fields sent by the caller are applied.

    Presence is tracked by pydantic's set-fields bookkeeping, so ``false``,
    ``""`` and ``[]`` are real values while omitted fields stay untouched.
    None of the patchable fields is nullable, so an explicit ``null`` is
    rejected instead of being treated as "absent".
    """

    model_config = ConfigDict(extra="forbid")

    @model_validator(mode="before")
    @classmethod
    def reject_explicit_null(cls, data: Any) -> Any:
        if isinstance(data, dict):
            nulls = sorted(
                key for key, value in data.items()
                if value is None and key in cls.model_fields
            )
            if nulls:
                raise ValueError(f"{', '.join(nulls)} may not be null")
        return data

    def changes(self) -> Dict[str, Any]:
        """Fields explicitly provided by the caller"""
        return self.model_dump(exclude_unset=True)
