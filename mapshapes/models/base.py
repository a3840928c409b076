"""Immutable model base shared by every value type."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict


class FrozenModel(BaseModel):
    """Frozen pydantic model whose copies go back through validation."""

    model_config = ConfigDict(frozen=True)

    def model_copy(self, *, update: dict[str, Any] | None = None, deep: bool = False):
        data = {name: getattr(self, name) for name in type(self).model_fields}
        data.update(update or {})
        copy = type(self).model_validate(data)
        return super(FrozenModel, copy).model_copy(deep=True) if deep else copy
