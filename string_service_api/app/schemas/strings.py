"""
Pydantic schemas for the string operations.

Both operations take the same ``{"s": ...}`` request shape.  The
uppercase response carries its business error as a plain string in
``err`` because exceptions do not serialise to JSON; the field is left
out of the body when there is no error.

All models are frozen and implement ``render()`` so that they can be
used with :func:`~string_service_api.app.core.middleware.logging_middleware`.
"""

from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field, model_validator


class RenderableModel(BaseModel):
    """Immutable model with a compact ``name(field=value, ...)`` rendering."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    @model_validator(mode="before")
    @classmethod
    def fold_keys(cls, data: Any) -> Any:
        """Match JSON keys to fields ignoring case and treat ``null`` as absent.

        A ``null`` document decodes to the defaults, and a ``null`` value
        for a field with a default is skipped.  When several keys fold onto
        the same field the last non‑null one wins.
        """
        if data is None:
            return {}
        if not isinstance(data, dict):
            return data
        fields = {name.lower(): name for name in cls.model_fields}
        folded = {}
        for key, value in data.items():
            name = fields.get(key.lower()) if isinstance(key, str) else None
            if name is None:
                continue
            if value is None and not cls.model_fields[name].is_required():
                continue
            folded[name] = value
        return folded

    def render(self) -> str:
        fields = ", ".join(
            f"{name}={value!r}" for name, value in self.model_dump(exclude_none=True).items()
        )
        return f"{type(self).__name__}({fields})"


class UppercaseRequest(RenderableModel):
    """Body of ``POST /uppercase``."""

    s: str = Field("", description="String to upper‑case")


class UppercaseResponse(RenderableModel):
    """Result of ``POST /uppercase``.

    ``v`` is always present; it is empty when ``err`` is set.
    """

    v: str = Field(..., description="Upper‑cased input")
    err: Optional[str] = Field(None, description="Business error, omitted when empty")


class CountRequest(RenderableModel):
    """Body of ``POST /count``."""

    s: str = Field("", description="String whose characters are counted")


class CountResponse(RenderableModel):
    """Result of ``POST /count``."""

    v: int = Field(..., description="Number of characters in the input")
