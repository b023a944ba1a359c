"""Link request models."""

from pydantic import BaseModel, ConfigDict, Field, model_validator


def _as_line(value) -> int | None:
    """Integer value of a line number given as int or digit string, else None."""
    if isinstance(value, int):
        return value
    if isinstance(value, str) and value.strip().isdigit():
        return int(value)
    return None


class Selection(BaseModel):
    """A line selection in the current file, 1-based and inclusive."""

    model_config = ConfigDict(frozen=True)

    start: int = Field(ge=1)
    end: int | None = Field(default=None, ge=1)

    @model_validator(mode="before")
    @classmethod
    def _normalize(cls, data):
        # Editors report backwards selections with the cursor first
        if isinstance(data, dict):
            start, end = _as_line(data.get("start")), _as_line(data.get("end"))
            if start is not None and end is not None:
                if end < start:
                    start, end = end, start
                if end == start:
                    end = None
                data = {**data, "start": start, "end": end}
        return data

    @property
    def is_range(self) -> bool:
        return self.end is not None

    @property
    def line_start(self) -> int:
        return self.start

    @property
    def line_end(self) -> int | None:
        return self.end

    @classmethod
    def parse(cls, value: str) -> "Selection":
        """Parse ``"N"`` or ``"N:M"`` into a selection."""
        start, sep, end = value.strip().partition(":")
        try:
            if sep:
                return cls(start=int(start), end=int(end))
            return cls(start=int(start))
        except ValueError as e:
            raise ValueError(f"Invalid line selection: {value!r}") from e


class LinkRequest(BaseModel):
    """Everything needed to format one permalink."""

    model_config = ConfigDict(frozen=True)

    remote_url: str
    path: str
    revision: str
    selection: Selection | None = None
