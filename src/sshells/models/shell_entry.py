"""On-disk configuration record for a shell."""

from pydantic import BaseModel, Field


class ShellEntry(BaseModel):
    """One object of the JSON array stored in config.json."""

    name: str = Field(min_length=1)
    path: str
    args: list[str] = Field(default_factory=list)
