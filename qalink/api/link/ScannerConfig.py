"""Scanner configuration."""

from pydantic import BaseModel, ConfigDict, Field, field_validator

from ...constants import DEFAULT_HASH_MARKER, DEFAULT_PATH_SEGMENT


class ScannerConfig(BaseModel):
    """Options for extract_references."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    path_segment: str = Field(
        DEFAULT_PATH_SEGMENT,
        min_length=1,
        pattern=r"^[a-z_-]+$",
        description="Route segment preceding the ids in path-style references",
    )
    hash_marker: str = Field(
        DEFAULT_HASH_MARKER,
        min_length=1,
        max_length=1,
        description="Character introducing a hash-style reference",
    )
    scan_paths: bool = Field(True, description="Look for path-style references")
    scan_hashes: bool = Field(True, description="Look for hash-style references")

    @field_validator("hash_marker")
    @classmethod
    def _marker_not_token_char(cls, value: str) -> str:
        if value.isalnum() or value.isspace():
            raise ValueError(f"hash_marker must be punctuation (found: {value!r})")
        return value
