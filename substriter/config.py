"""Configuration management for substriter."""

import codecs

from pydantic import BaseModel, ConfigDict, Field, field_validator


class SubstrConfig(BaseModel):
    """Configuration for window extraction from the command line."""

    model_config = ConfigDict(frozen=True)

    size: int = Field(default=3, description="Window size in characters")
    encoding: str = Field(default="utf-8", description="Encoding of input files")
    output_format: str = Field(default="lines", description="Output format: lines or json")
    unique: bool = Field(default=False, description="Drop repeated windows, keeping first occurrences")

    @field_validator("size")
    @classmethod
    def validate_size(cls, v):
        if v < 1:
            raise ValueError("size must be at least 1")
        return v

    @field_validator("encoding")
    @classmethod
    def validate_encoding(cls, v):
        try:
            codecs.lookup(v)
        except LookupError:
            raise ValueError(f"unknown encoding: {v}")
        return v

    @field_validator("output_format")
    @classmethod
    def validate_output_format(cls, v):
        if v not in ("lines", "json"):
            raise ValueError("output_format must be 'lines' or 'json'")
        return v
