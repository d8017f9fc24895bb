"""
Configuration for loading task records from a delimited text file.

Holds column names, tag/segment alias tables, and the fallbacks applied to
unrecognised values. Setting fallback_tag or fallback_segment to None drops
unrecognised values instead of coercing them.
"""

from typing import Any, Dict, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from ..models.task import Impact
from ..utils.text import normalize_string

DEFAULT_IMAGE = "/images/default-task.jpg"

DEFAULT_TAG_ALIASES: Dict[str, str] = {
    "travel and mobility": "Travel and mobility",
    "social and dining": "Social and dining",
    "health and fitness": "Health and Fitness",
    "work and career": "Work and Career",
    "international living": "International Living",
    "event planning": "Event Planning",
    "wedding planning": "Wedding Planning",
    "pregnancy and baby": "Pregnancy and Baby",
    "pet care": "Pet Care",
    "relocation": "Relocation",
    "entertainment": "Entertainment",
}

DEFAULT_SEGMENT_ALIASES: Dict[str, str] = {
    "single": "Single",
    "couple": "Couple",
    "parent": "Parents",
    "parents": "Parents",
}

DEFAULT_IMAGE_MAP: Dict[str, str] = {
    "Book a flight": "/images/book-flight.jpg",
    "Reserve a restaurant table": "/images/restaurant.jpg",
    "Book a gym class": "/images/gym.jpg",
    "Find a wedding venue": "/images/wedding-venue.jpg",
    "Book a vet appointment": "/images/vet.jpg",
    "Hire movers": "/images/movers.jpg",
}


class IngestionConfig(BaseModel):
    """Column names, alias tables, and fallbacks for CSV ingestion."""

    model_config = ConfigDict(frozen=True)

    # Source columns
    title_column: str = "Tasks"
    time_column: str = "Time(in hrs)"
    tags_column: str = "Tags"
    impact_column: str = "Impact"
    segments_column: str = "Status categories"
    list_separator: str = ","

    # normalized variant -> canonical value
    tag_aliases: Dict[str, str] = Field(
        default_factory=lambda: dict(DEFAULT_TAG_ALIASES), validate_default=True
    )
    segment_aliases: Dict[str, str] = Field(
        default_factory=lambda: dict(DEFAULT_SEGMENT_ALIASES), validate_default=True
    )

    # Applied to unrecognised values; None drops them instead
    fallback_tag: Optional[str] = "Health and Fitness"
    fallback_segment: Optional[str] = "Single"

    # Defaults for missing cells
    default_title: str = "Untitled Task"
    default_impact: Impact = Impact.LOW
    id_prefix: str = "task-"

    # Title -> image URL (case-insensitive exact match)
    image_map: Dict[str, str] = Field(default_factory=lambda: dict(DEFAULT_IMAGE_MAP))
    default_image: str = DEFAULT_IMAGE

    @field_validator("tag_aliases", "segment_aliases", mode="before")
    @classmethod
    def _normalize_alias_keys(cls, value: Any) -> Any:
        if not isinstance(value, dict):
            return value
        return {normalize_string(k): v for k, v in value.items()}


DEFAULT_INGESTION_CONFIG = IngestionConfig()
