"""
Field normalization for ingested task rows.

Maps free-text cells onto the canonical tag, segment and impact vocabularies.
Every coercion to a fallback value is logged so data-quality problems stay
visible.
"""

import logging
from typing import Optional

from ..models.task import Impact
from ..utils.text import normalize_string
from .config import DEFAULT_INGESTION_CONFIG, IngestionConfig

logger = logging.getLogger(__name__)


def normalize_segment(
    raw: Optional[str],
    config: IngestionConfig = DEFAULT_INGESTION_CONFIG,
) -> Optional[str]:
    """Canonical segment for raw (blank counts as unrecognised), the fallback, or None."""
    if raw is None:
        return None
    key = normalize_string(raw)
    canonical = config.segment_aliases.get(key)
    if canonical:
        return canonical
    if config.fallback_segment:
        logger.warning("Unrecognised segment %r coerced to %r", raw, config.fallback_segment)
    else:
        logger.warning("Unrecognised segment %r dropped", raw)
    return config.fallback_segment


def normalize_tag(
    raw: Optional[str],
    config: IngestionConfig = DEFAULT_INGESTION_CONFIG,
) -> Optional[str]:
    """Canonical tag for raw (blank counts as unrecognised), the fallback, or None."""
    if raw is None:
        return None
    key = normalize_string(raw)
    canonical = config.tag_aliases.get(key)
    if canonical:
        return canonical
    if config.fallback_tag:
        logger.warning("Unrecognised tag %r coerced to %r", raw, config.fallback_tag)
    else:
        logger.warning("Unrecognised tag %r dropped", raw)
    return config.fallback_tag


def normalize_impact(
    raw: Optional[str],
    config: IngestionConfig = DEFAULT_INGESTION_CONFIG,
) -> Impact:
    """Impact for raw (case-insensitive); default_impact when blank or unknown."""
    impact = Impact.parse(raw)
    if impact is not None:
        return impact
    if normalize_string(raw):
        logger.warning("Unrecognised impact %r defaulted to %s", raw, config.default_impact.value)
    return config.default_impact


def find_image_for_task(
    title: str,
    config: IngestionConfig = DEFAULT_INGESTION_CONFIG,
) -> str:
    """Image for a task title (case-insensitive exact match), else default_image."""
    wanted = normalize_string(title)
    for key, url in config.image_map.items():
        if normalize_string(key) == wanted:
            return url
    return config.default_image
