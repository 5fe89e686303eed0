"""
Human review of education inferences.

A reviewer approves, rejects or modifies the inference attached to a record.
These are the only functions that set ``applied``; the inference engine
itself never does.
"""
from __future__ import annotations

from dataclasses import replace
from datetime import datetime, timezone
import logging
from typing import Dict, Iterable, List, Literal, Optional

from representantes.config import DEFAULT_HIGH_CONFIDENCE
from representantes.model import Record

logger = logging.getLogger(__name__)

ReviewAction = Literal["approve", "reject", "modify"]
REVIEW_ACTIONS = ("approve", "reject", "modify")
InferenceStatus = Literal["pending", "approved", "rejected", "all"]


class ReviewError(ValueError):
    """Raised when a review decision cannot be applied to a record."""


def _now_iso() -> str:
    return datetime.now(timezone.utc).isoformat()


def review_inference(
    record: Record,
    action: ReviewAction,
    reviewed_by: str,
    modified_education: Optional[str] = None,
    reviewed_at: Optional[str] = None,
) -> Record:
    """
    Apply a review decision and return the updated record.

    Args:
        record: Record carrying an education_inference.
        action: 'approve', 'reject' or 'modify'.
        reviewed_by: Reviewer identity.
        modified_education: Replacement education text, required for 'modify'.
        reviewed_at: ISO timestamp; defaults to now (UTC).

    Returns:
        Record: New record with the reviewed inference.

    Raises:
        ReviewError: If there is no inference, no reviewer, an unknown action,
            or 'modify' without modified_education.
    """
    inference = record.education_inference
    if inference is None:
        raise ReviewError(f"No inference to review for {record.nombre_completo}")
    if not reviewed_by or not reviewed_by.strip():
        raise ReviewError("reviewed_by is required")
    if action not in REVIEW_ACTIONS:
        raise ReviewError(f"Invalid action {action!r}; expected one of {', '.join(REVIEW_ACTIONS)}")
    if action == "modify" and not (modified_education and modified_education.strip()):
        raise ReviewError("modified_education is required for the 'modify' action")

    reviewed_at = reviewed_at or _now_iso()
    if action == "approve":
        reviewed = replace(inference, approved=True, applied=True, reviewed_by=reviewed_by, reviewed_at=reviewed_at)
    elif action == "reject":
        reviewed = replace(inference, approved=False, applied=False, reviewed_by=reviewed_by, reviewed_at=reviewed_at)
    else:
        reviewed = replace(
            inference,
            inferred_education=modified_education,
            approved=True,
            applied=True,
            reviewed_by=reviewed_by,
            reviewed_at=reviewed_at,
        )
    logger.info(f"Inference for {record.nombre_completo} reviewed ({action}) by {reviewed_by}")
    return replace(record, education_inference=reviewed)


def filter_inferences(
    records: Iterable[Record],
    status: InferenceStatus = "all",
    min_confidence: Optional[float] = None,
) -> List[Record]:
    """
    Records carrying an inference, filtered and sorted by confidence (highest first).

    Args:
        records: Records to scan.
        status: 'pending', 'approved', 'rejected' or 'all'.
        min_confidence: Keep only inferences at or above this confidence.
    """
    selected = [r for r in records if r.education_inference is not None]
    if min_confidence is not None:
        selected = [r for r in selected if r.education_inference.confidence >= min_confidence]
    if status != "all":
        selected = [r for r in selected if r.education_inference.status == status]
    return sorted(selected, key=lambda r: r.education_inference.confidence, reverse=True)


def inference_summary(records: Iterable[Record], high_confidence: float = DEFAULT_HIGH_CONFIDENCE) -> Dict[str, int]:
    """Counts of inferences by review status, plus how many are high confidence."""
    inferences = [r.education_inference for r in records if r.education_inference is not None]
    return {
        'total': len(inferences),
        'pending': sum(1 for i in inferences if i.status == "pending"),
        'approved': sum(1 for i in inferences if i.status == "approved"),
        'rejected': sum(1 for i in inferences if i.status == "rejected"),
        'high_confidence': sum(1 for i in inferences if i.confidence >= high_confidence),
    }
