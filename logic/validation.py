"""Pydantic schemas and helpers for validating agent and API payloads."""

from __future__ import annotations

from typing import Any, Dict, List, Literal, Optional

from pydantic import BaseModel, Field, ValidationError, field_validator

AddressAs = Literal["neutral", "male", "female"]


class DetectRequest(BaseModel):
    """Input for the classifiers. Any string is accepted, including empty ones."""

    image_uri: str = ""


class JudgeRequest(BaseModel):
    """Input contract for the outfit judge."""

    image_uri: str = Field(min_length=1)
    address_as: AddressAs = "neutral"

    @field_validator("address_as", mode="before")
    @classmethod
    def _lower_address(cls, value: Any) -> Any:
        return value.strip().lower() if isinstance(value, str) else value


class ChatSessionRequest(BaseModel):
    user_id: str = Field(min_length=1)


class ChatMessageRequest(BaseModel):
    message: str = Field(min_length=1)

    @field_validator("message")
    @classmethod
    def _reject_blank(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("message cannot be blank")
        return value.strip()


class DetectedOutfitPayload(BaseModel):
    """Transport shape of :class:`models.outfit.DetectedOutfit`."""

    top: Optional[str] = None
    bottom: Optional[str] = None
    dress: Optional[str] = None
    outer: Optional[str] = None
    footwear: Optional[str] = None
    accessories: List[str] = []
    raw_labels: List[str] = []
    confidence: float = Field(ge=0.0, le=1.0)
    items: List[str] = []


class JudgeResponse(BaseModel):
    status: Literal["ok", "error"]
    roast: str
    address_as: AddressAs
    items: List[str]
    detection: DetectedOutfitPayload


class ValidationResult(BaseModel):
    """Wrapper returned to agents when validation fails."""

    status: Literal["needs_review"] = "needs_review"
    message: str
    details: List[Dict[str, Any]]


def validation_failure(message: str, exc: ValidationError) -> Dict[str, Any]:
    """Translate Pydantic errors into a consistent review payload."""

    return ValidationResult(message=message, details=exc.errors(include_url=False)).model_dump()


__all__ = [
    "AddressAs",
    "ChatMessageRequest",
    "ChatSessionRequest",
    "DetectRequest",
    "DetectedOutfitPayload",
    "JudgeRequest",
    "JudgeResponse",
    "ValidationResult",
    "validation_failure",
]
