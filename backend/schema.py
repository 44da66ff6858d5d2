# backend/schema.py
from __future__ import annotations
from typing import Generic, List, Literal, Optional, TypeVar
from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

T = TypeVar("T")


class CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


# ---------- Check brand ----------
class CheckBrandIn(CamelModel):
    # Optionnels ici: l'absence est signalée par validate_check_request (400), pas par un 422
    prompt: Optional[str] = Field(None, description="Prompt envoyé au modèle")
    brand_name: Optional[str] = Field(None, description="Marque à rechercher dans la réponse")


class CheckResult(CamelModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, frozen=True)

    prompt: str
    brand_name: str
    mentioned: Literal["Yes", "No"]
    position: Optional[int] = None
    generated_text: str
    used_fallback: bool = False
    error_occurred: bool = False


class SuccessEnvelope(BaseModel, Generic[T]):
    success: Literal[True] = True
    data: T


class ErrorEnvelope(BaseModel):
    success: Literal[False] = False
    error: str


# ---------- Health ----------
class HealthOut(CamelModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, protected_namespaces=())

    status: str = "ok"
    model: Optional[str] = None
    model_options: List[str] = Field(default_factory=list)
    temperature: float
