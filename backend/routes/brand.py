# backend/routes/brand.py
from fastapi import APIRouter, Depends, Request

from backend.schema import CheckBrandIn, CheckResult, HealthOut, SuccessEnvelope
from backend.services.check_service import BrandCheckService, health_info

router = APIRouter(tags=["brand"])


def get_check_service(request: Request) -> BrandCheckService:
    return request.app.state.check_service


@router.get("/health")
def health(request: Request):
    """Infos statiques: modèle principal, modèles candidats, température."""
    out: HealthOut = health_info(request.app.state.settings)
    return out.model_dump(by_alias=True)


@router.post("/check-brand")
def check_brand(body: CheckBrandIn, service: BrandCheckService = Depends(get_check_service)):
    """
    Pose le prompt à Gemini puis cherche la marque dans la réponse.
    400 si prompt / brandName manquant ou vide; sinon toujours 200.
    """
    result = service.check(body.prompt, body.brand_name)
    return SuccessEnvelope[CheckResult](data=result).model_dump(by_alias=True)
