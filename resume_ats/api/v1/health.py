from fastapi import APIRouter

from resume_ats.engine import get_default_scoring_rules

router = APIRouter()


@router.get("/health", summary="Health Check", description="Check that the API is up and the scoring rules load.")
async def health_check():
    rules = get_default_scoring_rules()
    return {"status": "healthy", "score_weights": rules.weights.model_dump()}
