from fastapi import APIRouter

from app.taxonomy import get_default_term_catalog

router = APIRouter()


@router.get("/health", summary="Health Check", description="Report service status and the loaded term catalog size.")
async def health_check():
    catalog = get_default_term_catalog()
    return {
        "status": "healthy",
        "service": "resume-matcher",
        "multi_word_terms": len(catalog.multi_word_technical_terms()),
    }
