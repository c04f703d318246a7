"""
Text generation endpoint for API v1.

Generation failures are not errors: the generator answers with a
fixed fallback sentence, which is returned with HTTP 200 like any
generated text.
"""

from typing import Dict

from fastapi import APIRouter, Depends, HTTPException, status

from site_admin_api.app.api.dependencies import get_content_generator
from site_admin_api.app.core.security import get_current_user
from site_admin_api.app.schemas.auth import GenerateRequest
from site_admin_api.app.services.ai_service import ContentGenerator

router = APIRouter()


@router.post("/generate", response_model=Dict[str, str])
async def generate_content(
    body: GenerateRequest,
    current_user: dict = Depends(get_current_user),
    generator: ContentGenerator = Depends(get_content_generator),
) -> Dict[str, str]:
    if not body.prompt or not body.prompt.strip():
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Prompt is required")
    content = await generator.generate(body.prompt)
    return {"content": content}
