"""Aliases API

Exposes the alias pipeline and the offline decliner over HTTP.
"""
import httpx
from fastapi import APIRouter, Depends, Query, Request
from pydantic import BaseModel

from rualias.core.config import Settings
from rualias.core.errors.handlers import raise_result
from rualias.engines import AliasPipeline, render_frontmatter
from rualias.languages.russian import RussianDeclensionEngine

router = APIRouter()


class AliasResponse(BaseModel):
    word: str
    aliases: list[str]
    needs_internet: bool
    is_offline: bool
    frontmatter: str


class CaseSetResponse(BaseModel):
    nominative: str | None
    genitive: str | None
    dative: str | None
    accusative: str | None
    instrumental: str | None
    prepositional: str | None


class DeclensionResponse(BaseModel):
    word: str
    singular: CaseSetResponse
    plural: CaseSetResponse | None


def get_pipeline(request: Request) -> AliasPipeline:
    settings: Settings = request.app.state.settings
    client: httpx.AsyncClient = request.app.state.http_client
    return AliasPipeline.from_settings(client, settings)


@router.get("/aliases", response_model=AliasResponse)
async def get_aliases(
    word: str = Query(..., min_length=1, max_length=200),
    offline: bool = Query(False),
    pipeline: AliasPipeline = Depends(get_pipeline),
):
    """Generate declension aliases for a word or phrase."""
    outcome = await pipeline.run(word, force_offline=offline)
    return AliasResponse(
        word=word,
        aliases=list(outcome.aliases),
        needs_internet=outcome.needs_internet,
        is_offline=outcome.is_offline,
        frontmatter=render_frontmatter(outcome),
    )


@router.get("/declension", response_model=DeclensionResponse)
async def get_offline_declension(word: str = Query(..., min_length=1, max_length=100)):
    """Decline a single word with the offline rule engine."""
    result = RussianDeclensionEngine().decline_result(word)
    raise_result(result)
    declension = result.unwrap()
    return DeclensionResponse(word=word, **declension.to_dict())
