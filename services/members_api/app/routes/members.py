from fastapi import APIRouter, Depends

from .dependencies import get_member_scraper
from ..schemas import MembersResponse, ErrorResponse
from ..services.scraper import MemberScraper

router = APIRouter()

@router.get(
    "/api/members",
    response_model=MembersResponse,
    summary="List Organization Members",
    description="Scrapes the organization's members page and returns one record per member card, in page order.",
    responses={500: {"model": ErrorResponse, "description": "Upstream unreachable, non-200 or unparseable"}},
)
async def get_members(scraper: MemberScraper = Depends(get_member_scraper)) -> MembersResponse:
    return MembersResponse(members=await scraper.get_members())
