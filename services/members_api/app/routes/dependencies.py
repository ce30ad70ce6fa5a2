from fastapi import Depends

from ..config.settings import Settings, get_settings
from ..services.scraper import MemberScraper
from ..utils.http_client import upstream_http_client

def get_member_scraper(settings: Settings = Depends(get_settings)):
    return MemberScraper(client=upstream_http_client, settings=settings)
