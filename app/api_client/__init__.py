"""
Job marketplace API client

- MarketplaceApi: requests 기반 HTTP 세션 (Bearer 토큰)
- JobApiService: REST 핸들러 1:1 대응 메서드
- JobStore / CommentStore: 읽기 캐시 (변경 시 무효화/로컬 패치)
"""

from api_client.cache import CommentStore, JobStore
from api_client.session import ApiError, MarketplaceApi
from api_client.services import JobApiService

__all__ = ["ApiError", "CommentStore", "JobApiService", "JobStore", "MarketplaceApi"]
