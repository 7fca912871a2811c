"""
Ownership-gated mutation

Job/Comment/Reply의 수정·삭제는 모두 같은 3단계 검사를 거칩니다.

1) id로 조회 (없으면 NOT_FOUND)
2) 저장된 소유자/작성자 id와 요청자 id 비교 (다르면 FORBIDDEN)
3) 통과 시 인스턴스 반환
"""

from __future__ import annotations

from typing import Any, ClassVar, Protocol

from common.application.result import Err, ErrorCode, Ok, Result
from django.db import models


class OwnedResource(Protocol):
    # 소유자 id가 저장된 속성 이름 (예: "owner_id", "author_id")
    owner_field: ClassVar[str]


def authorize_mutation(resource: OwnedResource, requester: Any) -> bool:
    requester_id = getattr(requester, "pk", None)
    if requester_id is None:
        return False
    return getattr(resource, resource.owner_field) == requester_id


def load_for_mutation(
    model: type[models.Model], pk: int, requester: Any, *, action: str
) -> Result[models.Model]:
    label = str(model._meta.verbose_name)
    instance = model.objects.filter(pk=pk).first()
    if instance is None:
        return Err(code=ErrorCode.NOT_FOUND, message=f"{label.capitalize()} not found")

    if not authorize_mutation(instance, requester):
        return Err(
            code=ErrorCode.FORBIDDEN,
            message=f"You do not have permission to {action} this {label}",
        )

    return Ok(instance)
