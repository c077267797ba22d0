"""공통 Pydantic 요청/응답 스키마 정의.

Common Pydantic schema definitions.
Includes the camelCase base model used on the wire and the write-result
summaries returned by insert/update/delete endpoints.
"""

from uuid import UUID

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """camelCase 직렬화 베이스 (Base model exchanging camelCase JSON).

    Python code uses snake_case field names; JSON uses camelCase aliases.
    Both spellings are accepted on input.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )


class InsertResult(CamelModel):
    """삽입 결과 요약 (Insert summary: {acknowledged, insertedId})."""

    acknowledged: bool = True
    inserted_id: UUID


class UpdateResult(CamelModel):
    """수정 결과 요약.

    Update summary. `upserted_id` is set only when the update created a new
    document because none matched.
    """

    acknowledged: bool = True
    matched_count: int
    modified_count: int
    upserted_count: int = 0
    upserted_id: UUID | None = None


class DeleteResult(CamelModel):
    """삭제 결과 요약 (Delete summary; deleted_count is 0 when nothing matched)."""

    acknowledged: bool = True
    deleted_count: int


class CountResponse(BaseModel):
    """전체 개수 응답 (Total document count)."""

    count: int


class MessageResponse(BaseModel):
    """단순 메시지 응답 (Plain message response)."""

    message: str
