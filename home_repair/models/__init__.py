"""SQLAlchemy ORM 모델 패키지 — 모든 도메인 모델의 중앙 임포트 지점.

SQLAlchemy ORM models package: Central import point for all domain models.
Importing from this package registers every table with the metadata used by
Alembic and the test fixtures.

Modules:
    service: 제공자 서비스 (Provider service listings)
    booking: 예약 스냅샷 (Booked service snapshots)
"""

from home_repair.models.service import Service
from home_repair.models.booking import BookedService

__all__ = ["Service", "BookedService"]
