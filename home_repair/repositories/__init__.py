"""레포지토리 패키지 — 데이터베이스 쿼리 계층.

Repository package: Document store adapter layer.
One repository per collection (`services`, `bookedServices`), each extending
BaseRepository for generic CRUD and adding collection-specific queries.
"""
