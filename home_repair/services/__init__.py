"""서비스 패키지 — 비즈니스 로직 계층.

Service package: Business logic layer between the routers and the
repositories. Converts ORM rows into response schemas and store outcomes into
write-result summaries.
"""
