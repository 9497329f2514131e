"""
Melonbar Core Package

Exchange-agnostic request/response layer for the REST client:
- guard: Precondition checks shared by every layer
- http: Request model, response wrapper, post-processor type and client contract
- postprocessing: Processors turning raw responses into typed values
- schemas: Pydantic models for candles and pagination cursors
- config / logging: Settings and the shared logger
"""
