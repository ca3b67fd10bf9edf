"""
Notes API - Middleware Package
===============================

Middleware Chain (order matters!):
    Request → [Request ID] → [Logging] → [CORS] → Route Handler

    1. Request ID first so every later log line can carry it
    2. Logging measures status and duration of everything downstream
    3. CORS answers preflight requests (FastAPI's CORSMiddleware)
"""
