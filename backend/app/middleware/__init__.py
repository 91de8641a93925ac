# Middleware package init
"""
Booklist Backend - Middleware Package
======================================

Middleware Chain (order matters!):
    Request → [Request ID] → [Logging] → [CORS] → Route Handler

    1. Request ID first: every later log line can use it
    2. Logging: records status and duration with the request ID
    3. CORS: FastAPI's CORSMiddleware (preflight + exposed headers)
"""
