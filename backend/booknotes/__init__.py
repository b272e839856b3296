"""
Booknotes Backend

Share book summaries, like them, and discuss them in threaded comments.

Package Structure:
==================
    booknotes/
    ├── api/        ← FastAPI application
    ├── shared/     ← Shared code (models, services, etc.)
    └── config/     ← Configuration

Running the Application:
========================
    # API Server (from backend/)
    uvicorn booknotes.api.main:app --reload

    # Migrations (from backend/)
    alembic upgrade head
"""
