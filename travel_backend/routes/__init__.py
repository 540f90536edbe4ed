"""
FastAPI routers for all API endpoints.

Each module defines a router mounted under /api:
- health: GET /api/health
- questions: GET /api/questions
- recommendations: POST /api/recommend
"""
