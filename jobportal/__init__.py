"""
Job Portal
Recruitment backend: job seekers, companies, job posts and applications.

Architecture:
- EntityStore: six independent key-value maps (memory / MongoDB / SQL)
- Managers: validation, ownership and cross-entity integrity checks
- FastAPI: thin HTTP layer, caller identity from JWT bearer tokens
"""

__version__ = "1.0.0"
