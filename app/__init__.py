"""
Internship Match Portal
Browse, filter, save and apply to internships, with AI-assisted ranking.

Architecture:
- MongoDB: every record (listings, profiles, applications, saved items, notifications)
- Ranking service: OpenAI-compatible API, heuristic matching as fallback
- Auth: external provider, bearer tokens verified here
"""

__version__ = "1.0.0"
