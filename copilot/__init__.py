"""
Student Co-Pilot
Career guidance for students: internship matching, project
recommendations and skill-gap reports.

Architecture:
- Storage: in-memory or SQL (SQLAlchemy), chosen by settings
- Matching engine: overlap scoring with an injected random source
"""

__version__ = "1.0.0"
