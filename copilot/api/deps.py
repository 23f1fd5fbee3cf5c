"""
FastAPI dependencies - shared storage, random source and services.

Tests swap these out with app.dependency_overrides.
"""

import random
from functools import lru_cache

from fastapi import Depends

from copilot.core.config import get_settings
from copilot.services.career_service import CareerService
from copilot.services.scraping_service import ScrapingService
from copilot.services.skill_gap_service import SkillGapAnalyzer, load_role_requirements
from copilot.services.storage_service import CatalogStorage, MemoryStorage, SqlStorage


@lru_cache()
def get_storage() -> CatalogStorage:
    """Process-wide store chosen by settings.storage_backend"""
    settings = get_settings()
    if settings.storage_backend == "sql":
        return SqlStorage(seed=settings.seed_sample_data)
    return MemoryStorage(seed=settings.seed_sample_data)


@lru_cache()
def get_rng() -> random.Random:
    """Shared random source; seeded when RANDOM_SEED is set"""
    return random.Random(get_settings().random_seed)


@lru_cache()
def get_skill_gap_analyzer() -> SkillGapAnalyzer:
    settings = get_settings()
    return SkillGapAnalyzer(
        role_requirements=load_role_requirements(settings.role_requirements_path),
        default_role=settings.default_role,
    )


def get_career_service(
    storage: CatalogStorage = Depends(get_storage),
    rng: random.Random = Depends(get_rng),
    analyzer: SkillGapAnalyzer = Depends(get_skill_gap_analyzer),
) -> CareerService:
    return CareerService(storage=storage, rng=rng, analyzer=analyzer)


def get_scraping_service(storage: CatalogStorage = Depends(get_storage)) -> ScrapingService:
    return ScrapingService(storage)
