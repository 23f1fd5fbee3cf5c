"""
Internship Scraping Service (mock)

Real scraping is out of scope. Each source returns a fixed set of
listings; the rest of the pipeline is real:
1. Collect listings per source (a failing source is logged and skipped)
2. Clean text fields
3. Fill in required skills from the description when a listing has none
4. Store the results in the catalog
"""

import logging
import re
from typing import Callable, Dict, List, Optional

from copilot.schemas.schemas import Internship, InternshipBase
from copilot.services.storage_service import CatalogStorage

logger = logging.getLogger(__name__)

MAX_TEXT_LENGTH = 1000

KNOWN_SKILLS = [
    "React", "JavaScript", "TypeScript", "Node.js", "Python", "Java", "C++", "C#",
    "HTML", "CSS", "SQL", "MongoDB", "PostgreSQL", "AWS", "Docker", "Kubernetes",
    "Git", "REST API", "GraphQL", "Redux", "Vue.js", "Angular", "Express.js",
    "Django", "Flask", "Spring Boot", "TensorFlow", "PyTorch", "Machine Learning",
    "Data Science", "DevOps", "CI/CD", "Jenkins", "Ansible", "Terraform",
    "Firebase", "Redis", "Elasticsearch", "Kafka", "RabbitMQ",
]

_WHITESPACE_RE = re.compile(r"\s+")
_DISALLOWED_RE = re.compile(r"[^\w\s\-.,!?]")


def clean_text(value: str) -> str:
    """Collapse whitespace, drop unusual characters, cap the length."""
    value = _WHITESPACE_RE.sub(" ", value or "")
    value = _DISALLOWED_RE.sub("", value)
    return value.strip()[:MAX_TEXT_LENGTH]


def extract_skills(text: str) -> List[str]:
    """Known skills mentioned anywhere in the text (case-insensitive)."""
    lowered = (text or "").lower()
    return [skill for skill in KNOWN_SKILLS if skill.lower() in lowered]


def mock_listings(source: str) -> List[dict]:
    """Fixed listings standing in for a scraped job board."""
    return [
        {
            "title": "Software Engineering Intern",
            "company": "TechCorp Solutions",
            "location": "Remote",
            "stipend": "25000",
            "duration": "3-6 months",
            "requiredSkills": ["JavaScript", "React", "Node.js"],
            "description": "Join our team to build scalable web applications using modern technologies.",
            "source": source,
            "url": f"https://{source}.com/jobs/view/123",
        },
        {
            "title": "Data Science Intern",
            "company": "AI Innovations",
            "location": "San Francisco, CA",
            "stipend": "30000",
            "duration": "6 months",
            "requiredSkills": [],
            "description": "Work on cutting-edge Machine Learning projects with Python and SQL.",
            "source": source,
            "url": f"https://{source}.com/jobs/view/456",
        },
    ]


class ScrapingService:
    """Runs the mock scrape and stores what it finds."""

    def __init__(
        self,
        storage: CatalogStorage,
        fetcher: Optional[Callable[[str], List[dict]]] = None
    ):
        self.storage = storage
        self.fetcher = fetcher or mock_listings

    def process_listing(self, raw: Dict) -> InternshipBase:
        """Turn one raw listing into a clean catalog entry."""
        description = clean_text(raw.get("description", ""))
        skills = list(raw.get("requiredSkills") or []) or extract_skills(description)

        return InternshipBase(
            title=clean_text(raw.get("title", "")),
            company=clean_text(raw.get("company", "")),
            location=clean_text(raw.get("location", "")),
            stipend=str(raw.get("stipend", "")),
            duration=clean_text(raw.get("duration", "")),
            required_skills=skills,
            description=description,
            source=raw.get("source"),
            url=raw.get("url"),
        )

    def scrape_and_store(self, sources: List[str]) -> List[Internship]:
        """
        Scrape every source and store the cleaned listings.

        Returns:
            The stored internships (with ids)
        """
        logger.info("Starting internship scraping for sources: %s", ", ".join(sources))
        processed: List[InternshipBase] = []

        for source in sources:
            try:
                listings = self.fetcher(source)
            except Exception as e:
                logger.error("Error scraping %s: %s", source, e)
                continue
            processed.extend(self.process_listing(raw) for raw in listings)

        if not processed:
            logger.warning("Scraping produced no internships")
            return []

        stored = self.storage.add_internships(processed)
        logger.info("Stored %d scraped internships", len(stored))
        return stored
