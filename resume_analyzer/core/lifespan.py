from contextlib import asynccontextmanager
import logging

from resume_analyzer.core.config import settings
from resume_analyzer.core.config.scoring import get_scoring_config
from resume_analyzer.reference import get_reference_data
from resume_analyzer.services.enrichment_llm import enrichment_llm_enabled

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app):
    reference = get_reference_data()
    get_scoring_config()
    logger.info(
        "reference_data_loaded roles=%s technologies=%s enrichment=%s proficiency_mode=%s",
        len(reference.roles),
        len(reference.known_technologies),
        settings.enrichment_enabled and enrichment_llm_enabled(),
        settings.proficiency_mode,
    )
    yield
