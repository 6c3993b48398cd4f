"""Factory that assembles the pantry assistant at start-up.

This module provides ``create_assistant`` which:
- Configures logging from settings
- Loads the static lookup tables once
- Builds the stateless engine services
- Optionally seeds an empty record store
"""

from __future__ import annotations

from pantry.assistant import PantryAssistant
from pantry.core.config import Settings, get_settings
from pantry.database.repositories import InMemoryPantryRepository
from pantry.observability.logging import get_logger, setup_logging
from pantry.services.matching import MatchingService
from pantry.services.pairings import PairingService, load_pairing_rules
from pantry.services.shopping import load_shopping_list_service
from pantry.services.substitution import load_substitution_table


logger = get_logger(__name__)


def create_assistant(
    settings: Settings | None = None,
    repository: InMemoryPantryRepository | None = None,
    *,
    configure_logging: bool = True,
) -> PantryAssistant:
    """Create a fully wired ``PantryAssistant``.

    Args:
        settings: Optional settings override. If not provided, uses get_settings().
        repository: Optional record store. A new in-memory store is created
            (and seeded per ``settings.seed``) when omitted.
        configure_logging: Install the Loguru sinks described by settings.

    Raises:
        RuleTableError: If a lookup table cannot be loaded.
    """
    if settings is None:
        settings = get_settings()

    if configure_logging:
        setup_logging(
            log_level=settings.logging.level,
            log_format=settings.logging.format,
            is_development=settings.is_development,
            log_file=settings.logging.file,
        )

    logger.info(
        "Starting pantry assistant",
        app_name=settings.app.name,
        environment=settings.APP_ENV,
    )

    substitutions = load_substitution_table(settings.data.substitutions_path)
    matching = MatchingService(
        substitutions,
        near_match_threshold=settings.matching.near_match_threshold,
    )
    pairing = PairingService(load_pairing_rules(settings.data.pairing_rules_path))
    shopping = load_shopping_list_service(settings.data.shopping_categories_path)

    if repository is None:
        repository = InMemoryPantryRepository()
        if settings.seed.load_recipes:
            repository.seed_recipes()
        if settings.seed.load_sample_pantry:
            repository.seed_sample_pantry()

    logger.info("Pantry assistant ready")
    return PantryAssistant(
        repository=repository,
        substitutions=substitutions,
        matching=matching,
        pairing=pairing,
        shopping=shopping,
    )
