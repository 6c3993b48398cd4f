"""Run the pantry assistant against the seed catalog and sample pantry."""

from __future__ import annotations

import os

from pantry.factory import create_assistant
from pantry.observability.logging import get_logger


logger = get_logger(__name__)


def main() -> None:
    """Print cook-now and near-match suggestions for the sample pantry."""
    os.environ.setdefault("APP_ENV", "development")
    assistant = create_assistant()

    for result in assistant.cook_now():
        logger.info("Cook now", recipe=result.recipe.title)

    for result in assistant.near_matches():
        logger.info(
            "Near match",
            recipe=result.recipe.title,
            score=round(result.score, 2),
            missing=list(result.missing_items),
        )
        shopping = assistant.shopping.generate_shopping_list(result.missing_items)
        for row in shopping:
            logger.info("Buy", item=row.item, category=row.category)


if __name__ == "__main__":
    main()
