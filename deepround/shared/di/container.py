from dependency_injector import containers, providers

from deepround.domain.services import RoundingPolicy, StructuralWalker
from deepround.shared.config import get_settings
from deepround.shared.logging import get_logger

logger = get_logger(__name__)


class Container(containers.DeclarativeContainer):
    config = providers.Configuration()

    rounding_policy = providers.Singleton(
        RoundingPolicy,
        tag_key=config.precision_tag_key,
        max_depth=config.rounding_max_depth,
    )

    structural_walker = providers.Singleton(
        StructuralWalker,
        policy=rounding_policy,
    )


def get_container() -> Container:
    settings = get_settings()

    container = Container()

    container.config.from_dict(
        {
            "precision_tag_key": settings.PRECISION_TAG_KEY,
            "rounding_max_depth": settings.ROUNDING_MAX_DEPTH,
        }
    )

    logger.debug(
        "di_container_configured",
        tag_key=settings.PRECISION_TAG_KEY,
        max_depth=settings.ROUNDING_MAX_DEPTH,
    )

    return container
