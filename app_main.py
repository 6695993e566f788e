"""Application entry point for the Skillset stores."""

from __future__ import annotations

import sys
from dataclasses import dataclass
from pathlib import Path

from skillset_app.constants.about import APP_NAME, APP_VERSION
from skillset_app.constants.storage_constants import DEFAULT_STORAGE_DIR
from skillset_app.core.catalog_store import CatalogStore
from skillset_app.core.identity_store import IdentityStore
from skillset_app.core.storage import FileStorage
from skillset_app.utils.logging_config import configure_logging


@dataclass(slots=True)
class Application:
    identity: IdentityStore
    catalog: CatalogStore


def build_application(storage_dir: Path = DEFAULT_STORAGE_DIR) -> Application:
    """Wire the persisted identity store and a demo catalog together."""
    return Application(
        identity=IdentityStore(FileStorage(storage_dir)),
        catalog=CatalogStore.with_demo_data(),
    )


def main(argv: list[str] | None = None) -> None:
    """Initialize logging, rehydrate the session and log a catalog summary."""
    args = sys.argv[1:] if argv is None else argv
    logger = configure_logging()
    logger.info("Starting %s %s", APP_NAME, APP_VERSION)

    storage_dir = Path(args[0]) if args else DEFAULT_STORAGE_DIR
    app = build_application(storage_dir)

    user = app.identity.user
    if app.identity.is_authenticated and user is not None:
        logger.info("Session restored for %s (%s)", user.name, user.role.value)
        enrolled = app.catalog.get_enrolled_courses(user.id)
        logger.info("%d enrolled course(s)", len(enrolled))
    else:
        logger.info("Nobody is signed in")
    logger.info("%d public course(s) in the catalog", len(app.catalog.get_public_courses()))


if __name__ == "__main__":
    main()
