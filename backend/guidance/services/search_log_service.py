import logging
import uuid
from datetime import datetime, timezone

from sqlalchemy.orm import Session
from starlette.concurrency import run_in_threadpool

from guidance.models.search import Search
from guidance.schemas.guidance import SearchQuery

logger = logging.getLogger(__name__)


def _insert_search(db: Session, query: SearchQuery) -> None:
    now = datetime.now(timezone.utc).strftime("%Y-%m-%dT%H:%M:%SZ")
    db.add(
        Search(
            id=str(uuid.uuid4()),
            type=query.type.value,
            query=query.query,
            created_at=now,
        )
    )
    db.commit()


async def record_search(db: Session, query: SearchQuery) -> None:
    """Persist a search for analytics. Failures are logged and never raised."""
    try:
        await run_in_threadpool(_insert_search, db, query)
    except Exception:
        logger.warning("Could not record search (type=%s)", query.type.value, exc_info=True)
        try:
            db.rollback()
        except Exception:
            logger.debug("Rollback after failed search insert also failed", exc_info=True)
