"""Optimistic concurrency for aggregate writes."""

from collections.abc import Callable
from typing import Any, TypeVar

import logfire
from sqlalchemy import Table
from sqlalchemy.dialects.postgresql import insert
from sqlalchemy.ext.asyncio import AsyncSession

from threadly.domain.error import ConcurrentUpdateError
from threadly.domain.model.common import AggregateRoot

A = TypeVar("A", bound=AggregateRoot)


async def versioned_save(
    session: AsyncSession,
    table: Table,
    aggregate: A,
    to_dict: Callable[[A], dict[str, Any]],
    resource: str,
) -> A:
    """Insert a new aggregate or update a stored one at its loaded version.

    A new aggregate (version 0) is inserted; an id collision means another
    request created it first. An existing one is updated only where the row
    still has the version it was loaded with. Either way, zero affected rows
    is a lost race.

    Args:
        session: Request session
        table: Table holding the aggregate
        aggregate: Aggregate as loaded and modified
        to_dict: Mapper from aggregate to column values
        resource: Name used in the error message

    Returns:
        The aggregate with the version now stored

    Raises:
        ConcurrentUpdateError: If another request wrote the row first
    """
    saved = aggregate.next_version()
    values = to_dict(saved)

    if aggregate.is_new:
        stmt = (
            insert(table)
            .values(**values)
            .on_conflict_do_nothing(index_elements=[table.c.id])
        )
    else:
        stmt = (
            table.update()
            .where(table.c.id == aggregate.id)
            .where(table.c.version == aggregate.version)
            .values(**values)
        )

    result = await session.execute(stmt)
    if result.rowcount == 0:
        logfire.warn(
            "Stale aggregate version",
            resource=resource,
            id=str(aggregate.id),
            version=aggregate.version,
        )
        raise ConcurrentUpdateError(resource, str(aggregate.id))

    await session.flush()
    return saved
