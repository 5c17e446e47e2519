from __future__ import annotations

from typing import Any

from sqlalchemy.orm import Session


def upsert_on_conflict(
    session: Session,
    model: type,
    values: dict[str, Any],
    *,
    conflict_cols: list[str],
    update_cols: list[str],
) -> None:
    """
    Single-statement insert-or-update keyed by ``conflict_cols``.

    Backed by the table's unique constraint, so concurrent writers for the
    same key cannot both insert and no read-then-write window exists.
    """
    dialect = session.get_bind().dialect.name

    if dialect == "mysql":
        from sqlalchemy.dialects.mysql import insert as mysql_insert

        stmt = mysql_insert(model).values(**values)
        stmt = stmt.on_duplicate_key_update(
            {c: stmt.inserted[c] for c in update_cols}
        )
    else:
        if dialect == "postgresql":
            from sqlalchemy.dialects.postgresql import insert
        elif dialect == "sqlite":
            from sqlalchemy.dialects.sqlite import insert
        else:
            raise RuntimeError(f"Upsert not supported on dialect '{dialect}'")

        stmt = insert(model).values(**values)
        stmt = stmt.on_conflict_do_update(
            index_elements=conflict_cols,
            set_={c: stmt.excluded[c] for c in update_cols},
        )

    session.execute(stmt)
