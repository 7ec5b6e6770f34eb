from __future__ import annotations

from typing import Any, Mapping


def to_film_dim(row: Mapping[str, Any]) -> dict[str, Any]:
    # example: films(id, title, rating) -> film_dim(film_id, title, rating)
    rating = row.get("rating")
    return {
        "film_id": row["id"],
        "title": str(row.get("title") or ""),
        "rating": float(rating) if rating is not None else None,
    }
