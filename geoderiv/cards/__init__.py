"""Registry of the piecewise nearest-feature distance cards."""

from __future__ import annotations

from typing import Dict, List

from . import point_segment_2d, point_triangle_2d, point_triangle_3d, segment_segment_2d
from .base import DerivativeCard, not_implemented


def _card(module, summary: str) -> DerivativeCard:
    return DerivativeCard(
        name=module.NAME,
        input_size=module.INPUT_SIZE,
        value=module.value,
        grad=module.grad,
        hess=module.hess,
        hvp=module.hvp,
        domain=module.domain,
        summary=summary,
    )


CARDS: Dict[str, DerivativeCard] = {
    card.name: card
    for card in (
        _card(point_segment_2d, "distance from a 2D point to a segment"),
        _card(point_triangle_2d, "distance from a 2D point to a triangle boundary"),
        _card(point_triangle_3d, "distance from a 3D point to a fixed triangle"),
        _card(segment_segment_2d, "distance between two 2D segments"),
    )
}


def get_card(name: str) -> DerivativeCard:
    try:
        return CARDS[name]
    except KeyError as exc:
        raise KeyError(f"Unknown card '{name}'; expected one of {sorted(CARDS)}") from exc


def list_cards() -> List[str]:
    return list(CARDS)


__all__ = [
    "CARDS",
    "DerivativeCard",
    "get_card",
    "list_cards",
    "not_implemented",
    "point_segment_2d",
    "point_triangle_2d",
    "point_triangle_3d",
    "segment_segment_2d",
]
