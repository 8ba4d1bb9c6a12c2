"""MoveEffect serialization: JSON-ready dicts and short plain-text summaries."""

from __future__ import annotations

from dataclasses import asdict

from chess_insight.analysis import MoveEffect, PieceInEffect, move_category


def serialize_effect(effect: MoveEffect | None) -> dict | None:
    if effect is None:
        return None
    return asdict(effect)


def _label(p: PieceInEffect) -> str:
    """Format as "White knight on f3"."""
    return f"{p.color.capitalize()} {p.kind} on {p.square}"


def _join(pieces: list[PieceInEffect]) -> str:
    return ", ".join(_label(p) for p in pieces)


def describe_effect(effect: MoveEffect) -> str:
    """Plain-text summary, one fact per line."""
    lines = [f"{_label(effect.piece)}: {effect.move_type.replace('_', ' ')}, {effect.defense}"]
    if effect.move_san:
        lines.append(f"Move: {effect.move_san} ({move_category(effect.move_san)})")
    if effect.captured_piece:
        lines.append(f"Captured: {_label(effect.captured_piece)}")
    if effect.promotion:
        lines.append(f"Promoted to: {effect.promotion}")
    if effect.piece.attackers:
        lines.append(f"Attacked by: {_join(effect.piece.attackers)}")
    if effect.piece.defenders:
        lines.append(f"Defended by: {_join(effect.piece.defenders)}")
    if effect.attacks:
        lines.append(f"Attacks: {_join(effect.attacks)}")
    if effect.defends:
        lines.append(f"Defends: {_join(effect.defends)}")
    for tactic in effect.tactics:
        lines.append(f"Tactic: {tactic.kind.replace('_', ' ')} ({_join(tactic.targets)})")
    for color in ("white", "black"):
        hanging = getattr(effect.hanging_pieces, color)
        if hanging:
            lines.append(f"Hanging ({color}): {_join(hanging)}")
    return "\n".join(lines)
