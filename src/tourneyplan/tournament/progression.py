"""Bracket progression.

Moves winners along the ``resultForWinner`` linkage of a knockout bracket.
Every helper returns a new list of slots and leaves its input untouched.
"""

# Tourney Plan
# Copyright (C) 2025  Tourney Plan developers
#
# This program is free software: you can redistribute it and/or modify
# it under the terms of the GNU General Public License as published by
# the Free Software Foundation, either version 3 of the License, or
# (at your option) any later version.
#
# This program is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
# GNU General Public License for more details.
#
# You should have received a copy of the GNU General Public License
# along with this program.  If not, see <http://www.gnu.org/licenses/>.

from dataclasses import replace
from typing import Dict, Iterable, List, Optional, Set, Union

from tourneyplan.exceptions import BracketProgressionException, SlotNotFoundException
from tourneyplan.models.bracket import BracketSlot, SlotRef
from tourneyplan.type_hints import PlayerId
from tourneyplan.utils import setup_logger

logger = setup_logger(__name__)

SlotKey = Union[SlotRef, str]


def _copy_slots(slots: Iterable[BracketSlot]) -> Dict[SlotRef, BracketSlot]:
    return {slot.ref: replace(slot) for slot in slots}


def _lookup(by_ref: Dict[SlotRef, BracketSlot], ref: SlotKey) -> BracketSlot:
    key = SlotRef.parse(ref)
    try:
        return by_ref[key]
    except KeyError:
        raise SlotNotFoundException(f"No slot {key} in bracket") from None


def _ordered(by_ref: Dict[SlotRef, BracketSlot]) -> List[BracketSlot]:
    return [by_ref[ref] for ref in sorted(by_ref)]


def _void_slots(by_ref: Dict[SlotRef, BracketSlot]) -> Set[SlotRef]:
    """Slots that can never hold a player.

    An opening slot of two byes is void, and so is a later slot whose two
    feeders are both void.
    """
    void: Set[SlotRef] = set()
    for slot in _ordered(by_ref):
        if slot.round == 1:
            if not slot.players:
                void.add(slot.ref)
        elif all(feeder in void for feeder in slot.ref.feeders):
            void.add(slot.ref)
    return void


def _empty_side_feeder(slot: BracketSlot) -> Optional[SlotRef]:
    """Feeder of the empty seat of a later-round slot holding one player."""
    if slot.round == 1 or len(slot.players) != 1:
        return None
    first_feeder, second_feeder = slot.ref.feeders
    return second_feeder if slot.player2 is None else first_feeder


def _is_walkover(slot: BracketSlot, void: Set[SlotRef]) -> bool:
    """Whether the lone player of ``slot`` has no opponent to wait for."""
    if len(slot.players) != 1:
        return False
    if slot.round == 1:
        return slot.player2 is None
    return _empty_side_feeder(slot) in void


def _apply_winner(
    by_ref: Dict[SlotRef, BracketSlot], slot: BracketSlot, winner: PlayerId
) -> None:
    if winner not in slot.players:
        raise BracketProgressionException(
            f"{winner!r} is not playing in {slot.ref} (players: {slot.players})"
        )
    if slot.winner is not None and slot.winner != winner:
        raise BracketProgressionException(
            f"{slot.ref} already won by {slot.winner!r}"
        )
    slot.winner = winner

    next_ref = slot.next_ref
    if next_ref is None:
        return
    target = _lookup(by_ref, next_ref)
    # Even match numbers feed the first seat, odd ones the second
    side = "player1" if slot.match_number % 2 == 0 else "player2"
    seated = getattr(target, side)
    if seated is not None and seated != winner:
        raise BracketProgressionException(
            f"{next_ref} already has {seated!r} as {side}"
        )
    setattr(target, side, winner)


def find_slot(slots: Iterable[BracketSlot], ref: SlotKey) -> BracketSlot:
    """Return the slot at ``ref`` (a ``SlotRef`` or its "R2M3" form).

    Raises:
        SlotNotFoundException: If no slot sits at ``ref``
        InvalidSlotReferenceException: If the text form is malformed
    """
    key = SlotRef.parse(ref)
    for slot in slots:
        if slot.ref == key:
            return slot
    raise SlotNotFoundException(f"No slot {key} in bracket")


def record_winner(
    slots: Iterable[BracketSlot], ref: SlotKey, winner: PlayerId
) -> List[BracketSlot]:
    """Record the winner of a slot and seat them in the next round.

    Args:
        slots: The bracket
        ref: Slot that was decided
        winner: Player who won it

    Returns:
        The updated bracket, ordered by round and match number

    Raises:
        SlotNotFoundException: If ``ref`` or its next slot is missing
        BracketProgressionException: If ``winner`` is not in the slot, the
            slot already has another winner, the next seat is taken, or
            the slot is still waiting for an opponent
    """
    by_ref = _copy_slots(slots)
    slot = _lookup(by_ref, ref)
    pending = _empty_side_feeder(slot)
    if pending is not None and not _is_walkover(slot, _void_slots(by_ref)):
        raise BracketProgressionException(
            f"{slot.ref} is still waiting for the winner of {pending}"
        )
    _apply_winner(by_ref, slot, winner)
    logger.debug("Recorded %r as winner of %s", winner, SlotRef.parse(ref))
    return _ordered(by_ref)


def advance_byes(slots: Iterable[BracketSlot]) -> List[BracketSlot]:
    """Auto-advance every player who has no opponent to wait for.

    A slot is void when it has no players and can never receive any: an
    opening slot of two byes, or a later slot fed by two void slots. A
    walkover is an undecided slot with exactly one player whose empty seat
    is fed by a void slot (opening-round byes included). Walkovers are
    advanced round by round, so they cascade. Call again after recording
    results to pick up walkovers that were waiting on them.

    Returns:
        The updated bracket, ordered by round and match number
    """
    by_ref = _copy_slots(slots)
    void = _void_slots(by_ref)
    advanced = 0

    # Round order lets a walkover seat its player before the next round is checked
    for slot in _ordered(by_ref):
        if slot.winner is None and _is_walkover(slot, void):
            _apply_winner(by_ref, slot, slot.players[0])
            advanced += 1

    logger.debug("Advanced %d walkovers, %d void slots", advanced, len(void))
    return _ordered(by_ref)


def champion(slots: Iterable[BracketSlot]) -> Optional[PlayerId]:
    """Winner of the final, or None while it is undecided."""
    for slot in slots:
        if slot.is_final:
            return slot.winner
    return None
