"""Tournament structure composition.

This module turns a tournament format and its entrants into the initial set
of stages, and resolves the knockout stage of a group-to-knockout tournament
once the group matches are played.
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

import math
from dataclasses import replace
from typing import Any, Dict, Iterable, List, Mapping, Optional, Union

from tourneyplan.constants import (
    DEFAULT_ADVANCING_PER_GROUP,
    GROUP_NAMES,
    MAX_GROUP_COUNT,
    MIN_PLAYERS,
    STAGE_NAME_GROUPS,
    STAGE_NAME_KNOCKOUT,
    STAGE_NAME_LEAGUE,
)
from tourneyplan.exceptions import (
    InvalidAdvancementException,
    InvalidConfigurationException,
)
from tourneyplan.models.enums import SeedingType, StageType, TournamentType
from tourneyplan.models.match import MatchPairing, MatchRecord
from tourneyplan.models.stage import Group, StageDescriptor, StructureConfig
from tourneyplan.models.standing import ScoringRules
from tourneyplan.pairing.knockout import generate_knockout_bracket
from tourneyplan.pairing.round_robin import generate_round_robin
from tourneyplan.tournament.advancement import select_advancing
from tourneyplan.tournament.standings_calculator import StandingsCalculator
from tourneyplan.type_hints import PlayerId, RandomSource, TournamentTypeValue
from tourneyplan.utils import setup_logger
from tourneyplan.utils.validation import parse_enum, require_min_players, unique_players

logger = setup_logger(__name__)


def split_into_groups(players: List[PlayerId], group_count: int) -> List[Group]:
    """Split players into contiguous groups named A, B, C, ...

    Each group holds ``ceil(len(players) / group_count)`` players except the
    last ones; groups left empty by the split are dropped.

    Raises:
        InvalidConfigurationException: If ``group_count`` is outside 1..26
    """
    if not 1 <= group_count <= MAX_GROUP_COUNT:
        raise InvalidConfigurationException(
            f"Group count must be between 1 and {MAX_GROUP_COUNT}, got {group_count}"
        )
    per_group = math.ceil(len(players) / group_count)
    groups = []
    for index in range(group_count):
        members = players[index * per_group : (index + 1) * per_group]
        if members:
            groups.append(Group(name=GROUP_NAMES[index], players=members))
    return groups


def _coerce_config(
    config: Union[StructureConfig, Mapping[str, Any], None]
) -> StructureConfig:
    if config is None:
        return StructureConfig()
    if isinstance(config, StructureConfig):
        if config.seeding is not None:
            return replace(config, seeding=parse_enum(SeedingType, config.seeding))
        return config
    return StructureConfig.from_dict(dict(config))


def _league_stage(players: List[PlayerId]) -> StageDescriptor:
    return StageDescriptor(
        type=StageType.ROUND_ROBIN,
        order=1,
        name=STAGE_NAME_LEAGUE,
        players=players,
        matches=list(generate_round_robin(players)),
    )


def _knockout_stage(
    players: List[PlayerId], seeding: SeedingType, rng: Optional[RandomSource]
) -> StageDescriptor:
    return StageDescriptor(
        type=StageType.KNOCKOUT,
        order=1,
        name=STAGE_NAME_KNOCKOUT,
        players=players,
        matches=list(generate_knockout_bracket(players, seeding, rng)),
        seeding=seeding,
    )


def _group_knockout_stages(
    players: List[PlayerId], config: StructureConfig
) -> List[StageDescriptor]:
    if config.advancing_per_group < 1:
        raise InvalidAdvancementException(
            f"Advancing players per group must be at least 1, got {config.advancing_per_group}"
        )
    groups = split_into_groups(players, config.group_count)

    matches: List[MatchPairing] = []
    for group in groups:
        matches.extend(generate_round_robin(group.players, group.name))

    group_stage = StageDescriptor(
        type=StageType.GROUP,
        order=1,
        name=STAGE_NAME_GROUPS,
        players=players,
        matches=list(matches),
        groups=groups,
        advancing_per_group=config.advancing_per_group,
    )
    # Filled in by complete_group_stage once the groups are played
    knockout_stage = StageDescriptor(
        type=StageType.KNOCKOUT,
        order=2,
        name=STAGE_NAME_KNOCKOUT,
        seeding=config.seeding or SeedingType.CROSS_GROUP,
        expected_players=len(groups) * config.advancing_per_group,
    )
    return [group_stage, knockout_stage]


def compose_structure(
    tournament_type: Union[TournamentType, TournamentTypeValue],
    players: Iterable[PlayerId],
    config: Union[StructureConfig, Mapping[str, Any], None] = None,
    rng: Optional[RandomSource] = None,
) -> List[StageDescriptor]:
    """Build the initial stages for a tournament.

    - LEAGUE and ROUND_ROBIN: one round robin stage over everybody
    - KNOCKOUT: one bracket (RANDOM seeding unless configured)
    - GROUP_KNOCKOUT: a group stage plus an unresolved knockout stage
      (CROSS_GROUP seeding unless configured)
    - CUSTOM: no stages, the caller composes them by hand

    Args:
        tournament_type: Tournament format (member or wire value)
        players: Ordered entrant identifiers
        config: ``StructureConfig`` or its wire dictionary
        rng: Random source for RANDOM seeding

    Returns:
        Stage descriptors with strictly increasing ``order``

    Raises:
        UnknownEnumValueException: For an unknown format or seeding value
        InsufficientPlayersException: If fewer than two entrants are given
        DuplicatePlayerException: If an entrant is listed twice
        InvalidConfigurationException: For an unusable group count
        InvalidAdvancementException: For an advancement count below 1
    """
    tournament_type = parse_enum(TournamentType, tournament_type)
    config = _coerce_config(config)

    if tournament_type is TournamentType.CUSTOM:
        logger.info("Custom tournament: no stages generated")
        return []

    roster = unique_players(players, context="tournament entrants")
    require_min_players(roster, MIN_PLAYERS, f"A {tournament_type.value} tournament")

    if tournament_type in (TournamentType.LEAGUE, TournamentType.ROUND_ROBIN):
        stages = [_league_stage(roster)]
    elif tournament_type is TournamentType.KNOCKOUT:
        stages = [_knockout_stage(roster, config.seeding or SeedingType.RANDOM, rng)]
    else:
        stages = _group_knockout_stages(roster, config)

    logger.info(
        "Composed %s structure for %d players: %s",
        tournament_type.value,
        len(roster),
        ", ".join(f"{s.order}:{s.type.value}" for s in stages),
    )
    return stages


def _partition_by_group(
    results: Iterable[MatchRecord], groups: List[Group]
) -> Dict[str, List[MatchRecord]]:
    member_of = {player: group.name for group in groups for player in group.players}
    by_group: Dict[str, List[MatchRecord]] = {group.name: [] for group in groups}
    for match in results:
        name = match.group if match.group is not None else member_of.get(match.player1)
        if name in by_group:
            by_group[name].append(match)
    return by_group


def complete_group_stage(
    group_stage: StageDescriptor,
    knockout_stage: StageDescriptor,
    results: Iterable[MatchRecord],
    rules: Optional[ScoringRules] = None,
    rng: Optional[RandomSource] = None,
) -> StageDescriptor:
    """Resolve the knockout stage that follows a played group stage.

    Computes standings per group, selects the advancing players with the
    knockout stage's seeding and generates its bracket.

    Args:
        group_stage: The GROUP stage produced by ``compose_structure``
        knockout_stage: The unresolved KNOCKOUT stage that follows it
        results: Match records of the group stage
        rules: Scoring rules of the group stage
        rng: Random source for RANDOM seeding

    Returns:
        A copy of ``knockout_stage`` with players and bracket filled in

    Raises:
        InvalidConfigurationException: If ``group_stage`` has no groups
    """
    if not group_stage.groups:
        raise InvalidConfigurationException(
            f"Stage {group_stage.order} has no groups to advance players from"
        )

    calculator = StandingsCalculator(rules)
    by_group = _partition_by_group(results, group_stage.groups)
    standings = {
        group.name: calculator.compute(by_group[group.name], group.players)
        for group in group_stage.groups
    }

    seeding = knockout_stage.seeding or SeedingType.CROSS_GROUP
    advancing_per_group = group_stage.advancing_per_group or DEFAULT_ADVANCING_PER_GROUP
    advancing = select_advancing(standings, advancing_per_group, seeding)
    bracket = generate_knockout_bracket(advancing, seeding, rng)

    logger.info(
        "Stage %d resolved with %d advancing players", knockout_stage.order, len(advancing)
    )
    return replace(
        knockout_stage,
        players=advancing,
        matches=list(bracket),
        seeding=seeding,
        expected_players=None,
    )
