"""Exceptions for use in Tourney Plan"""

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


# ========== Base Application Exception ==========


class TourneyPlanException(Exception):
    """Base exception for all Tourney Plan errors.

    All custom exceptions in the engine inherit from this class, so callers
    (typically an API layer) can catch every engine error with one clause.
    """

    pass


# ========== Input Exceptions ==========


class InvalidInputException(TourneyPlanException):
    """Base exception for invalid input handed to the engine.

    The API layer is expected to translate these into a 4xx-style response.
    """

    pass


class InsufficientPlayersException(InvalidInputException):
    """Raised when fewer players are supplied than an operation needs."""

    pass


class DuplicatePlayerException(InvalidInputException):
    """Raised when the same player identifier appears twice in one list."""

    pass


class UnknownEnumValueException(InvalidInputException):
    """Raised for an unrecognized tournament type or seeding policy value."""

    pass


class InvalidAdvancementException(InvalidInputException):
    """Raised when the advancement count per group is zero or negative."""

    pass


class InvalidConfigurationException(InvalidInputException):
    """Raised when structure or scoring configuration is invalid."""

    pass


class InvalidDateException(InvalidInputException):
    """Raised when a schedule start date cannot be interpreted."""

    pass


class InvalidSlotReferenceException(InvalidInputException):
    """Raised when a bracket slot reference such as "R2M3" is malformed."""

    pass


# ========== Bracket Exceptions ==========


class BracketException(TourneyPlanException):
    """Base exception for bracket progression errors."""

    pass


class SlotNotFoundException(BracketException):
    """Raised when a referenced slot does not exist in the bracket."""

    pass


class BracketProgressionException(BracketException):
    """Raised when a result cannot be applied to the bracket."""

    pass
