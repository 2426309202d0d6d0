# Copyright (c) 2026 TrailLensCo
# All rights reserved.
#
# This file is proprietary and confidential.
# Unauthorized copying, distribution, or use of this file,
# via any medium, is strictly prohibited without the express
# written permission of TrailLensCo.

"""
Dictionary index: normalized words grouped by length.
"""

import re
from collections import defaultdict
from dataclasses import dataclass, field
from typing import Dict, Iterable, List, Tuple


WORD_PATTERN = re.compile(r"^[A-Z]+$")


def normalize_word(raw: str) -> str:
    """Trim and uppercase a word. Returns '' if it is not purely A-Z."""
    word = raw.strip().upper()
    if not word or not WORD_PATTERN.match(word):
        return ""
    return word


@dataclass(frozen=True)
class DictionaryIndex:
    """
    Immutable word index.

    words keeps the surviving input order (duplicates included);
    by_length maps a word length to the words of that length.
    """
    words: Tuple[str, ...] = ()
    by_length: Dict[int, Tuple[str, ...]] = field(default_factory=dict)

    @classmethod
    def build(cls, words: Iterable[str]) -> 'DictionaryIndex':
        """Normalize raw words and index them by length, dropping invalid ones."""
        normalized = []
        grouped: Dict[int, List[str]] = defaultdict(list)
        for raw in words:
            word = normalize_word(raw)
            if not word:
                continue
            normalized.append(word)
            grouped[len(word)].append(word)

        return cls(
            words=tuple(normalized),
            by_length={length: tuple(group) for length, group in grouped.items()},
        )

    def __len__(self) -> int:
        return len(self.words)

    def words_of_length(self, length: int) -> Tuple[str, ...]:
        return self.by_length.get(length, ())

    def unique_count(self, length: int) -> int:
        """Number of distinct words of the given length."""
        return len(set(self.words_of_length(length)))

    def lengths(self) -> List[int]:
        return sorted(self.by_length)


def create_sample_word_list() -> List[str]:
    """Create a sample word list that can fill the 7x7 preset."""
    return [
        # 2-letter words
        "AD", "AH", "AM", "AN", "AS", "AT", "AX", "BE", "BY", "DO",
        "EH", "EL", "EM", "EN", "ER", "EX", "GO", "HA", "HE", "HI",
        "HO", "ID", "IF", "IN", "IS", "IT", "LA", "LO", "MA", "ME",
        "MI", "MO", "MY", "NO", "OF", "OH", "OK", "ON", "OR", "OW",
        "OX", "PA", "PI", "RE", "SO", "TA", "TI", "TO", "UH", "UM",
        "UP", "US", "WE", "YE", "YO",

        # 3-letter words
        "ACE", "ACT", "ADD", "AGE", "AID", "AIM", "AIR", "ALL", "AND", "ANT",
        "APE", "ARC", "ARE", "ARK", "ARM", "ART", "ASH", "ATE", "AWE", "AXE",
        "BAD", "BAG", "BAN", "BAR", "BAT", "BED", "BEE", "BET", "BIG", "BIT",
        "BOW", "BOX", "BOY", "BUD", "BUG", "BUN", "BUS", "BUT", "BUY", "CAB",
        "CAN", "CAP", "CAR", "CAT", "COW", "CRY", "CUP", "CUT", "DAY", "DEN",
        "DEW", "DID", "DIG", "DIM", "DOC", "DOE", "DOG", "DOT", "DRY", "DUE",
        "EAR", "EAT", "EEL", "EGG", "ELF", "ELK", "ELM", "EMU", "END", "ERA",
        "EVE", "EWE", "EYE", "FAN", "FAR", "FAT", "FAX", "FED", "FEE", "FEW",
        "FIG", "FIN", "FIT", "FIX", "FLY", "FOE", "FOG", "FOR", "FOX", "FUN",
        "FUR", "GAP", "GAS", "GEL", "GEM", "GET", "GNU", "HAT", "HEN", "HER",
        "HID", "HIS", "HOT", "ICE", "ILL", "INK", "ION", "ITS", "JAM", "JOT",
        "KEY", "LAP", "LED", "LET", "LID", "LIE", "LOT", "MAP", "MAT", "MEN",
        "NAP", "NET", "NEW", "NOD", "NOR", "NOT", "NOW", "OAK", "OAR", "ODE",
        "OIL", "ONE", "ORE", "OUR", "OUT", "OWE", "OWL", "PAN", "PEN", "PET",
        "PIE", "PIN", "POT", "RAN", "RAT", "RED", "RIB", "ROD", "ROE", "RUN",
        "SAT", "SEA", "SEE", "SET", "SHE", "SIT", "SON", "SUN", "TAN", "TEA",
        "TEN", "TOE", "TON", "TOP", "TWO", "USE", "VAN", "WAR", "WET", "YES",
        "APT", "IRE",

        # 4-letter words
        "ABLE", "ACHE", "ACID", "AGED", "AIDE", "ALSO", "AREA", "ARMY", "AWAY",
        "BABY", "BACK", "BAKE", "BALL", "BAND", "BANK", "BARE", "BASE", "BATH",
        "BEAR", "BEAT", "BEEN", "BEER", "BELL", "BELT", "BEND", "BENT", "BEST",
        "BIRD", "BITE", "BLOW", "BLUE", "BOAT", "BODY", "BOLD", "BONE", "BOOK",
        "CAFE", "CAGE", "CAKE", "CALL", "CALM", "CAME", "CAMP", "CARD", "CARE",
        "CASE", "CASH", "CAST", "CAVE", "CELL", "CITY", "CLUB", "COAL", "COAT",
        "CODE", "COLD", "COME", "COOK", "COOL", "COPE", "COPY", "CORE", "COST",
        "DARE", "DARK", "DATA", "DATE", "DAWN", "DEAL", "DEAR", "DEED", "DEER",
        "EACH", "EARN", "EASE", "EAST", "EASY", "EDGE", "ELSE", "ERAS", "EVEN",
        "IDEA", "IDLE", "INTO", "IRON", "ITEM", "NEAR", "NEAT", "NEED", "NEST",
        "NOSE", "NOTE", "OATS", "ODES", "ONCE", "ONES", "OPEN", "ORES", "OVEN",
        "RATE", "READ", "REAL", "REST", "RIDE", "ROSE", "SAID", "SALE", "SEAT",
        "SEEN", "SENT", "SIDE", "SITE", "SOON", "STAR", "TEAR", "TEND", "TIDE",

        # 5-letter words
        "ABOUT", "ABOVE", "ACTOR", "ADAPT", "ADMIT", "ADOPT", "ADULT", "AFTER",
        "AGAIN", "AGENT", "AGREE", "AHEAD", "ALARM", "ALBUM", "ALERT", "ALIEN",
        "ALIKE", "ALIVE", "ALLOW", "ALONE", "ALONG", "ALTER", "AMONG", "ANGEL",
        "ANGER", "ANGLE", "APART", "APPLE", "ARENA", "ARISE", "ASIDE", "ASSET",
        "BASIC", "BEACH", "BEGAN", "BEGIN", "BEING", "BELOW", "BENCH", "BIRTH",
        "BLADE", "BLAME", "BLAST", "BLEND", "BOARD", "BRAIN", "CREAM", "DRESS",
        "EARTH", "EMBER", "ENTER", "EVENT", "HEART", "IDEAL", "LASER", "OCEAN",
        "OTHER", "RESIN", "RIDER", "SENSE", "STEAM", "STONE", "TREND", "TRADE",
        "ABUSE", "BEGAT", "BIPED", "DARES", "TACOS",

        # 7-letter words
        "CENTRAL", "ENTERED", "GENERAL", "HONORED", "LETTERS", "MINERAL",
        "PARADED", "PARADES", "PERIDOT", "SEASIDE", "TENURED", "VILLAGE",
    ]
