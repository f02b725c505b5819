"""
Tokenizer and pacing constants.

This module contains the paragraph marker, rate bounds, punctuation sets,
delay multipliers and the abbreviation list used by the pacing engine.
"""

# -----------------------------------------------------------------------------
# Structural Markers
# -----------------------------------------------------------------------------

# Pilcrow inserted by the extraction layer between paragraphs
PARAGRAPH_MARKER = "\u00b6"  # ¶

# -----------------------------------------------------------------------------
# Rate (words per minute)
# -----------------------------------------------------------------------------

MIN_RATE = 50
MAX_RATE = 1500
RATE_STEP = 50

# 60,000 ms per minute
MS_PER_MINUTE = 60_000.0

# -----------------------------------------------------------------------------
# Punctuation
# -----------------------------------------------------------------------------

# End-of-sentence punctuation that always gets the long pause
SENTENCE_ENDERS = {"!", "?"}

# A period ends a sentence unless the word is an abbreviation
PERIOD = "."

# Clause punctuation (may be followed by trailing whitespace)
CLAUSE_PUNCTUATION = {",", ";"}

# Dashes anywhere in a word mark a clause pause
EM_DASH = "\u2014"  # —
DOUBLE_HYPHEN = "--"

# -----------------------------------------------------------------------------
# Delay Multipliers (in multiples of the base word duration)
# -----------------------------------------------------------------------------

PARAGRAPH_BREAK_MULTIPLIER = 3
SENTENCE_END_MULTIPLIER = 3
CLAUSE_MULTIPLIER = 2
DEFAULT_MULTIPLIER = 1

# -----------------------------------------------------------------------------
# Abbreviations
# -----------------------------------------------------------------------------

# Abbreviations whose trailing period does not end a sentence.
# Stored lowercase without the final period for case-insensitive matching.
ABBREVIATIONS = {
    # Titles
    "mr", "mrs", "ms", "dr", "prof", "sr", "jr", "st",
    # Military/titles
    "gen", "col", "lt", "sgt", "capt", "cmdr", "gov", "sen", "rep",
    # Common
    "vs", "etc", "inc", "ltd", "co", "corp", "dept", "approx", "fig", "vol",
    # Latin abbreviations
    "e.g", "i.e", "cf", "al",
}
