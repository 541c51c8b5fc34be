"""
Dutch function words.
"""

from __future__ import annotations

from .models import FunctionWords

ARTICLES = ["de", "het", "een", "'t", "der", "des"]

CARDINAL_NUMERALS = [
    "twee", "drie", "vier", "vijf", "zes", "zeven", "acht", "negen", "tien", "elf", "twaalf",
    "twintig", "dertig", "veertig", "vijftig", "honderd", "duizend", "miljoen", "miljard",
]

ORDINAL_NUMERALS = [
    "eerste", "tweede", "derde", "vierde", "vijfde", "zesde", "zevende", "achtste",
    "negende", "tiende", "laatste",
]

PERSONAL_PRONOUNS = [
    "ik", "je", "jij", "u", "hij", "zij", "ze", "wij", "we", "jullie", "mij", "me", "jou",
    "hem", "haar", "ons", "hen", "hun", "men",
]

REFLEXIVE_PRONOUNS = ["zich", "zichzelf", "mezelf", "jezelf", "onszelf"]

DEMONSTRATIVE_PRONOUNS = ["deze", "die", "dit", "dat", "zulke", "zo'n"]

POSSESSIVE_PRONOUNS = ["mijn", "jouw", "uw", "zijn", "onze", "ons", "hun", "haar", "m'n", "z'n"]

QUANTIFIERS = [
    "alle", "alles", "veel", "vele", "meer", "meeste", "weinig", "minder", "enkele",
    "sommige", "elke", "ieder", "iedere", "geen", "genoeg", "wat",
]

INDEFINITE_PRONOUNS = [
    "iemand", "niemand", "iedereen", "niets", "niks", "iets", "ander", "andere", "beide",
]

INTERROGATIVES = ["wie", "wat", "welke", "welk", "waar", "hoe", "waarom", "wanneer"]

PREPOSITIONS = [
    "aan", "achter", "bij", "binnen", "boven", "buiten", "door", "in", "langs", "met",
    "na", "naar", "naast", "om", "onder", "op", "over", "per", "sinds", "tegen", "tijdens",
    "tot", "tussen", "uit", "van", "via", "voor", "zonder", "vanaf", "volgens",
]

CONJUNCTIONS = [
    "en", "of", "maar", "want", "dus", "noch", "dat", "als", "omdat", "hoewel", "terwijl",
    "toen", "zodat", "indien", "tenzij", "nadat", "voordat", "zowel",
]

AUXILIARIES = [
    "ben", "bent", "is", "zijn", "was", "waren", "geweest", "heb", "hebt", "heeft",
    "hebben", "had", "hadden", "gehad", "word", "wordt", "worden", "werd", "werden",
    "geworden", "kan", "kunt", "kunnen", "kon", "konden", "moet", "moeten", "moest",
    "zal", "zult", "zullen", "zou", "zouden", "wil", "wilt", "willen", "wilde", "mag",
    "mogen", "mocht",
]

TRANSITION_WORDS = [
    "ook", "daarna", "daarom", "dan", "echter", "toch", "bovendien", "eerst", "vervolgens",
    "uiteindelijk", "immers", "namelijk", "zelfs", "dus", "verder", "tenslotte",
]

INTENSIFIERS = ["heel", "zeer", "erg", "nogal", "vrij", "best", "helemaal", "te"]

ADVERBS = [
    "al", "nog", "altijd", "nooit", "vaak", "hier", "daar", "er", "nu", "vandaag",
    "gisteren", "morgen", "alleen", "zo", "weer", "niet", "wel", "ja", "nee",
]

GENERAL_ADJECTIVES = [
    "nieuw", "nieuwe", "oud", "oude", "goed", "goede", "beter", "beste", "groot", "grote",
    "klein", "kleine", "makkelijk", "snel", "lang", "lange", "kort", "korte", "eigen",
    "belangrijk", "belangrijke", "verschillende", "zelfde",
]

VAGUE_NOUNS = ["ding", "dingen", "zaak", "zaken", "manier", "deel", "delen", "keer"]

FUNCTION_WORDS = FunctionWords.from_lists(
    "nl",
    filtered_anywhere=(
        TRANSITION_WORDS
        + PERSONAL_PRONOUNS
        + REFLEXIVE_PRONOUNS
        + CARDINAL_NUMERALS
        + AUXILIARIES
        + INDEFINITE_PRONOUNS
        + INTERROGATIVES
        + ADVERBS
        + VAGUE_NOUNS
    ),
    filtered_at_beginning=GENERAL_ADJECTIVES,
    filtered_at_ending=ORDINAL_NUMERALS,
    filtered_at_beginning_and_ending=(
        ARTICLES
        + PREPOSITIONS
        + CONJUNCTIONS
        + DEMONSTRATIVE_PRONOUNS
        + POSSESSIVE_PRONOUNS
        + QUANTIFIERS
        + INTENSIFIERS
    ),
    unfiltered=["één"],
)
