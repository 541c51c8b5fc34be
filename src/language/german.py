"""
German function words.
"""

from __future__ import annotations

from .models import FunctionWords

ARTICLES = [
    "der", "die", "das", "des", "dem", "den", "ein", "eine", "einer", "eines", "einem", "einen",
]

CARDINAL_NUMERALS = [
    "eins", "zwei", "drei", "vier", "fünf", "sechs", "sieben", "acht", "neun", "zehn", "elf",
    "zwölf", "zwanzig", "dreißig", "vierzig", "fünfzig", "hundert", "tausend", "million",
    "millionen", "milliarde", "milliarden",
]

ORDINAL_NUMERALS = [
    "erste", "erster", "ersten", "erstes", "zweite", "zweiter", "zweiten", "dritte",
    "dritter", "dritten", "vierte", "vierten", "fünfte", "fünften", "letzte", "letzten",
]

PERSONAL_PRONOUNS = [
    "ich", "du", "er", "sie", "es", "wir", "ihr", "mich", "dich", "ihn", "uns", "euch",
    "mir", "dir", "ihm", "ihnen", "man",
]

REFLEXIVE_PRONOUNS = ["sich", "selbst"]

DEMONSTRATIVE_PRONOUNS = [
    "dies", "diese", "dieser", "dieses", "diesem", "diesen", "jene", "jener", "jenes",
    "jenem", "jenen", "solche", "solcher", "solches", "solchen",
]

POSSESSIVE_PRONOUNS = [
    "mein", "meine", "meiner", "meines", "meinem", "meinen", "dein", "deine", "deiner",
    "deinem", "deinen", "sein", "seine", "seiner", "seines", "seinem", "seinen", "ihre",
    "ihrer", "ihres", "ihrem", "ihren", "unser", "unsere", "unserer", "unseren", "euer",
    "eure", "euren",
]

QUANTIFIERS = [
    "alle", "allen", "aller", "alles", "viel", "viele", "vielen", "mehr", "meisten",
    "wenig", "wenige", "einige", "einigen", "manche", "mehrere", "jede", "jeder", "jedes",
    "jedem", "jeden", "kein", "keine", "keiner", "keinen", "etwas", "genug",
]

INDEFINITE_PRONOUNS = [
    "jemand", "niemand", "jedermann", "nichts", "irgendwas", "irgendwer", "andere",
    "anderen", "anderer", "beide", "beiden",
]

INTERROGATIVES = [
    "wer", "wen", "wem", "wessen", "was", "welche", "welcher", "welches", "welchen", "wo",
    "wie", "warum", "wann", "wohin", "woher", "weshalb", "wieso",
]

PREPOSITIONS = [
    "an", "am", "auf", "aus", "bei", "beim", "bis", "durch", "für", "gegen", "hinter", "in",
    "im", "ins", "mit", "nach", "neben", "ohne", "seit", "über", "um", "unter", "von",
    "vom", "vor", "während", "wegen", "zu", "zum", "zur", "zwischen", "trotz", "statt",
    "laut", "ab", "gegenüber",
]

CONJUNCTIONS = [
    "und", "oder", "aber", "denn", "sondern", "doch", "sowie", "weder", "noch", "entweder",
    "sowohl", "als", "dass", "ob", "weil", "wenn", "obwohl", "damit", "sodass", "falls",
    "nachdem", "bevor", "während", "indem", "sobald",
]

AUXILIARIES = [
    "bin", "bist", "ist", "sind", "seid", "war", "warst", "waren", "wart", "gewesen",
    "habe", "hast", "hat", "haben", "habt", "hatte", "hatten", "gehabt", "werde", "wirst",
    "wird", "werden", "werdet", "wurde", "wurden", "geworden", "worden", "kann", "kannst",
    "können", "könnte", "konnte", "muss", "musst", "müssen", "musste", "soll", "sollen",
    "sollte", "will", "willst", "wollen", "wollte", "darf", "dürfen", "mag", "mögen",
    "möchte", "möchten",
]

TRANSITION_WORDS = [
    "also", "außerdem", "dann", "danach", "deshalb", "deswegen", "daher", "darum",
    "dennoch", "jedoch", "trotzdem", "schließlich", "zuerst", "zunächst", "anschließend",
    "allerdings", "folglich", "somit", "ebenfalls", "ebenso", "zudem", "ferner",
    "beispielsweise", "nämlich", "sonst",
]

INTENSIFIERS = [
    "sehr", "ziemlich", "ganz", "total", "völlig", "äußerst", "besonders", "extrem", "zu",
]

ADVERBS = [
    "auch", "noch", "schon", "immer", "nie", "oft", "hier", "dort", "da", "jetzt", "nun",
    "heute", "gestern", "morgen", "nur", "so", "sogar", "bereits", "wieder", "gern",
    "gerne", "eben", "halt", "mal", "ja", "nein", "nicht",
]

GENERAL_ADJECTIVES = [
    "neu", "neue", "neuen", "neuer", "alt", "alte", "alten", "gut", "gute", "guten", "besser",
    "beste", "besten", "groß", "große", "großen", "klein", "kleine", "kleinen", "einfach",
    "einfache", "schnell", "lang", "lange", "kurz", "kurze", "wichtig", "wichtige",
    "verschiedene", "gleiche", "gleichen", "eigene", "eigenen",
]

VAGUE_NOUNS = ["ding", "dinge", "sache", "sachen", "art", "weise", "teil", "teile", "mal"]

FUNCTION_WORDS = FunctionWords.from_lists(
    "de",
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
)
