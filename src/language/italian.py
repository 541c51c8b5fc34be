"""
Italian function words.
"""

from __future__ import annotations

from .models import FunctionWords

ARTICLES = ["il", "lo", "la", "i", "gli", "le", "l'", "un", "uno", "una", "un'"]

ARTICLED_PREPOSITIONS = [
    "del", "dello", "della", "dei", "degli", "delle", "al", "allo", "alla", "ai", "agli",
    "alle", "dal", "dallo", "dalla", "dai", "dagli", "dalle", "nel", "nello", "nella", "nei",
    "negli", "nelle", "sul", "sullo", "sulla", "sui", "sugli", "sulle", "dell'", "all'",
    "dall'", "nell'", "sull'",
]

CARDINAL_NUMERALS = [
    "due", "tre", "quattro", "cinque", "sei", "sette", "otto", "nove", "dieci", "undici",
    "dodici", "venti", "trenta", "quaranta", "cinquanta", "cento", "mille", "mila",
    "milione", "milioni", "miliardo", "miliardi",
]

ORDINAL_NUMERALS = [
    "primo", "prima", "primi", "prime", "secondo", "seconda", "terzo", "terza", "quarto",
    "quarta", "quinto", "quinta", "ultimo", "ultima", "ultimi", "ultime",
]

PERSONAL_PRONOUNS = [
    "io", "tu", "lui", "lei", "noi", "voi", "loro", "mi", "ti", "ci", "vi", "si", "me",
    "te", "ne", "egli", "ella", "esso", "essa", "essi", "esse",
]

DEMONSTRATIVE_PRONOUNS = [
    "questo", "questa", "questi", "queste", "quello", "quella", "quelli", "quelle",
    "quel", "quei", "quegli", "ciò",
]

POSSESSIVE_PRONOUNS = [
    "mio", "mia", "miei", "mie", "tuo", "tua", "tuoi", "tue", "suo", "sua", "suoi", "sue",
    "nostro", "nostra", "nostri", "nostre", "vostro", "vostra", "vostri", "vostre",
]

QUANTIFIERS = [
    "tutto", "tutta", "tutti", "tutte", "molto", "molta", "molti", "molte", "poco", "poca",
    "pochi", "poche", "alcuni", "alcune", "ogni", "nessuno", "nessuna", "parecchi", "più",
    "meno", "troppo", "troppi", "abbastanza",
]

INDEFINITE_PRONOUNS = [
    "qualcuno", "niente", "nulla", "qualcosa", "altro", "altra", "altri", "altre",
    "qualsiasi", "chiunque", "entrambi",
]

INTERROGATIVES = [
    "chi", "che", "cosa", "quale", "quali", "dove", "come", "quando", "perché", "quanto",
    "quanta", "quanti", "quante",
]

PREPOSITIONS = [
    "di", "a", "da", "in", "con", "su", "per", "tra", "fra", "senza", "sotto", "sopra",
    "dopo", "prima", "durante", "verso", "contro", "presso", "secondo", "d'",
]

CONJUNCTIONS = [
    "e", "ed", "o", "od", "ma", "però", "anche", "né", "se", "perché", "quindi", "mentre",
    "sebbene", "benché", "oppure", "infatti",
]

AUXILIARIES = [
    "sono", "sei", "è", "siamo", "siete", "era", "erano", "stato", "stata", "stati",
    "sarà", "sarebbe", "ho", "hai", "ha", "abbiamo", "avete", "hanno", "aveva", "avevano",
    "avuto", "avrà", "può", "possono", "potrebbe", "deve", "devono", "dovrebbe", "vuole",
    "vogliono", "essere", "avere",
]

TRANSITION_WORDS = [
    "inoltre", "poi", "allora", "dunque", "comunque", "tuttavia", "infine", "insomma",
    "pertanto", "invece", "ancora", "soprattutto", "cioè", "ovvero",
]

INTENSIFIERS = ["molto", "troppo", "davvero", "proprio", "assai", "estremamente"]

ADVERBS = [
    "non", "mai", "sempre", "spesso", "qui", "qua", "lì", "là", "ora", "adesso", "oggi",
    "ieri", "domani", "già", "bene", "male", "sì", "no", "solo", "soltanto",
]

GENERAL_ADJECTIVES = [
    "nuovo", "nuova", "nuovi", "nuove", "vecchio", "vecchia", "buono", "buona", "buon",
    "migliore", "migliori", "grande", "grandi", "gran", "piccolo", "piccola", "facile",
    "semplice", "veloce", "lungo", "lunga", "breve", "stesso", "stessa", "proprio",
    "importante", "diversi", "diverse",
]

VAGUE_NOUNS = ["cosa", "cose", "modo", "modi", "parte", "parti", "volta", "volte"]

FUNCTION_WORDS = FunctionWords.from_lists(
    "it",
    filtered_anywhere=(
        TRANSITION_WORDS
        + PERSONAL_PRONOUNS
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
        + ARTICLED_PREPOSITIONS
        + PREPOSITIONS
        + CONJUNCTIONS
        + DEMONSTRATIVE_PRONOUNS
        + POSSESSIVE_PRONOUNS
        + QUANTIFIERS
        + INTENSIFIERS
    ),
)
