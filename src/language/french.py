"""
French function words.
"""

from __future__ import annotations

from .models import FunctionWords

ARTICLES = ["le", "la", "les", "un", "une", "des", "du", "l'", "d'", "au", "aux"]

CARDINAL_NUMERALS = [
    "deux", "trois", "quatre", "cinq", "six", "sept", "huit", "neuf", "dix", "onze",
    "douze", "vingt", "trente", "quarante", "cinquante", "cent", "cents", "mille",
    "million", "millions", "milliard", "milliards",
]

ORDINAL_NUMERALS = [
    "premier", "première", "premiers", "premières", "deuxième", "second", "seconde",
    "troisième", "quatrième", "cinquième", "dernier", "dernière", "derniers",
]

PERSONAL_PRONOUNS = [
    "je", "j'", "tu", "il", "elle", "on", "nous", "vous", "ils", "elles", "me", "m'", "te",
    "t'", "lui", "leur", "eux", "moi", "toi", "y", "en",
]

REFLEXIVE_PRONOUNS = ["se", "s'", "soi", "moi-même", "soi-même", "lui-même", "elle-même"]

DEMONSTRATIVE_PRONOUNS = [
    "ce", "cet", "cette", "ces", "celui", "celle", "ceux", "celles", "ceci", "cela", "ça",
]

POSSESSIVE_PRONOUNS = [
    "mon", "ma", "mes", "ton", "ta", "tes", "son", "sa", "ses", "notre", "nos", "votre",
    "vos", "leurs",
]

QUANTIFIERS = [
    "tout", "toute", "tous", "toutes", "plusieurs", "quelques", "beaucoup", "peu", "assez",
    "chaque", "aucun", "aucune", "plus", "moins", "trop",
]

INDEFINITE_PRONOUNS = [
    "quelqu'un", "personne", "rien", "quelque", "chose", "autre", "autres", "chacun",
    "chacune", "certains", "certaines",
]

INTERROGATIVES = [
    "qui", "que", "qu'", "quoi", "quel", "quelle", "quels", "quelles", "où", "comment",
    "pourquoi", "quand", "lequel", "laquelle", "dont",
]

PREPOSITIONS = [
    "à", "de", "dans", "par", "pour", "sur", "sous", "avec", "sans", "chez", "entre",
    "vers", "contre", "depuis", "pendant", "avant", "après", "devant", "derrière", "selon",
    "malgré", "parmi", "envers", "hors",
]

CONJUNCTIONS = [
    "et", "ou", "mais", "donc", "or", "ni", "car", "si", "comme", "lorsque", "puisque",
    "quoique", "parce",
]

AUXILIARIES = [
    "suis", "es", "est", "sommes", "êtes", "sont", "était", "étaient", "été", "sera",
    "seront", "serait", "ai", "as", "a", "avons", "avez", "ont", "avait", "avaient", "eu",
    "aura", "auront", "aurait", "peut", "peux", "pouvons", "pouvez", "peuvent", "pourrait",
    "doit", "dois", "devons", "devez", "doivent", "devrait", "veut", "veux", "voulons",
    "voulez", "veulent", "faut", "fait", "font", "être", "avoir",
]

TRANSITION_WORDS = [
    "aussi", "ensuite", "puis", "enfin", "cependant", "pourtant", "toutefois", "néanmoins",
    "ainsi", "alors", "donc", "également", "d'abord", "finalement", "notamment", "surtout",
    "d'ailleurs",
]

INTENSIFIERS = ["très", "vraiment", "assez", "tellement", "extrêmement", "si", "fort"]

ADVERBS = [
    "ne", "n'", "pas", "jamais", "toujours", "souvent", "ici", "là", "maintenant",
    "aujourd'hui", "hier", "demain", "déjà", "encore", "bien", "mal", "oui", "non",
    "seulement",
]

GENERAL_ADJECTIVES = [
    "nouveau", "nouvelle", "nouveaux", "vieux", "vieille", "bon", "bonne", "meilleur",
    "meilleure", "grand", "grande", "petit", "petite", "facile", "simple", "rapide", "long",
    "longue", "court", "courte", "même", "propre", "important", "importante",
]

VAGUE_NOUNS = ["chose", "choses", "façon", "manière", "partie", "parties", "fois", "truc"]

FUNCTION_WORDS = FunctionWords.from_lists(
    "fr",
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
