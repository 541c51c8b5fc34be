"""
Spanish function words.
"""

from __future__ import annotations

from .models import FunctionWords

ARTICLES = ["el", "la", "los", "las", "un", "una", "unos", "unas", "lo", "al", "del"]

CARDINAL_NUMERALS = [
    "dos", "tres", "cuatro", "cinco", "seis", "siete", "ocho", "nueve", "diez", "once",
    "doce", "veinte", "treinta", "cuarenta", "cincuenta", "cien", "ciento", "mil", "millón",
    "millones",
]

ORDINAL_NUMERALS = [
    "primero", "primera", "primer", "segundo", "segunda", "tercero", "tercera", "tercer",
    "cuarto", "cuarta", "quinto", "quinta", "último", "última",
]

PERSONAL_PRONOUNS = [
    "yo", "tú", "él", "ella", "usted", "nosotros", "nosotras", "vosotros", "vosotras",
    "ellos", "ellas", "ustedes", "me", "te", "le", "les", "nos", "os", "mí", "ti",
]

REFLEXIVE_PRONOUNS = ["se", "sí", "mismo", "misma", "mismos", "mismas"]

DEMONSTRATIVE_PRONOUNS = [
    "este", "esta", "estos", "estas", "ese", "esa", "esos", "esas", "aquel", "aquella",
    "aquellos", "aquellas", "esto", "eso", "aquello",
]

POSSESSIVE_PRONOUNS = [
    "mi", "mis", "tu", "tus", "su", "sus", "nuestro", "nuestra", "nuestros", "nuestras",
    "vuestro", "vuestra", "suyo", "suya",
]

QUANTIFIERS = [
    "todo", "toda", "todos", "todas", "mucho", "mucha", "muchos", "muchas", "poco", "poca",
    "pocos", "pocas", "varios", "varias", "cada", "ningún", "ninguna", "bastante", "más",
    "menos", "demasiado", "algunos", "algunas",
]

INDEFINITE_PRONOUNS = [
    "alguien", "nadie", "nada", "algo", "alguno", "alguna", "otro", "otra", "otros",
    "otras", "cualquier", "cualquiera", "ambos",
]

INTERROGATIVES = [
    "qué", "quién", "quiénes", "cuál", "cuáles", "dónde", "cómo", "cuándo", "cuánto",
    "cuánta",
]

PREPOSITIONS = [
    "a", "ante", "bajo", "con", "contra", "de", "desde", "durante", "en", "entre", "hacia",
    "hasta", "mediante", "para", "por", "según", "sin", "sobre", "tras",
]

CONJUNCTIONS = [
    "y", "e", "o", "u", "pero", "sino", "ni", "que", "porque", "aunque", "si", "como",
    "cuando", "mientras", "pues",
]

AUXILIARIES = [
    "soy", "eres", "es", "somos", "sois", "son", "era", "eran", "fue", "fueron", "sido",
    "estoy", "estás", "está", "estamos", "están", "estaba", "estado", "he", "has", "ha",
    "hemos", "habéis", "han", "había", "habían", "habido", "puede", "pueden", "podría",
    "debe", "deben", "debería", "quiere", "quieren", "hay", "ser", "estar", "haber",
]

TRANSITION_WORDS = [
    "además", "también", "luego", "después", "entonces", "embargo",
    "finalmente", "primero", "así", "incluso", "todavía", "aún", "igualmente", "asimismo",
    "consecuentemente",
]

INTENSIFIERS = ["muy", "tan", "realmente", "bastante", "sumamente", "demasiado"]

ADVERBS = [
    "no", "sí", "nunca", "siempre", "aquí", "allí", "ahí", "ahora", "hoy", "ayer",
    "mañana", "ya", "bien", "mal", "solo", "sólo",
]

GENERAL_ADJECTIVES = [
    "nuevo", "nueva", "nuevos", "nuevas", "viejo", "vieja", "bueno", "buena", "buen",
    "mejor", "mejores", "gran", "grande", "grandes", "pequeño", "pequeña", "fácil",
    "simple", "rápido", "largo", "larga", "corto", "corta", "propio", "propia",
    "importante", "diferentes",
]

VAGUE_NOUNS = ["cosa", "cosas", "manera", "forma", "parte", "partes", "vez", "veces"]

FUNCTION_WORDS = FunctionWords.from_lists(
    "es",
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
    unfiltered=["uno"],
)
