"""
English function words.
"""

from __future__ import annotations

from .models import FunctionWords

ARTICLES = ["the", "an", "a"]

CARDINAL_NUMERALS = [
    "zero", "one", "two", "three", "four", "five", "six", "seven", "eight", "nine", "ten",
    "eleven", "twelve", "thirteen", "fourteen", "fifteen", "sixteen", "seventeen", "eighteen",
    "nineteen", "twenty", "thirty", "forty", "fifty", "sixty", "seventy", "eighty", "ninety",
    "hundred", "hundreds", "thousand", "thousands", "million", "millions", "billion", "billions",
]

ORDINAL_NUMERALS = [
    "first", "second", "third", "fourth", "fifth", "sixth", "seventh", "eighth", "ninth",
    "tenth", "eleventh", "twelfth", "thirteenth", "fourteenth", "fifteenth", "sixteenth",
    "seventeenth", "eighteenth", "nineteenth", "twentieth", "hundredth", "thousandth", "last",
]

PERSONAL_PRONOUNS_NOMINATIVE = ["i", "you", "he", "she", "it", "we", "they"]
PERSONAL_PRONOUNS_ACCUSATIVE = ["me", "him", "us", "them"]
DEMONSTRATIVE_PRONOUNS = ["this", "that", "these", "those"]
POSSESSIVE_PRONOUNS = [
    "my", "your", "his", "her", "its", "their", "our", "mine", "yours", "hers", "theirs", "ours",
]

QUANTIFIERS = [
    "all", "some", "many", "lot", "lots", "ton", "tons", "bit", "no", "every", "enough",
    "little", "much", "more", "most", "plenty", "several", "few", "fewer", "kind", "kinds",
]

REFLEXIVE_PRONOUNS = [
    "myself", "yourself", "himself", "herself", "itself", "oneself", "ourselves",
    "yourselves", "themselves",
]

INDEFINITE_PRONOUNS = [
    "none", "nobody", "everyone", "everybody", "someone", "somebody", "anyone", "anybody",
    "nothing", "everything", "something", "anything", "each", "other", "whatever",
    "whichever", "whoever", "whomever", "others", "neither", "both", "either", "any", "such",
]

INTERROGATIVE_DETERMINERS = ["which", "what", "whose"]
INTERROGATIVE_PRONOUNS = ["who", "whom"]
INTERROGATIVE_ADVERBS = ["where", "how", "why", "whether", "wherever", "whyever", "however"]
LOCATIVE_ADVERBS = ["there", "here", "whither", "thither", "hither", "whence", "thence"]
PREPOSITIONAL_ADVERBS = ["back", "within", "forward", "backward", "ahead"]

FILTERED_PASSIVE_AUXILIARIES = [
    "am", "is", "are", "was", "were", "been", "get", "gets", "got", "gotten", "be",
    "she's", "he's", "it's", "i'm", "we're", "they're", "you're", "isn't", "weren't",
    "wasn't", "that's", "aren't",
]

OTHER_AUXILIARIES = [
    "can", "cannot", "can't", "could", "couldn't", "could've", "dare", "dares", "dared",
    "do", "don't", "does", "doesn't", "did", "didn't", "done", "have", "haven't", "had",
    "hadn't", "has", "hasn't", "i've", "you've", "we've", "they've", "i'd", "you'd", "he'd",
    "she'd", "it'd", "we'd", "they'd", "would", "wouldn't", "would've", "may", "might",
    "must", "need", "needn't", "needs", "ought", "shall", "shan't", "should", "shouldn't",
    "will", "won't", "i'll", "you'll", "he'll", "she'll", "it'll", "we'll", "they'll",
    "there's", "there're", "there'll", "here's", "here're",
]

COPULA = [
    "appear", "appears", "appeared", "become", "becomes", "became", "come", "comes", "came",
    "keep", "keeps", "kept", "remain", "remains", "remained", "stay", "stays", "stayed",
    "turn", "turns", "turned",
]

PREPOSITIONS = [
    "in", "from", "with", "under", "throughout", "atop", "for", "on", "until", "of", "to",
    "aboard", "about", "above", "abreast", "absent", "across", "adjacent", "after",
    "against", "along", "alongside", "amid", "amidst", "among", "amongst", "around", "as",
    "astride", "at", "behind", "below", "beneath", "beside", "besides", "between", "beyond",
    "by", "circa", "despite", "down", "during", "except", "inside", "into", "less", "like",
    "minus", "near", "notwithstanding", "off", "onto", "opposite", "out", "outside", "over",
    "past", "per", "save", "since", "through", "thru", "till", "toward", "towards",
    "underneath", "unlike", "upon", "versus", "via", "without", "worth",
]

COORDINATING_CONJUNCTIONS = ["and", "or", "and/or", "yet"]
CORRELATIVE_CONJUNCTIONS = ["both", "but", "either", "neither", "nor", "only", "whether"]
SUBORDINATING_CONJUNCTIONS = [
    "after", "although", "when", "as", "if", "though", "because", "before", "even", "since",
    "unless", "whereas", "while",
]

INTERVIEW_VERBS = [
    "say", "says", "said", "saying", "claim", "claims", "claimed", "claiming", "ask", "asks",
    "asked", "asking", "think", "thinks", "thought", "thinking", "explain", "explains",
    "explained", "explaining", "state", "states", "stated", "stating", "tell", "tells",
    "told", "telling", "talk", "talks", "talked", "talking", "mention", "mentions",
    "mentioned", "mentioning",
]

TRANSITION_WORDS = [
    "accordingly", "additionally", "afterward", "afterwards", "albeit", "also", "altogether",
    "another", "basically", "certainly", "chiefly", "comparatively", "concurrently",
    "consequently", "contrarily", "conversely", "correspondingly", "e.g.", "earlier",
    "emphatically", "equally", "especially", "eventually", "evidently", "explicitly",
    "finally", "firstly", "following", "formerly", "forthwith", "fourthly", "further",
    "furthermore", "generally", "hence", "henceforth", "i.e.", "identically", "importantly",
    "including", "indeed", "initially", "instead", "lastly", "later", "lest", "likewise",
    "markedly", "meanwhile", "moreover", "nevertheless", "nonetheless", "obviously",
    "occasionally", "otherwise", "overall", "particularly", "presently", "previously",
    "rather", "regardless", "secondly", "shortly", "significantly", "similarly",
    "simultaneously", "so", "soon", "specifically", "still", "straightaway", "subsequently",
    "surely", "surprisingly", "than", "then", "thereafter", "therefore", "thereupon",
    "thirdly", "thus", "too", "undeniably", "undoubtedly", "unquestionably", "whenever",
]

INTENSIFIERS = [
    "highly", "very", "really", "extremely", "absolutely", "completely", "totally", "utterly",
    "quite", "somewhat", "seriously", "fairly", "fully", "amazingly",
]

DELEXICALIZED_VERBS = [
    "doing", "having", "make", "makes", "made", "making", "take", "takes", "took",
    "taking", "taken", "go", "goes", "went", "going", "gone", "give", "gives", "gave",
    "giving", "given", "put", "puts", "putting", "want", "wants", "wanted", "wanting",
    "likes", "liked", "liking", "let", "lets", "letting", "seem", "seems", "seemed",
    "seeming", "use", "uses", "used", "using", "try", "tries", "tried", "trying",
]

CONTINUOUS_VERBS = [
    "appearing", "becoming", "being", "coming", "getting", "keeping", "remaining",
    "staying", "turning",
]

# Adjectives and adverbs that rarely open a meaningful phrase.
GENERAL_ADJECTIVES_ADVERBS = [
    "new", "newer", "newest", "old", "older", "oldest", "previous", "good", "well", "better",
    "best", "big", "bigger", "biggest", "easy", "easier", "easiest", "fast", "faster",
    "fastest", "far", "hard", "harder", "hardest", "least", "own", "large", "larger",
    "largest", "long", "longer", "longest", "low", "lower", "lowest", "high", "higher",
    "highest", "regular", "simple", "simpler", "simplest", "small", "smaller", "smallest",
    "tiny", "tinier", "tiniest", "short", "shorter", "shortest", "main", "actual", "nice",
    "nicer", "nicest", "real", "same", "able", "certain", "usual", "so-called", "mainly",
    "mostly", "recent", "anymore", "complete", "lately", "possible", "commonly",
    "constantly", "continually", "directly", "easily", "nearly", "slightly", "somewhere",
    "estimated", "latest", "different", "similar", "widely", "bad", "worse", "worst",
    "great",
]

# Adverbs that rarely close a meaningful phrase.
GENERAL_ADVERBS_FOLLOWING = [
    "again", "already", "currently", "frequently", "often", "usually", "always", "sometimes",
    "ever", "never", "just", "now", "anyway", "though",
]

ADVERBIAL_GENITIVES = ["once", "twice", "thrice"]

INTERJECTIONS = [
    "oh", "wow", "tut-tut", "tsk-tsk", "ugh", "whew", "phew", "yeah", "yea", "shh", "oops",
    "ouch", "aha", "yikes",
]

RECIPE_WORDS = [
    "tbs", "tbsp", "spk", "lb", "qt", "pk", "bu", "oz", "pt", "mod", "doz", "hr", "ml", "dl",
    "cl", "mg", "kg", "quart",
]

TIME_WORDS = [
    "seconds", "minute", "minutes", "hour", "hours", "day", "days", "week", "weeks", "month",
    "months", "year", "years", "today", "tomorrow", "yesterday",
]

VAGUE_NOUNS = [
    "thing", "things", "way", "ways", "matter", "case", "likelihood", "ones", "piece",
    "pieces", "stuff", "times", "part", "parts", "percent", "instance", "instances",
    "aspect", "aspects", "item", "items", "idea", "theme", "person",
]

TITLES = ["mr", "mrs", "ms", "miss", "dr", "prof", "jr", "sr"]

MISCELLANEOUS = [
    "not", "yes", "sure", "top", "bottom", "ok", "okay", "amen", "aka", "etc", "etcetera",
    "sorry", "please",
]

FUNCTION_WORDS = FunctionWords.from_lists(
    "en",
    filtered_anywhere=(
        TRANSITION_WORDS
        + ADVERBIAL_GENITIVES
        + PERSONAL_PRONOUNS_NOMINATIVE
        + PERSONAL_PRONOUNS_ACCUSATIVE
        + REFLEXIVE_PRONOUNS
        + INTERJECTIONS
        + CARDINAL_NUMERALS
        + FILTERED_PASSIVE_AUXILIARIES
        + OTHER_AUXILIARIES
        + COPULA
        + INTERVIEW_VERBS
        + DELEXICALIZED_VERBS
        + INDEFINITE_PRONOUNS
        + CORRELATIVE_CONJUNCTIONS
        + SUBORDINATING_CONJUNCTIONS
        + INTERROGATIVE_DETERMINERS
        + INTERROGATIVE_PRONOUNS
        + INTERROGATIVE_ADVERBS
        + LOCATIVE_ADVERBS
        + PREPOSITIONAL_ADVERBS
        + RECIPE_WORDS
        + TIME_WORDS
        + VAGUE_NOUNS
        + TITLES
        + MISCELLANEOUS
    ),
    filtered_at_beginning=GENERAL_ADJECTIVES_ADVERBS,
    filtered_at_ending=ORDINAL_NUMERALS + CONTINUOUS_VERBS + GENERAL_ADVERBS_FOLLOWING,
    filtered_at_beginning_and_ending=(
        ARTICLES
        + PREPOSITIONS
        + COORDINATING_CONJUNCTIONS
        + DEMONSTRATIVE_PRONOUNS
        + INTENSIFIERS
        + QUANTIFIERS
        + POSSESSIVE_PRONOUNS
    ),
)
