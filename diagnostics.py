SINGLE_WORD = ("Single word cannot form a complete sentence. "
               "Expected: Determiner + Noun + Verb (+ optional Noun Phrase)")
MISSING_DETERMINER = "Missing determiner ('the' or 'a')"
MISSING_NOUN = "Missing noun"
MISSING_VERB = "Missing verb"
NO_NOUN_PHRASE = "Cannot form noun phrase. Expected: Determiner + Noun"
BAD_STRUCTURE = "Invalid sentence structure. Expected: Noun Phrase + Verb Phrase"

DETERMINER = 'Det'
NOUN = 'N'
VERB = 'V'
NOUN_PHRASE = 'NP'


def diagnose(chart):
    '''
    Explains why a completed chart does not accept its sentence.

    Returns (message, position). Every word already has a lexical category
    when this runs, so the position is 0 unless some single-word cell is empty.
    '''
    return error_message(chart), error_position(chart)


def error_message(chart):
    n = chart.n
    if n == 1:
        return SINGLE_WORD

    has_det = has_n = has_v = False
    for i in range(n):
        cell = chart.get(i, i)
        has_det = has_det or DETERMINER in cell
        has_n = has_n or NOUN in cell
        has_v = has_v or VERB in cell

    if not has_det:
        return MISSING_DETERMINER
    if not has_n:
        return MISSING_NOUN
    if not has_v:
        return MISSING_VERB

    has_np = any(NOUN_PHRASE in chart.get(i, j)
                 for length in range(2, n + 1)
                 for i, j in chart.spans(length))
    if not has_np:
        return NO_NOUN_PHRASE

    return BAD_STRUCTURE


def error_position(chart):
    for i in range(chart.n):
        if not chart.get(i, i):
            return i
    return 0
